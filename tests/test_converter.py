import pytest

from svgx.config import AppConfig
from svgx.convert.converter import SvgConverter


def test_convert_multiple_documents_jsx() -> None:
    conv = SvgConverter(AppConfig(output_mode="jsx", format_output=False))
    result = conv.convert('x <svg class="a"></svg> y <svg stroke-width="1"></svg> z')
    assert result.output == '<svg className="a"></svg>\n\n<svg strokeWidth="1"></svg>'
    assert result.document_count == 2
    assert result.mode == "jsx"
    assert result.extension == "jsx"
    assert len(result.svg_hash) == 64


def test_convert_component_with_name() -> None:
    conv = SvgConverter(AppConfig(output_mode="react-ts", component_name="Star"))
    result = conv.convert('<svg viewBox="0 0 24 24" width="24"><path d="M0 0"/></svg>')
    assert "interface StarProps" in result.output
    assert result.extension == "tsx"
    assert result.optimization is None


def test_convert_formats_markup_output() -> None:
    conv = SvgConverter(AppConfig(output_mode="preview", format_output=True, indent_width=4))
    assert conv.convert("<svg><g/></svg>").output == "<svg>\n    <g/>\n</svg>"


def test_convert_without_svg_raises() -> None:
    conv = SvgConverter(AppConfig())
    with pytest.raises(ValueError, match="No valid SVG content found"):
        conv.convert("just text")


def test_convert_with_unrenderable_component_raises() -> None:
    conv = SvgConverter(AppConfig(output_mode="react-js"))
    with pytest.raises(ValueError, match="react-js"):
        conv.convert("<svg</svg>")


def test_optimize_success_reports_metrics() -> None:
    conv = SvgConverter(AppConfig(output_mode="preview", optimize=True, format_output=False))
    result = conv.convert('<svg>\n  <!-- note -->\n  <path d="M0.123456 1"/>\n</svg>')
    assert result.output == '<svg><path d="M0.123 1"/></svg>'
    assert result.optimization is not None
    assert result.optimization.path_count == 1


def test_optimize_failure_falls_back_to_input() -> None:
    conv = SvgConverter(AppConfig(output_mode="preview", optimize=True, format_output=False))
    result = conv.convert("<svg><path></svg>")
    assert result.output == "<svg><path></svg>"
    assert result.optimization is None


def test_set_config_snapshots_new_settings() -> None:
    cfg = AppConfig(output_mode="preview", format_output=False)
    conv = SvgConverter(cfg)
    cfg.output_mode = "jsx"
    assert conv.convert('<svg class="a"></svg>').output == '<svg class="a"></svg>'

    conv.set_config(cfg)
    assert conv.convert('<svg class="a"></svg>').output == '<svg className="a"></svg>'
