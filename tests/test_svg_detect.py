import pytest

from svgx.convert.presets import synthesize
from svgx.convert.svg_detect import (
    is_valid_svg,
    looks_like_svg_document,
    looks_like_svg_text,
    split_svg_documents,
)


def test_svg_detection_basic() -> None:
    s = '<svg width="10" height="10"></svg>'
    assert looks_like_svg_text(s) is True


def test_svg_detection_with_preamble_and_trailing_text() -> None:
    s = 'abc <?xml version="1.0"?>\n<svg></svg>\nxyz'
    assert looks_like_svg_text(s) is True
    assert split_svg_documents(s) == ["<svg></svg>"]


def test_svg_detection_reject_non_svg() -> None:
    assert looks_like_svg_text("hello") is False
    assert split_svg_documents("hello") == []


def test_is_valid_svg() -> None:
    assert is_valid_svg("  <svg></svg>  ") is True
    assert is_valid_svg("<svg>") is False
    assert is_valid_svg("</svg>") is False


def test_split_blank_input() -> None:
    assert split_svg_documents("") == []
    assert split_svg_documents("   ") == []
    assert split_svg_documents("\n\t") == []


def test_split_discards_text_between_documents() -> None:
    assert split_svg_documents("<svg>A</svg>junk<svg>B</svg>") == ["<svg>A</svg>", "<svg>B</svg>"]


def test_split_preserves_order_with_arbitrary_separators() -> None:
    docs = [f'<svg id="d{i}"><rect width="{i}"/></svg>' for i in range(5)]
    text = "\n\n".join(docs[:2]) + " some notes " + "\t".join(docs[2:])
    assert split_svg_documents(text) == docs


def test_split_drops_trailing_unclosed_fragment() -> None:
    assert split_svg_documents("<svg>A</svg>\n<svg>B") == ["<svg>A</svg>"]
    assert split_svg_documents("<svg>no close") == []


def test_split_drops_partitions_without_svg() -> None:
    assert split_svg_documents("hello</svg><svg>x</svg>") == ["<svg>x</svg>"]


def test_split_nested_svg_closes_at_first_close_tag() -> None:
    assert split_svg_documents("<svg><svg>x</svg></svg>") == ["<svg><svg>x</svg>"]


def test_split_reports_to_hook() -> None:
    events: list[str] = []
    split_svg_documents("<svg>A</svg><svg>B</svg>", on_event=events.append)
    assert any("documents=2" in e for e in events)

    events.clear()
    split_svg_documents(" ", on_event=events.append)
    assert events == ["split empty_input"]


STAR = '<svg viewBox="0 0 24 24" class="star"><path stroke-width="2" d="M12 2l3 7h7z"/></svg>'


def test_svg_document_accepts_markup_with_preamble() -> None:
    assert looks_like_svg_document(STAR) is True
    assert looks_like_svg_document(f'\n  <?xml version="1.0" encoding="UTF-8"?>\n{STAR}\n') is True
    assert looks_like_svg_document(f"<!-- Generator: Inkscape -->\n{STAR}") is True
    doctype = '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
    assert looks_like_svg_document(f"{doctype}\n{STAR}") is True
    assert looks_like_svg_document(f'<!DOCTYPE svg [ <!ENTITY ns "x"> ]>\n{STAR}') is True


@pytest.mark.parametrize("dialect", ["react-js", "react-ts", "nextjs", "html"])
def test_svg_document_rejects_generated_components(dialect: str) -> None:
    output = synthesize(STAR, dialect, "Star")
    assert "<svg" in output and "</svg>" in output
    assert looks_like_svg_document(output) is False


def test_svg_document_rejects_source_code_and_expression_props() -> None:
    assert looks_like_svg_document(f"const icon = {STAR};") is False
    assert looks_like_svg_document('<svg width={size} className={className}><path d="M0 0"/></svg>') is False
    assert looks_like_svg_document("<svg {...props}></svg>") is False
    assert looks_like_svg_document("hello") is False


def test_svg_document_prefix_check_stays_fast_on_long_whitespace() -> None:
    text = " " * 50_000 + "x<svg></svg>"
    assert looks_like_svg_document(text) is False
