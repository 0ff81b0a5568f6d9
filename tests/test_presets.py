from svgx.convert.presets import (
    ComponentSpec,
    Dialect,
    extract_envelope,
    generate_html,
    synthesize,
    synthesize_component,
)

STAR = '<svg viewBox="0 0 24 24" width="24" height="24"><path d="M0 0"/></svg>'


def test_react_ts_star() -> None:
    out = synthesize(STAR, "react-ts", "Star")
    assert "interface StarProps {" in out
    assert "export const Star = ({" in out
    assert "}: StarProps) => (" in out
    assert 'width="24"' not in out
    assert 'height="24"' not in out
    assert '    viewBox="0 0 24 24"\n  >' in out
    assert "    <path d=\"M0 0\"/>\n  </svg>\n);" in out


def test_react_js_exact_output() -> None:
    body = '<svg viewBox="0 0 24 24" class="icon" stroke-width="2"><path d="M0 0"/></svg>'
    assert synthesize(body, Dialect.REACT_JS) == (
        "export const Icon = ({ className, width = 24, height = 24 }) => (\n"
        "  <svg\n"
        "    className={className}\n"
        "    width={width}\n"
        "    height={height}\n"
        '    viewBox="0 0 24 24" strokeWidth="2"\n'
        "  >\n"
        '    <path d="M0 0"/>\n'
        "  </svg>\n"
        ");"
    )


def test_react_js_without_remaining_attributes() -> None:
    out = synthesize('<svg width="10"><g/></svg>', "react-js", "Dot")
    assert "    height={height}\n  >\n    <g/>\n  </svg>" in out


def test_nextjs_uses_size_prop() -> None:
    out = synthesize(STAR, "nextjs", "Star")
    assert out.startswith("'use client';\n\ninterface StarProps {")
    assert "  size?: number;" in out
    assert "export function Star({ className, size = 24 }: StarProps) {" in out
    assert "      width={size}\n      height={size}\n" in out
    assert '\n      <path d="M0 0"/>\n    </svg>' in out


def test_multiline_content_is_reindented() -> None:
    body = '<svg viewBox="0 0 1 1">\n<path d="M0 0"/>\n</svg>'
    out = synthesize(body, "react-js")
    assert '  >\n\n    <path d="M0 0"/>\n\n  </svg>' in out


def test_html_wraps_original_markup() -> None:
    body = '<svg class="x" stroke-width="1"></svg>'
    out = synthesize(body, "html", "Ignored")
    assert out.startswith("<!DOCTYPE html>\n")
    assert "<title>SVG Icon</title>" in out
    assert f"<body>\n  {body}\n</body>" in out
    assert generate_html(body) == out


def test_jsx_markup_dialect_only_renames() -> None:
    assert synthesize('<svg class="a"></svg>', "jsx") == '<svg className="a"></svg>'


def test_default_name_is_icon() -> None:
    assert "export const Icon = " in synthesize(STAR, "react-js")
    assert "export const Icon = " in synthesize(STAR, "react-js", "")


def test_failure_modes_return_empty_string() -> None:
    assert synthesize("<div>nope</div>", "react-ts", "X") == ""
    assert synthesize("   ", "react-ts") == ""
    assert synthesize("  ", "html") == ""
    assert synthesize(STAR, "vue") == ""


def test_component_spec_defaults_and_custom_size() -> None:
    spec = ComponentSpec()
    assert (spec.name, spec.dialect, spec.width, spec.height) == ("Icon", Dialect.REACT_TS, 24, 24)

    out = synthesize_component(STAR, ComponentSpec(name="Big", dialect=Dialect.REACT_JS, width=48, height=32))
    assert "({ className, width = 48, height = 32 })" in out


def test_extract_envelope() -> None:
    env = extract_envelope('<svg className="c" width="1" viewBox="0 0 1 1"><g/></svg>')
    assert env is not None
    assert env.attributes == 'viewBox="0 0 1 1"'
    assert env.content == "<g/>"
    assert extract_envelope("<svg>") is None
