"""Component source generation from a single SVG document.

Each output dialect is a small template function from
(name, attributes, content, size) to source text. `synthesize` extracts the
`<svg ...>...</svg>` envelope, lifts `width`, `height` and `className` out into
props, and hands the rest to the dialect's template.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

from svgx.convert.attributes import to_component_dialect

DEFAULT_COMPONENT_NAME: Final[str] = "Icon"
DEFAULT_SIZE: Final[int] = 24
HTML_TITLE: Final[str] = "SVG Icon"

_ENVELOPE_RE = re.compile(r"<svg([^>]*)>([\s\S]*)</svg>")
_LIFTED_ATTR_RES = (
    re.compile(r'\s*width="[^"]*"'),
    re.compile(r'\s*height="[^"]*"'),
    re.compile(r'\s*className="[^"]*"'),
)


class Dialect(str, Enum):
    REACT_JS = "react-js"
    REACT_TS = "react-ts"
    NEXTJS = "nextjs"
    HTML = "html"
    JSX_MARKUP = "jsx"


@dataclass(frozen=True)
class ComponentSpec:
    name: str = DEFAULT_COMPONENT_NAME
    dialect: Dialect = Dialect.REACT_TS
    width: int = DEFAULT_SIZE
    height: int = DEFAULT_SIZE


@dataclass(frozen=True)
class SvgEnvelope:
    attributes: str
    content: str


def extract_envelope(jsx_code: str) -> SvgEnvelope | None:
    """Split component-dialect markup into outer attributes and inner content.

    Returns None when the text has no `<svg ...>...</svg>` shape.
    """
    m = _ENVELOPE_RE.search(jsx_code)
    if m is None:
        return None
    attrs = m.group(1) or ""
    for pattern in _LIFTED_ATTR_RES:
        attrs = pattern.sub("", attrs)
    return SvgEnvelope(attributes=attrs.strip(), content=m.group(2) or "")


def _indent_lines(content: str, prefix: str) -> str:
    return "\n".join(prefix + line if line else "" for line in content.split("\n"))


def _attr_tail(attributes: str, prefix: str) -> str:
    return f"\n{prefix}{attributes}" if attributes else ""


def _render_react_js(spec: ComponentSpec, env: SvgEnvelope) -> str:
    return (
        f"export const {spec.name} = ({{ className, width = {spec.width}, height = {spec.height} }}) => (\n"
        "  <svg\n"
        "    className={className}\n"
        "    width={width}\n"
        f"    height={{height}}{_attr_tail(env.attributes, '    ')}\n"
        "  >\n"
        f"{_indent_lines(env.content, '    ')}\n"
        "  </svg>\n"
        ");"
    )


def _render_react_ts(spec: ComponentSpec, env: SvgEnvelope) -> str:
    return (
        f"interface {spec.name}Props {{\n"
        "  className?: string;\n"
        "  width?: number;\n"
        "  height?: number;\n"
        "}\n"
        "\n"
        f"export const {spec.name} = ({{\n"
        "  className,\n"
        f"  width = {spec.width},\n"
        f"  height = {spec.height}\n"
        f"}}: {spec.name}Props) => (\n"
        "  <svg\n"
        "    className={className}\n"
        "    width={width}\n"
        f"    height={{height}}{_attr_tail(env.attributes, '    ')}\n"
        "  >\n"
        f"{_indent_lines(env.content, '    ')}\n"
        "  </svg>\n"
        ");"
    )


def _render_nextjs(spec: ComponentSpec, env: SvgEnvelope) -> str:
    return (
        "'use client';\n"
        "\n"
        f"interface {spec.name}Props {{\n"
        "  className?: string;\n"
        "  size?: number;\n"
        "}\n"
        "\n"
        f"export function {spec.name}({{ className, size = {spec.width} }}: {spec.name}Props) {{\n"
        "  return (\n"
        "    <svg\n"
        "      className={className}\n"
        "      width={size}\n"
        f"      height={{size}}{_attr_tail(env.attributes, '      ')}\n"
        "    >\n"
        f"{_indent_lines(env.content, '      ')}\n"
        "    </svg>\n"
        "  );\n"
        "}"
    )


_COMPONENT_TEMPLATES: dict[Dialect, Callable[[ComponentSpec, SvgEnvelope], str]] = {
    Dialect.REACT_JS: _render_react_js,
    Dialect.REACT_TS: _render_react_ts,
    Dialect.NEXTJS: _render_nextjs,
}


def generate_html(svg_code: str) -> str:
    """Wrap raw SVG markup, unchanged, in a minimal standalone HTML page."""
    if not svg_code.strip():
        return ""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="UTF-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"  <title>{HTML_TITLE}</title>\n"
        "</head>\n"
        "<body>\n"
        f"  {svg_code}\n"
        "</body>\n"
        "</html>"
    )


def synthesize_component(svg_body: str, spec: ComponentSpec) -> str:
    if not svg_body.strip():
        return ""
    if spec.dialect is Dialect.HTML:
        return generate_html(svg_body)

    jsx_code = to_component_dialect(svg_body)
    if spec.dialect is Dialect.JSX_MARKUP:
        return jsx_code

    env = extract_envelope(jsx_code)
    if env is None:
        return ""
    return _COMPONENT_TEMPLATES[spec.dialect](spec, env)


def synthesize(svg_body: str, dialect: Dialect | str, name: str | None = None) -> str:
    """Render `svg_body` as component source in the given dialect.

    Returns an empty string when the body is blank, when the dialect is unknown,
    or when a component dialect cannot find the `<svg>` envelope.
    """
    try:
        d = Dialect(dialect)
    except ValueError:
        return ""
    return synthesize_component(svg_body, ComponentSpec(name=name or DEFAULT_COMPONENT_NAME, dialect=d))
