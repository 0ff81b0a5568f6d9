"""Output mode routing for a single SVG document."""

from __future__ import annotations

from enum import Enum

from svgx.convert.attributes import to_component_dialect
from svgx.convert.formatter import format_markup
from svgx.convert.presets import Dialect, synthesize


class OutputMode(str, Enum):
    PREVIEW = "preview"
    JSX = "jsx"
    HTML = "html"
    REACT_JS = "react-js"
    REACT_TS = "react-ts"
    NEXTJS = "nextjs"


_COMPONENT_MODES: dict[str, Dialect] = {
    OutputMode.REACT_JS.value: Dialect.REACT_JS,
    OutputMode.REACT_TS.value: Dialect.REACT_TS,
    OutputMode.NEXTJS.value: Dialect.NEXTJS,
}

# File extensions used when saving rendered output.
OUTPUT_EXTENSIONS: dict[str, str] = {
    OutputMode.PREVIEW.value: "svg",
    OutputMode.JSX.value: "jsx",
    OutputMode.HTML.value: "svg",
    OutputMode.REACT_JS.value: "jsx",
    OutputMode.REACT_TS.value: "tsx",
    OutputMode.NEXTJS.value: "tsx",
}


def _mode_value(mode: OutputMode | str) -> str:
    return mode.value if isinstance(mode, OutputMode) else str(mode)


def render(svg: str, mode: OutputMode | str, component_name: str | None = None) -> str:
    """Render one SVG document in `mode`.

    `preview` and `html` return the markup unchanged, `jsx` renames attributes
    to the component dialect, and the component modes synthesize source code.
    Unknown modes pass the input through.
    """
    value = _mode_value(mode)
    if value in (OutputMode.PREVIEW.value, OutputMode.HTML.value):
        return svg
    if value == OutputMode.JSX.value:
        return to_component_dialect(svg)
    dialect = _COMPONENT_MODES.get(value)
    if dialect is None:
        return svg
    return synthesize(svg, dialect, component_name)


def render_output(
    svg: str,
    mode: OutputMode | str,
    *,
    component_name: str | None = None,
    pretty: bool = False,
    indent_width: int = 2,
) -> str:
    """`render` plus optional re-indentation of markup-shaped output."""
    out = render(svg, mode, component_name)
    if pretty and _mode_value(mode) in (OutputMode.PREVIEW.value, OutputMode.JSX.value, OutputMode.HTML.value):
        return format_markup(out, indent_width)
    return out


def output_extension(mode: OutputMode | str) -> str:
    return OUTPUT_EXTENSIONS.get(_mode_value(mode), "txt")
