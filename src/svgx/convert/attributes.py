"""Attribute renaming between SVG markup and JSX component dialects."""

from __future__ import annotations

import re
from typing import Final

# (markup name, component name); keys are unique in both directions.
ATTRIBUTE_RENAMES: Final[tuple[tuple[str, str], ...]] = (
    ("class", "className"),
    ("stroke-width", "strokeWidth"),
    ("stroke-linecap", "strokeLinecap"),
    ("stroke-linejoin", "strokeLinejoin"),
    ("fill-rule", "fillRule"),
    ("clip-rule", "clipRule"),
    ("stroke-dasharray", "strokeDasharray"),
    ("stroke-dashoffset", "strokeDashoffset"),
    ("stroke-miterlimit", "strokeMiterlimit"),
    ("fill-opacity", "fillOpacity"),
    ("stroke-opacity", "strokeOpacity"),
    ("stop-color", "stopColor"),
    ("stop-opacity", "stopOpacity"),
    ("font-family", "fontFamily"),
    ("font-size", "fontSize"),
    ("font-weight", "fontWeight"),
    ("text-anchor", "textAnchor"),
    ("xmlns:xlink", "xmlnsXlink"),
    ("xlink:href", "xlinkHref"),
)

MARKUP_TO_COMPONENT: Final[dict[str, str]] = dict(ATTRIBUTE_RENAMES)
COMPONENT_TO_MARKUP: Final[dict[str, str]] = {c: m for m, c in ATTRIBUTE_RENAMES}


def _compile(table: dict[str, str]) -> list[tuple[re.Pattern[str], str]]:
    return [(re.compile(rf"\s{re.escape(src)}="), f" {dst}=") for src, dst in table.items()]


_TO_COMPONENT = _compile(MARKUP_TO_COMPONENT)
_TO_MARKUP = _compile(COMPONENT_TO_MARKUP)


def _rename(text: str, rules: list[tuple[re.Pattern[str], str]]) -> str:
    if not text.strip():
        return ""
    out = text
    for pattern, replacement in rules:
        out = pattern.sub(replacement, out)
    return out


def to_component_dialect(markup: str) -> str:
    """Rewrite `stroke-width=` style attribute names to `strokeWidth=`.

    Matching is literal (`<whitespace><name>=`), not attribute-aware. The
    whitespace character before a renamed attribute becomes a single space.
    """
    return _rename(markup, _TO_COMPONENT)


def to_markup_dialect(component_source: str) -> str:
    """Inverse of `to_component_dialect` for the names in `ATTRIBUTE_RENAMES`."""
    return _rename(component_source, _TO_MARKUP)
