"""Lossless-ish SVG optimization and size metrics.

The optimizer removes content that does not affect rendering: comments,
processing instructions, `<metadata>`, editor namespaces and blank text. It
also rounds numeric attributes to a fixed number of decimals.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from lxml import etree

SVG_NS: Final[str] = "http://www.w3.org/2000/svg"

EDITOR_NAMESPACES: Final[tuple[str, ...]] = (
    "http://www.inkscape.org/namespaces/inkscape",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://ns.adobe.com/AdobeIllustrator/10.0/",
    "http://www.bohemiancoding.com/sketch/ns",
)

NUMERIC_ATTRS: Final[frozenset[str]] = frozenset(
    {
        "d", "points", "viewBox", "transform",
        "x", "y", "x1", "y1", "x2", "y2", "dx", "dy",
        "width", "height", "r", "rx", "ry", "cx", "cy",
        "opacity", "fill-opacity", "stroke-opacity", "stroke-width", "stroke-miterlimit",
        "offset", "stdDeviation",
    }
)

_NUM_TOKEN_RE = re.compile(r"[-+]?(?:\d*\.\d+|\d+\.|\d+)(?:[eE][-+]?\d+)?")
_PATH_RE = re.compile(r"<path\b")


class SvgOptimizeError(ValueError):
    """Raised when markup cannot be parsed for optimization."""


@dataclass(frozen=True)
class OptimizationMetrics:
    original_size: int
    optimized_size: int
    reduction: float
    path_count: int


@dataclass(frozen=True)
class OptimizationResult:
    original: str
    optimized: str
    original_size: int
    optimized_size: int
    reduction: int
    path_count: int


def _byte_size(text: str) -> int:
    return len(text.encode("utf-8"))


def _localname(name: str) -> str:
    if "}" in name:
        return name.split("}", 1)[1]
    return name


def _namespace(name: str) -> str:
    if name.startswith("{"):
        return name[1:].split("}", 1)[0]
    return ""


def _round_token(tok: str, precision: int) -> str:
    # Integers pass through untouched.
    if "." not in tok and "e" not in tok and "E" not in tok:
        return tok
    try:
        v = float(tok)
    except ValueError:
        return tok
    out = f"{v:.{precision}f}".rstrip("0").rstrip(".")
    if out in ("-0", "", "-"):
        out = "0"
    return out


def round_numbers(value: str, precision: int) -> str:
    return _NUM_TOKEN_RE.sub(lambda m: _round_token(m.group(0), precision), value)


def _strip_editor_content(root: etree._Element) -> None:
    for el in list(root.iter()):
        if not isinstance(el.tag, str):
            continue
        parent = el.getparent()
        if parent is not None and (_namespace(el.tag) in EDITOR_NAMESPACES or _localname(el.tag) == "metadata"):
            parent.remove(el)
            continue
        for attr in list(el.attrib):
            if _namespace(attr) in EDITOR_NAMESPACES:
                del el.attrib[attr]


def _round_attributes(root: etree._Element, precision: int) -> None:
    for el in root.iter():
        if not isinstance(el.tag, str):
            continue
        for attr, val in list(el.attrib.items()):
            if _localname(attr) in NUMERIC_ATTRS:
                el.set(attr, round_numbers(val, precision))


def _drop_empty_defs(root: etree._Element) -> None:
    for defs in root.findall(f".//{{{SVG_NS}}}defs") + root.findall(".//defs"):
        if len(defs) == 0 and not (defs.text or "").strip():
            parent = defs.getparent()
            if parent is not None:
                parent.remove(defs)


def optimize_markup(svg_text: str, *, precision: int = 3) -> str:
    """Return compact, cleaned markup for a single SVG document."""
    parser = etree.XMLParser(
        remove_blank_text=True,
        remove_comments=True,
        remove_pis=True,
        resolve_entities=False,
        no_network=True,
    )
    try:
        root = etree.fromstring(svg_text.strip().encode("utf-8"), parser)
    except etree.XMLSyntaxError as e:
        raise SvgOptimizeError(f"Could not parse SVG: {e}") from e
    if _localname(root.tag) != "svg":
        raise SvgOptimizeError(f"Root element is <{_localname(root.tag)}>, expected <svg>.")

    _strip_editor_content(root)
    _drop_empty_defs(root)
    _round_attributes(root, precision)
    etree.cleanup_namespaces(root)
    return etree.tostring(root, encoding="unicode")


def optimize_svg(svg_text: str, *, precision: int = 3) -> OptimizationResult:
    optimized = optimize_markup(svg_text, precision=precision)
    original_size = _byte_size(svg_text)
    optimized_size = _byte_size(optimized)
    reduction = 0
    if original_size > 0:
        reduction = round((original_size - optimized_size) / original_size * 100)
    return OptimizationResult(
        original=svg_text,
        optimized=optimized,
        original_size=original_size,
        optimized_size=optimized_size,
        reduction=max(0, reduction),
        path_count=len(_PATH_RE.findall(optimized)),
    )


def get_optimization_metrics(original: str, optimized: str) -> OptimizationMetrics:
    original_size = _byte_size(original)
    optimized_size = _byte_size(optimized)
    reduction = 0.0
    if original_size > 0:
        reduction = (original_size - optimized_size) / original_size * 100
    return OptimizationMetrics(
        original_size=original_size,
        optimized_size=optimized_size,
        reduction=max(0.0, reduction),
        path_count=len(_PATH_RE.findall(optimized)),
    )


def format_bytes(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 B"
    sizes = ("B", "KB", "MB")
    i = 0
    scaled = float(num_bytes)
    while scaled >= 1024 and i < len(sizes) - 1:
        scaled /= 1024
        i += 1
    value = f"{scaled:.2f}".rstrip("0").rstrip(".")
    return f"{value} {sizes[i]}"
