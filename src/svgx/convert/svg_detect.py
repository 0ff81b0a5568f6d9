"""SVG text detection and splitting of pasted multi-document text."""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

_SVG_OPEN = "<svg"
_SVG_CLOSE = "</svg>"

_SVG_OPEN_RE = re.compile(r"<svg\b", flags=re.IGNORECASE)
_SVG_CLOSE_RE = re.compile(r"</svg\s*>", flags=re.IGNORECASE)
# Only whitespace, an XML prolog, a DOCTYPE or comments may precede the first <svg.
_DOCUMENT_PREFIX_RE = re.compile(
    r"\A(?:\s|<\?xml[^>]*\?>|<!DOCTYPE[^>\[]*(?:\[[\s\S]*?\])?\s*>|<!--[\s\S]*?-->)*\Z",
    flags=re.IGNORECASE,
)
_SVG_OPEN_TAG_RE = re.compile(r"<svg\b[^>]*>", flags=re.IGNORECASE)

_log = logging.getLogger("svgx.detect")


def _default_hook(message: str) -> None:
    _log.debug(message)


def looks_like_svg_text(text: str) -> bool:
    """Heuristic check for SVG markup text in a clipboard string."""
    if not text:
        return False
    if _SVG_OPEN_RE.search(text) is None:
        return False
    # Close tag is optional in some snippets, but requiring it reduces false positives.
    if _SVG_CLOSE_RE.search(text) is None:
        return False
    return True


def looks_like_svg_document(text: str) -> bool:
    """True if `text` is SVG markup as saved or copied, not source code embedding it.

    Rejects JSX/TSX components (including our own output) so they are never
    converted a second time: the first `<svg` must only be preceded by markup
    preamble, and its opening tag must not carry `{...}` JSX expressions.
    """
    if not looks_like_svg_text(text):
        return False
    open_match = _SVG_OPEN_RE.search(text)
    if open_match is None or _DOCUMENT_PREFIX_RE.match(text[: open_match.start()]) is None:
        return False
    tag = _SVG_OPEN_TAG_RE.match(text, open_match.start())
    return tag is not None and "{" not in tag.group(0)


def is_valid_svg(content: str) -> bool:
    """True if `content` contains both a literal `<svg` and `</svg>`."""
    trimmed = content.strip()
    return _SVG_OPEN in trimmed and _SVG_CLOSE in trimmed


def split_svg_documents(
    text: str,
    *,
    on_event: Optional[Callable[[str], None]] = None,
) -> list[str]:
    """Split free text into the `<svg>...</svg>` documents it contains.

    Every literal `</svg>` closes the nearest preceding `<svg`. Text between
    documents is discarded, and a trailing fragment without a closing tag is
    never turned into a document. Nested `<svg>` elements and `</svg>` inside
    attribute values are not handled.

    `on_event` receives diagnostic messages; by default they go to the
    `svgx.detect` logger at DEBUG level.
    """
    emit = on_event or _default_hook

    if not text.strip():
        emit("split empty_input")
        return []

    emit(f"split input_chars={len(text)}")

    # The last partition has no closing tag after it.
    parts = [p for p in text.split(_SVG_CLOSE)[:-1] if p.strip()]
    emit(f"split parts={len(parts)}")

    docs: list[str] = []
    for part in parts:
        trimmed = part.strip()
        start = trimmed.find(_SVG_OPEN)
        if start == -1:
            continue
        doc = trimmed[start:] + _SVG_CLOSE
        if _SVG_OPEN in doc:
            docs.append(doc)

    emit(f"split documents={len(docs)}")
    return docs
