"""Re-indentation of flat tag-delimited markup.

The formatter is regex driven: it tracks nesting from tag shapes alone and does
not parse. It only handles the nesting patterns this tool produces and is not a
general XML/HTML pretty-printer.
"""

from __future__ import annotations

import re
from typing import Protocol

_TAG_BOUNDARY_RE = re.compile(r"(>)(<)(/*)")
_CLOSING_RE = re.compile(r"^</\w")
_SAME_LINE_CLOSE_RE = re.compile(r"^<\w[^>]*[^/]>.*</\w")
_OPENING_RE = re.compile(r"^<\w")


class Formatter(Protocol):
    def format(self, markup: str, indent_width: int = 2) -> str: ...


class RegexIndentFormatter:
    """Puts every tag on its own line and indents by nesting depth."""

    def format(self, markup: str, indent_width: int = 2) -> str:
        if not markup or not markup.strip():
            return ""

        pad_unit = " " * indent_width
        text = _TAG_BOUNDARY_RE.sub("\\1\n\\2\\3", markup)

        out: list[str] = []
        depth = 0
        for line in text.split("\n"):
            node = line.strip()
            if not node:
                continue

            step = 0
            if _CLOSING_RE.match(node):
                depth -= 1
            elif _SAME_LINE_CLOSE_RE.match(node):
                step = 0
            elif _OPENING_RE.match(node) and "/>" not in node:
                step = 1

            out.append(pad_unit * max(0, depth) + node)
            depth += step

        return "\n".join(out).strip()


_default_formatter: Formatter = RegexIndentFormatter()


def format_markup(markup: str, indent_width: int = 2, *, formatter: Formatter | None = None) -> str:
    return (formatter or _default_formatter).format(markup, indent_width)


def format_jsx(jsx: str) -> str:
    return format_markup(jsx, 2)


def format_html(html: str) -> str:
    return format_markup(html, 2)
