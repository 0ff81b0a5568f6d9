"""File and component naming for bulk export and bulk rename."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

_SVG_EXT_RE = re.compile(r"\.svg$", flags=re.IGNORECASE)
_UNSAFE_RE = re.compile(r"[^a-zA-Z0-9\-_]")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_WORD_SPLIT_RE = re.compile(r"[-_\s]")


class NamingConvention(str, Enum):
    ORIGINAL = "original"
    KEBAB = "kebab-case"
    PASCAL = "PascalCase"
    CAMEL = "camelCase"


class RenamePattern(str, Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"
    REPLACE = "replace"
    NUMBERING = "numbering"


def strip_svg_extension(file_name: str) -> str:
    return _SVG_EXT_RE.sub("", file_name)


def _pascal(base: str) -> str:
    return "".join(w[:1].upper() + w[1:].lower() for w in _WORD_SPLIT_RE.split(base))


def convert_file_name(file_name: str, convention: NamingConvention | str) -> str:
    """Convert a file name into an identifier-friendly base name.

    The `.svg` extension is dropped and every character outside
    `[a-zA-Z0-9-_]` becomes `-` before the convention is applied. Unknown
    conventions behave like `original`.
    """
    base = _UNSAFE_RE.sub("-", strip_svg_extension(file_name))

    if convention == NamingConvention.KEBAB:
        out = _CAMEL_BOUNDARY_RE.sub(r"\1-\2", base).lower()
        out = re.sub(r"[_\s]+", "-", out)
        return re.sub(r"-+", "-", out)
    if convention == NamingConvention.PASCAL:
        return _pascal(base)
    if convention == NamingConvention.CAMEL:
        pascal = _pascal(base)
        return pascal[:1].lower() + pascal[1:]
    return base


def bulk_rename(
    names: Sequence[str],
    pattern: RenamePattern | str,
    *,
    prefix: str = "",
    suffix: str = "",
    find: str = "",
    replace: str = "",
    start: int = 1,
    padding: int = 2,
) -> list[str]:
    """Apply one rename pattern to every name; results always end in `.svg`.

    `find` is a regular expression; an invalid one raises `re.error`.
    """
    p = RenamePattern(pattern)
    find_re = re.compile(find) if (p is RenamePattern.REPLACE and find) else None

    out: list[str] = []
    for index, name in enumerate(names):
        base = strip_svg_extension(name)
        new = base
        if p is RenamePattern.PREFIX and prefix:
            new = f"{prefix}{base}"
        elif p is RenamePattern.SUFFIX and suffix:
            new = f"{base}{suffix}"
        elif p is RenamePattern.REPLACE and find_re is not None:
            new = find_re.sub(replace, base)
        elif p is RenamePattern.NUMBERING:
            new = f"{base}-{str(start + index).zfill(padding)}"
        out.append(f"{new}.svg")
    return out


@dataclass(frozen=True)
class RenameOptions:
    """A bulk rename step applied to file names before export."""

    pattern: RenamePattern | str
    prefix: str = ""
    suffix: str = ""
    find: str = ""
    replace: str = ""
    start: int = 1
    padding: int = 2

    def apply(self, names: Sequence[str]) -> list[str]:
        return bulk_rename(
            names,
            self.pattern,
            prefix=self.prefix,
            suffix=self.suffix,
            find=self.find,
            replace=self.replace,
            start=self.start,
            padding=self.padding,
        )


_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_valid_component_name(name: str) -> bool:
    """True if `name` can be used as a JS/TS identifier for a component."""
    return bool(_IDENTIFIER_RE.match(name))
