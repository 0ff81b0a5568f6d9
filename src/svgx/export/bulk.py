"""Bulk export of many SVG files into a per-format ZIP archive."""

from __future__ import annotations

import io
import logging
import time
import zipfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from svgx.convert.dispatch import render
from svgx.convert.naming import NamingConvention, RenameOptions, convert_file_name, strip_svg_extension
from svgx.export.files import atomic_write_bytes

_log = logging.getLogger("svgx.bulk")


@dataclass(frozen=True)
class OutputFormat:
    id: str
    label: str
    extension: str
    folder: str


OUTPUT_FORMATS: tuple[OutputFormat, ...] = (
    OutputFormat(id="svg", label="Original SVG", extension="svg", folder="svg"),
    OutputFormat(id="jsx", label="JSX", extension="jsx", folder="jsx"),
    OutputFormat(id="react-js", label="React (JS)", extension="jsx", folder="react-js"),
    OutputFormat(id="react-ts", label="React (TS)", extension="tsx", folder="react-ts"),
    OutputFormat(id="nextjs", label="Next.js", extension="tsx", folder="nextjs"),
)

_FORMATS_BY_ID = {f.id: f for f in OUTPUT_FORMATS}


@dataclass(frozen=True)
class ExportEntry:
    path: str
    content: str


def resolve_formats(format_ids: Iterable[str]) -> list[OutputFormat]:
    """Map format ids to `OutputFormat`s in canonical order; unknown ids raise."""
    wanted = set(format_ids)
    unknown = wanted - set(_FORMATS_BY_ID)
    if unknown:
        raise ValueError(f"Unknown export format(s): {', '.join(sorted(unknown))}")
    return [f for f in OUTPUT_FORMATS if f.id in wanted]


def _generate(svg_text: str, fmt: OutputFormat, component_name: str) -> str:
    if fmt.id == "svg":
        return svg_text
    return render(svg_text, fmt.id, component_name)


def _dedupe_name(name: str, used: set[str], convention: NamingConvention | str) -> str:
    # Case-insensitive so the archive extracts cleanly on Windows and macOS.
    sep = "" if convention in (NamingConvention.PASCAL, NamingConvention.CAMEL) else "-"
    candidate = name
    n = 2
    while candidate.lower() in used:
        candidate = f"{name}{sep}{n}"
        n += 1
    used.add(candidate.lower())
    return candidate


def plan_bulk_export(
    files: Sequence[tuple[str, str]],
    formats: Sequence[OutputFormat],
    convention: NamingConvention | str = NamingConvention.ORIGINAL,
    *,
    rename: RenameOptions | None = None,
    progress: Optional[Callable[[int, int], None]] = None,
) -> list[ExportEntry]:
    """Render every (file name, svg text) pair in every format.

    `rename` is applied to the file names before the naming convention.
    Names that collide after conversion get a numeric suffix (`a-b`, `a-b-2`).
    `progress` is called with (completed, total) after each file/format unit.
    """
    names = [name for name, _ in files]
    if rename is not None:
        names = rename.apply(names)

    total = len(files) * len(formats)
    completed = 0
    used: set[str] = set()
    entries: list[ExportEntry] = []
    for file_name, (_, svg_text) in zip(names, files):
        converted = convert_file_name(strip_svg_extension(file_name), convention)
        unique = _dedupe_name(converted, used, convention)
        if unique != converted:
            _log.info("bulk_name_collision name=%s renamed=%s", converted, unique)
        for fmt in formats:
            content = _generate(svg_text, fmt, unique)
            entries.append(ExportEntry(path=f"{fmt.folder}/{unique}.{fmt.extension}", content=content))
            completed += 1
            if progress is not None:
                progress(completed, total)
    return entries


def build_readme(
    file_count: int,
    formats: Sequence[OutputFormat],
    convention: NamingConvention | str,
    *,
    now: datetime | None = None,
) -> str:
    generated = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    convention_name = convention.value if isinstance(convention, NamingConvention) else str(convention)
    folders = "\n".join(f"- `{f.folder}/` - {f.label} files" for f in formats)
    return (
        "# SVGX Bulk Export\n"
        "\n"
        f"Generated: {generated}\n"
        "\n"
        "## Export Summary\n"
        "\n"
        f"- **Total Files**: {file_count}\n"
        f"- **Formats**: {', '.join(f.label for f in formats)}\n"
        f"- **Naming Convention**: {convention_name}\n"
        "\n"
        "## Folder Structure\n"
        "\n"
        f"{folders}\n"
        "\n"
        "## Usage\n"
        "\n"
        "Each folder contains the converted files in the respective format. "
        "Import and use them in your project as needed.\n"
    )


def default_archive_name(*, now_ms: int | None = None) -> str:
    ms = now_ms if now_ms is not None else time.time_ns() // 1_000_000
    return f"svgx-export-{ms}.zip"


def write_bulk_zip(
    path: Path,
    entries: Sequence[ExportEntry],
    *,
    readme: str | None = None,
) -> Path:
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for entry in entries:
            zf.writestr(entry.path, entry.content)
        if readme is not None:
            zf.writestr("README.md", readme)
    atomic_write_bytes(path, buf.getvalue())
    _log.info("bulk_zip_written path=%s entries=%d", path, len(entries))
    return path


def export_files(
    out_path: Path,
    files: Sequence[tuple[str, str]],
    format_ids: Iterable[str],
    convention: NamingConvention | str = NamingConvention.ORIGINAL,
    *,
    rename: RenameOptions | None = None,
    progress: Optional[Callable[[int, int], None]] = None,
) -> Path:
    """Plan, render and write a bulk export archive in one call."""
    formats = resolve_formats(format_ids)
    if not files or not formats:
        raise ValueError("Nothing to export: select at least one file and one format.")
    entries = plan_bulk_export(files, formats, convention, rename=rename, progress=progress)
    readme = build_readme(len(files), formats, convention)
    return write_bulk_zip(out_path, entries, readme=readme)
