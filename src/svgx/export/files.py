"""Qt-free file helpers shared by auto-save and bulk export."""

from __future__ import annotations

import os
import time
from datetime import datetime
from pathlib import Path


def generate_output_filename(svg_hash: str, extension: str, *, now: datetime | None = None) -> str:
    ts = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    short = (svg_hash or "unknown")[:10]
    ext = extension.lstrip(".") or "txt"
    return f"{ts}_{short}.{ext}"


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """Write `data` to a sibling temp file, then move it over `path`."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.parent / f".{path.name}.tmp.{os.getpid()}.{time.time_ns()}"
    try:
        tmp_path.write_bytes(data)
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
