"""Configuration persistence for svgx.

The configuration is stored in a JSON file under `%APPDATA%\\Svgx\\config.json`.
This keeps settings stable across restarts while remaining easy to inspect or reset.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from svgx.convert.naming import RenameOptions

APP_DIR_NAME: Final[str] = "Svgx"
CONFIG_FILE_NAME: Final[str] = "config.json"

_log = logging.getLogger("svgx.config")


def _default_appdata_dir() -> Path:
    appdata = os.getenv("APPDATA")
    if appdata:
        return Path(appdata)
    return Path.home() / "AppData" / "Roaming"


def get_config_path() -> Path:
    return _default_appdata_dir() / APP_DIR_NAME / CONFIG_FILE_NAME


@dataclass
class AppConfig:
    """User-configurable settings.

    Notes:
    - `output_mode` is one of preview, jsx, html, react-js, react-ts, nextjs.
    - `naming_convention` applies to bulk export file and component names.
    """

    output_mode: str = "react-ts"
    component_name: str = "Icon"
    naming_convention: str = "original"

    optimize: bool = False
    optimize_precision: int = 3
    format_output: bool = True
    indent_width: int = 2

    listen_enabled: bool = False

    save_enabled: bool = False
    save_dir: str = ""

    debounce_ms: int = 200
    # Guards UI responsiveness against huge pasted payloads.
    max_svg_chars: int = 5_000_000

    bulk_formats: list[str] = field(default_factory=lambda: ["svg"])
    # Empty means bulk export keeps the original file names.
    rename_pattern: str = ""
    rename_prefix: str = ""
    rename_suffix: str = ""
    rename_find: str = ""
    rename_replace: str = ""
    rename_start: int = 1
    rename_padding: int = 2

    def to_dict(self) -> dict[str, Any]:
        return {
            "output_mode": self.output_mode,
            "component_name": self.component_name,
            "naming_convention": self.naming_convention,
            "optimize": self.optimize,
            "optimize_precision": self.optimize_precision,
            "format_output": self.format_output,
            "indent_width": self.indent_width,
            "listen_enabled": self.listen_enabled,
            "save_enabled": self.save_enabled,
            "save_dir": self.save_dir,
            "debounce_ms": self.debounce_ms,
            "max_svg_chars": self.max_svg_chars,
            "bulk_formats": list(self.bulk_formats),
            "rename_pattern": self.rename_pattern,
            "rename_prefix": self.rename_prefix,
            "rename_suffix": self.rename_suffix,
            "rename_find": self.rename_find,
            "rename_replace": self.rename_replace,
            "rename_start": self.rename_start,
            "rename_padding": self.rename_padding,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "AppConfig":
        cfg = cls()
        for k, v in raw.items():
            if hasattr(cfg, k):
                setattr(cfg, k, v)
        return cfg

    def rename_options(self) -> RenameOptions | None:
        if not self.rename_pattern:
            return None
        return RenameOptions(
            self.rename_pattern,
            prefix=self.rename_prefix,
            suffix=self.rename_suffix,
            find=self.rename_find,
            replace=self.rename_replace,
            start=int(self.rename_start),
            padding=int(self.rename_padding),
        )

    @classmethod
    def load(cls, path: Path | None = None) -> "AppConfig":
        path = path or get_config_path()
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            _log.warning("config_unreadable path=%s error=%s", path, e)
            return cls()
        if not isinstance(data, dict):
            return cls()
        return cls.from_dict(data)

    def save(self, path: Path | None = None) -> None:
        path = path or get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
