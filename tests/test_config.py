import json
from pathlib import Path

import pytest

from svgx.config import AppConfig, get_config_path


def test_defaults() -> None:
    cfg = AppConfig()
    assert cfg.output_mode == "react-ts"
    assert cfg.component_name == "Icon"
    assert cfg.bulk_formats == ["svg"]
    assert AppConfig().bulk_formats is not cfg.bulk_formats


def test_save_and_load_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "cfg" / "config.json"
    cfg = AppConfig(output_mode="nextjs", component_name="Logo", bulk_formats=["svg", "jsx"], optimize=True)
    cfg.save(path)

    loaded = AppConfig.load(path)
    assert loaded == cfg
    assert json.loads(path.read_text(encoding="utf-8"))["output_mode"] == "nextjs"


def test_load_missing_or_broken_file_gives_defaults(tmp_path: Path) -> None:
    assert AppConfig.load(tmp_path / "missing.json") == AppConfig()

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert AppConfig.load(broken) == AppConfig()

    not_dict = tmp_path / "list.json"
    not_dict.write_text("[1, 2]", encoding="utf-8")
    assert AppConfig.load(not_dict) == AppConfig()


def test_from_dict_ignores_unknown_keys() -> None:
    cfg = AppConfig.from_dict({"output_mode": "jsx", "dpi": 300})
    assert cfg.output_mode == "jsx"
    assert not hasattr(cfg, "dpi")


def test_config_path_uses_appdata(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert get_config_path() == tmp_path / "Svgx" / "config.json"


def test_rename_options() -> None:
    assert AppConfig().rename_options() is None

    cfg = AppConfig(rename_pattern="numbering", rename_start=3, rename_padding=1)
    opts = cfg.rename_options()
    assert opts is not None
    assert opts.apply(["a.svg", "b.svg"]) == ["a-3.svg", "b-4.svg"]


def test_rename_fields_roundtrip(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    AppConfig(rename_pattern="replace", rename_find="-outline", rename_replace="").save(path)
    loaded = AppConfig.load(path)
    assert loaded.rename_pattern == "replace"
    assert loaded.rename_find == "-outline"
