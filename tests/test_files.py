from datetime import datetime
from pathlib import Path

from svgx.export.files import atomic_write_bytes, generate_output_filename


def test_generate_output_filename_is_stable() -> None:
    name = generate_output_filename("abcdef0123456789", "tsx", now=datetime(2020, 1, 2, 3, 4, 5))
    assert name == "20200102_030405_abcdef0123.tsx"


def test_generate_output_filename_fallbacks() -> None:
    name = generate_output_filename("", ".jsx", now=datetime(2020, 1, 2, 3, 4, 5))
    assert name == "20200102_030405_unknown.jsx"


def test_atomic_write_bytes(tmp_path: Path) -> None:
    out = tmp_path / "sub" / "x.tsx"
    atomic_write_bytes(out, b"123")
    assert out.read_bytes() == b"123"
    assert [p.name for p in out.parent.iterdir()] == ["x.tsx"]
