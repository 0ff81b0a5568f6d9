import re

import pytest

from svgx.convert.naming import (
    NamingConvention,
    RenamePattern,
    bulk_rename,
    convert_file_name,
    is_valid_component_name,
)


def test_convert_file_name_examples() -> None:
    assert convert_file_name("my icon name", "PascalCase") == "MyIconName"
    assert convert_file_name("My Icon Name", "kebab-case") == "my-icon-name"


def test_convert_file_name_conventions() -> None:
    assert convert_file_name("my-icon_name.svg", NamingConvention.CAMEL) == "myIconName"
    assert convert_file_name("myIconName.SVG", NamingConvention.KEBAB) == "my-icon-name"
    assert convert_file_name("ARROW-left", NamingConvention.PASCAL) == "ArrowLeft"
    assert convert_file_name("my icon!.svg", NamingConvention.ORIGINAL) == "my-icon-"
    assert convert_file_name("a  b", NamingConvention.KEBAB) == "a-b"


def test_unknown_convention_behaves_like_original() -> None:
    assert convert_file_name("my icon.svg", "snake") == "my-icon"


def test_bulk_rename_numbering() -> None:
    assert bulk_rename(["a.svg", "b.SVG", "c"], RenamePattern.NUMBERING) == ["a-01.svg", "b-02.svg", "c-03.svg"]
    assert bulk_rename(["a.svg"], "numbering", start=7, padding=3) == ["a-007.svg"]


def test_bulk_rename_prefix_suffix() -> None:
    assert bulk_rename(["a.svg"], "prefix", prefix="icon-") == ["icon-a.svg"]
    assert bulk_rename(["a.svg"], "suffix", suffix="-outline") == ["a-outline.svg"]
    assert bulk_rename(["a.svg"], "suffix") == ["a.svg"]


def test_bulk_rename_replace() -> None:
    assert bulk_rename(["foo.svg", "bar.svg"], "replace", find="o", replace="0") == ["f00.svg", "bar.svg"]
    assert bulk_rename(["foo.svg"], "replace", find="", replace="x") == ["foo.svg"]
    with pytest.raises(re.error):
        bulk_rename(["foo.svg"], "replace", find="(")


def test_is_valid_component_name() -> None:
    assert is_valid_component_name("ArrowLeft")
    assert is_valid_component_name("$icon_2")
    assert not is_valid_component_name("2icon")
    assert not is_valid_component_name("my-icon")
    assert not is_valid_component_name("")
