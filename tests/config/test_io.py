# topmark:header:start
#
#   project      : BuildBits
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML helpers in `buildbits.config.io`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import toml

from buildbits.config.io import (
    get_bool_value_or_none,
    get_list_value,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_defaults_text,
    load_toml_dict,
    nest_toml_under_section,
)
from buildbits.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_parse_and_keep_comments() -> None:
    data = load_defaults_dict()
    assert data["root"] is False
    assert data["output"] == {"directory": ""}
    assert data["backends"] == {}
    assert "[backends.less]" in load_defaults_text()


def test_typed_getters() -> None:
    table = {"t": {"a": 1}, "s": "x", "n": 3, "b": True, "i": 0, "l": [1], "bad": [1]}
    assert get_table_value(table, "t") == {"a": 1}
    assert get_table_value(table, "s") == {}
    assert get_string_value_or_none(table, "s") == "x"
    assert get_string_value_or_none(table, "n") == "3"
    assert get_string_value_or_none(table, "l") is None
    assert get_bool_value_or_none(table, "b") is True
    assert get_bool_value_or_none(table, "i") is False
    assert get_bool_value_or_none(table, "s") is None
    assert get_list_value(table, "l") == [1]
    assert get_list_value(table, "missing") is None


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Cannot read config file"):
        load_toml_dict(tmp_path / "absent.toml")


def test_load_toml_dict_invalid_toml(tmp_path: Path) -> None:
    bad = tmp_path / "buildbits.toml"
    bad.write_text("[output\ndirectory = 'x'\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        load_toml_dict(bad)


def test_nest_under_section_keeps_preamble() -> None:
    doc = "# heading\n\nroot = false\n\n[output]\ndirectory = \"dist\"\n"
    nested = nest_toml_under_section(doc, "tool.buildbits")

    assert nested.startswith("# heading")
    parsed = toml.loads(nested)
    assert parsed == {"tool": {"buildbits": {"root": False, "output": {"directory": "dist"}}}}


def test_nest_under_section_rejects_empty_keys() -> None:
    with pytest.raises(ValueError):
        nest_toml_under_section("a = 1\n", "..")


def test_nest_under_section_rejects_invalid_toml() -> None:
    with pytest.raises(RuntimeError, match="Error parsing TOML"):
        nest_toml_under_section("a = = 1\n", "tool.buildbits")
