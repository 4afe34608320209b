# topmark:header:start
#
#   project      : BuildBits
#   file         : test_asset_type_registry.py
#   file_relpath : tests/assettypes/test_asset_type_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the built-in asset type registry and its validation."""

from __future__ import annotations

import pytest

from buildbits.assettypes.base import AssetFamily, AssetType, Capability
from buildbits.assettypes.instances import (
    _generate_registry,
    get_asset_type_registry,
)


def test_builtin_names() -> None:
    assert set(get_asset_type_registry()) == {
        "css",
        "less",
        "sass",
        "scss",
        "javascript",
        "coffeescript",
        "typescript",
        "png",
        "gif",
        "bmp",
        "tiff",
        "jpeg",
    }


def test_registry_entries_match_case_insensitively() -> None:
    at = get_asset_type_registry()["jpeg"]
    assert at.family is AssetFamily.IMAGE
    assert at.matches("Photos/Holiday.JPEG")
    assert at.matches("x.jpg")
    assert at.supports(Capability.DATA_URI)
    assert not at.supports(Capability.OPTIMIZE)


def test_no_entry_matches_unknown_or_empty_paths() -> None:
    for at in get_asset_type_registry().values():
        assert not at.matches("notes.txt")
        assert not at.matches("")


def test_script_family_drives_compile_target() -> None:
    scripts = {
        at.name for at in get_asset_type_registry().values() if at.family is AssetFamily.SCRIPT
    }
    assert scripts == {"javascript", "coffeescript", "typescript"}


def _at(name: str, *exts: str) -> AssetType:
    return AssetType(name=name, extensions=exts, family=AssetFamily.STYLE, description=name)


def test_duplicate_name_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate AssetType name"):
        _generate_registry([_at("a", ".a"), _at("a", ".b")])


def test_extension_claimed_twice_rejected() -> None:
    with pytest.raises(ValueError, match="claimed by both"):
        _generate_registry([_at("a", ".x"), _at("b", ".x")])


def test_non_normalized_extension_rejected() -> None:
    with pytest.raises(ValueError, match="non-normalized"):
        _generate_registry([_at("a", ".LESS")])
    with pytest.raises(ValueError, match="non-normalized"):
        _generate_registry([_at("b", "less")])
