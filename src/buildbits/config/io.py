# topmark:header:start
#
#   project      : BuildBits
#   file         : io.py
#   file_relpath : src/buildbits/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight TOML I/O helpers for BuildBits configuration.

Typical flow:
    1. Load defaults from the packaged resource (``load_defaults_dict``).
    2. Load project/user TOML files (``load_toml_dict``).
    3. Inspect values using the typed getters (``get_table_value``, ...).
    4. Serialize back to TOML when needed (``to_toml``), optionally nested under
       ``[tool.buildbits]`` for ``pyproject.toml`` (``nest_toml_under_section``).

Notes:
    - Parsing and dumping use `toml`. `tomlkit` is only used by
      ``nest_toml_under_section`` so that comments in the nested document
      survive.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from buildbits.config.logging import get_logger
from buildbits.constants import DEFAULT_TOML_CONFIG_NAME, DEFAULT_TOML_CONFIG_PACKAGE
from buildbits.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from buildbits.config.logging import BuildbitsLogger

logger: BuildbitsLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, or an empty dict if missing or not a mapping."""
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Scalars (``int``, ``float``, ``bool``) are coerced with ``str(...)``; a
    missing key or a non-scalar value yields ``None``.
    """
    value: Any | None = table.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value, coercing integers via ``bool(...)``."""
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    return None


def get_list_value(table: TomlTable, key: str) -> list[Any] | None:
    """Extract a list value, or ``None`` when missing or not a list."""
    value: Any | None = table.get(key)
    return value if isinstance(value, list) else None


def load_defaults_dict() -> TomlTable:
    """Return the packaged default configuration as a Python dict.

    Raises:
        RuntimeError: If the bundled resource cannot be read or parsed.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    logger.debug("Loading defaults from package resource: %s", resource)
    try:
        text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        raise RuntimeError(
            f"Cannot read bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r}: {exc}"
        ) from exc

    try:
        return toml.loads(text)
    except toml.TomlDecodeError as exc:
        raise RuntimeError(
            f"Bundled default config {DEFAULT_TOML_CONFIG_PACKAGE!r}/"
            f"{DEFAULT_TOML_CONFIG_NAME!r} is invalid TOML: {exc}"
        ) from exc


def load_defaults_text() -> str:
    """Return the packaged default configuration verbatim (comments included)."""
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    return resource.read_text(encoding="utf8")


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``buildbits.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML.
    """
    try:
        return toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string."""
    return toml.dumps(toml_dict)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    r"""Return ``toml_doc`` nested under a dotted section path.

    ``nest_toml_under_section("a = 1\n", "tool.buildbits")`` yields a document
    equivalent to ``[tool.buildbits]`` followed by ``a = 1``. Comments and
    whitespace in front of the first key are kept in front of the new table;
    item-level trivia travels with the re-used tomlkit nodes.

    Args:
        toml_doc (str): Original TOML document to nest.
        section_keys (str): Dotted section path such as ``"tool.buildbits"``.

    Returns:
        str: The nested TOML document.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        RuntimeError: If the TOML document cannot be parsed.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")

    # Leading unkeyed items (comments, blank lines) form the preamble
    preamble = []
    for key, item in doc.body:
        if key is not None:
            break
        preamble.append((key, item))

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    new_doc.body.extend(preamble)

    current: tomlkit.TOMLDocument | Table = new_doc
    for key in keys:
        table: Table = tomlkit.table()
        current.add(key, table)
        current = table

    for item_key, item_value in doc.items():
        current.add(item_key, item_value)

    return new_doc.as_string()
