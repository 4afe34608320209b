# topmark:header:start
#
#   project      : BuildBits
#   file         : capabilities.py
#   file_relpath : src/buildbits/assettypes/capabilities.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Capability classifier: what can BuildBits do with a given path?

The capability table maps a lower-cased extension to the frozenset of
[`Capability`][buildbits.assettypes.base.Capability] flags declared by the
asset type owning that extension. It is built once when this module is first
imported and exposed as a `MappingProxyType`; it is never mutated afterwards,
so concurrent readers need no locking.

All queries parse the path string only. Empty paths and paths without an
extension are classified as having no capability; nothing here raises.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from buildbits.assettypes.base import AssetFamily, Capability, extension_of
from buildbits.assettypes.instances import get_asset_type_registry
from buildbits.config.logging import BuildbitsLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping
    from os import PathLike

logger: BuildbitsLogger = get_logger(__name__)

_NONE: Final[frozenset[Capability]] = frozenset()


def _build_capability_table() -> Mapping[str, frozenset[Capability]]:
    table: dict[str, frozenset[Capability]] = {}
    for at in get_asset_type_registry().values():
        for ext in at.extensions:
            table[ext] = at.capabilities
    logger.debug("Capability table covers %d extensions", len(table))
    return MappingProxyType(table)


def _extensions_with(capability: Capability) -> frozenset[str]:
    return frozenset(ext for ext, caps in CAPABILITY_TABLE.items() if capability in caps)


CAPABILITY_TABLE: Final[Mapping[str, frozenset[Capability]]] = _build_capability_table()

COMPILE_EXTENSIONS: Final[frozenset[str]] = _extensions_with(Capability.COMPILE)
MINIFY_EXTENSIONS: Final[frozenset[str]] = _extensions_with(Capability.MINIFY)
OPTIMIZE_EXTENSIONS: Final[frozenset[str]] = _extensions_with(Capability.OPTIMIZE)
DATA_URI_EXTENSIONS: Final[frozenset[str]] = _extensions_with(Capability.DATA_URI)

# Compilable script sources (compile to `.js`); every other compile target is `.css`.
SCRIPT_COMPILE_EXTENSIONS: Final[frozenset[str]] = frozenset(
    ext
    for at in get_asset_type_registry().values()
    if at.family is AssetFamily.SCRIPT and Capability.COMPILE in at.capabilities
    for ext in at.extensions
)


def capabilities_for(path: str | PathLike[str] | None) -> frozenset[Capability]:
    """Return the capabilities of the extension of ``path``.

    Args:
        path (str | PathLike[str] | None): Path to classify (not accessed on disk).

    Returns:
        frozenset[Capability]: Declared capabilities; empty for unknown or missing
            extensions.
    """
    return CAPABILITY_TABLE.get(extension_of(path), _NONE)


def can_compile(path: str | PathLike[str] | None) -> bool:
    """Return True if ``path`` is a compilable source (Less, Sass, SCSS, CoffeeScript, TS)."""
    return extension_of(path) in COMPILE_EXTENSIONS


def can_minify(path: str | PathLike[str] | None) -> bool:
    """Return True if ``path`` is a minifiable script or stylesheet."""
    return extension_of(path) in MINIFY_EXTENSIONS


def can_optimize(path: str | PathLike[str] | None) -> bool:
    """Return True if ``path`` is an image format advertised as optimizable."""
    return extension_of(path) in OPTIMIZE_EXTENSIONS


def can_produce_data_uri(path: str | PathLike[str] | None) -> bool:
    """Return True if ``path`` can be embedded as a ``data:`` URI."""
    return extension_of(path) in DATA_URI_EXTENSIONS


def iter_capability_table() -> Iterator[tuple[str, frozenset[Capability]]]:
    """Iterate ``(extension, capabilities)`` pairs sorted by extension."""
    for ext in sorted(CAPABILITY_TABLE):
        yield ext, CAPABILITY_TABLE[ext]
