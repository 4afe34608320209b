# topmark:header:start
#
#   project      : BuildBits
#   file         : instances.py
#   file_relpath : src/buildbits/assettypes/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Asset type instances and registry for BuildBits.

Builds the runtime registry of [`buildbits.assettypes.base.AssetType`][]
objects from the built-in groups. The registry is constructed on first access,
cached thereafter and exposed as a read-only mapping.

Notes:
    * Built-ins are imported lazily from topical modules.
    * An extension may belong to exactly one asset type; duplicates are a
      programming error and fail loudly.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import import_module
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final, Iterable, Sequence, cast

from buildbits.config.logging import BuildbitsLogger, get_logger

from .base import AssetType

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import ModuleType

logger: BuildbitsLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "buildbits.assettypes.builtins.styles",
    "buildbits.assettypes.builtins.scripts",
    "buildbits.assettypes.builtins.images",
)


def _iter_builtin_asset_types() -> Iterable[AssetType]:
    """Yield built-in AssetType objects from topical modules (lazy import)."""
    for modname in _BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        asset_types: Any = getattr(mod, "ASSET_TYPES", None)
        if not isinstance(asset_types, list):
            logger.warning("Module %s has no ASSET_TYPES list; skipping", modname)
            continue
        for obj in cast("Sequence[object]", asset_types):
            if isinstance(obj, AssetType):
                yield obj
            else:
                logger.warning("Non-AssetType entry in %s.ASSET_TYPES: %r", modname, obj)


def _generate_registry(asset_types: Iterable[AssetType]) -> dict[str, AssetType]:
    """Generate a registry mapping asset type names to their definitions.

    Raises:
        ValueError: If two asset types share a name or claim the same extension.
    """
    registry: dict[str, AssetType] = {}
    claimed: dict[str, str] = {}
    for at in asset_types:
        if at.name in registry:
            raise ValueError(f"Duplicate AssetType name: {at.name}")
        for ext in at.extensions:
            if ext != ext.lower() or not ext.startswith("."):
                raise ValueError(
                    f"AssetType '{at.name}' declares a non-normalized extension: {ext!r}"
                )
            if ext in claimed:
                raise ValueError(
                    f"Extension {ext!r} claimed by both '{claimed[ext]}' and '{at.name}'"
                )
            claimed[ext] = at.name
        registry[at.name] = at
    return registry


@lru_cache(maxsize=1)
def get_asset_type_registry() -> Mapping[str, AssetType]:
    """Return (and cache) the read-only AssetType registry keyed by name."""
    registry: dict[str, AssetType] = _generate_registry(_iter_builtin_asset_types())
    logger.debug("Loaded %d asset types", len(registry))
    return MappingProxyType(registry)

