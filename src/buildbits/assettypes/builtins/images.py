# topmark:header:start
#
#   project      : BuildBits
#   file         : images.py
#   file_relpath : src/buildbits/assettypes/builtins/images.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Raster images.

Exports:
    ASSET_TYPES (list[AssetType]): PNG, GIF, BMP, TIFF and JPEG.

Notes:
    - PNG, GIF and BMP are optimizable and embeddable as data URIs.
    - JPEG is embeddable but not advertised as optimizable, and TIFF carries
      no capability at all. Both still have compressor backends bound to
      their extensions, so an explicit optimize job is dispatched normally.
"""

from __future__ import annotations

from buildbits.assettypes.base import AssetFamily, AssetType, Capability

_OPTIMIZABLE_EMBEDDABLE = frozenset({Capability.OPTIMIZE, Capability.DATA_URI})

ASSET_TYPES: list[AssetType] = [
    AssetType(
        name="png",
        extensions=(".png",),
        family=AssetFamily.IMAGE,
        description="Portable Network Graphics (*.png)",
        capabilities=_OPTIMIZABLE_EMBEDDABLE,
    ),
    AssetType(
        name="gif",
        extensions=(".gif",),
        family=AssetFamily.IMAGE,
        description="Graphics Interchange Format (*.gif)",
        capabilities=_OPTIMIZABLE_EMBEDDABLE,
    ),
    AssetType(
        name="bmp",
        extensions=(".bmp",),
        family=AssetFamily.IMAGE,
        description="Windows bitmap images (*.bmp)",
        capabilities=_OPTIMIZABLE_EMBEDDABLE,
    ),
    AssetType(
        name="tiff",
        extensions=(".tiff",),
        family=AssetFamily.IMAGE,
        description="Tagged Image File Format (*.tiff)",
    ),
    AssetType(
        name="jpeg",
        extensions=(".jpg", ".jpeg"),
        family=AssetFamily.IMAGE,
        description="JPEG images (*.jpg, *.jpeg)",
        capabilities=frozenset({Capability.DATA_URI}),
    ),
]
