# topmark:header:start
#
#   project      : BuildBits
#   file         : styles.py
#   file_relpath : src/buildbits/assettypes/builtins/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stylesheets and style preprocessor sources.

Exports:
    ASSET_TYPES (list[AssetType]): CSS, Less, Sass (indented syntax) and SCSS.
"""

from __future__ import annotations

from buildbits.assettypes.base import AssetFamily, AssetType, Capability

ASSET_TYPES: list[AssetType] = [
    AssetType(
        name="css",
        extensions=(".css",),
        family=AssetFamily.STYLE,
        description="Cascading Style Sheets (CSS)",
        capabilities=frozenset({Capability.MINIFY}),
    ),
    AssetType(
        name="less",
        extensions=(".less",),
        family=AssetFamily.STYLE,
        description="Less stylesheets (*.less)",
        capabilities=frozenset({Capability.COMPILE}),
    ),
    AssetType(
        name="sass",
        extensions=(".sass",),
        family=AssetFamily.STYLE,
        description="Sass indented syntax (*.sass)",
        capabilities=frozenset({Capability.COMPILE}),
    ),
    AssetType(
        name="scss",
        extensions=(".scss",),
        family=AssetFamily.STYLE,
        description="Sass SCSS syntax (*.scss)",
        capabilities=frozenset({Capability.COMPILE}),
    ),
]
