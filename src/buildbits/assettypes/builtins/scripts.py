# topmark:header:start
#
#   project      : BuildBits
#   file         : scripts.py
#   file_relpath : src/buildbits/assettypes/builtins/scripts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scripts and script transpiler sources.

Exports:
    ASSET_TYPES (list[AssetType]): JavaScript, CoffeeScript and TypeScript.

Notes:
    - Only CoffeeScript and TypeScript are compilable; both compile to `.js`.
    - Declaration files (``*.d.ts``) are not special-cased; they classify as
      TypeScript by their last suffix.
"""

from __future__ import annotations

from buildbits.assettypes.base import AssetFamily, AssetType, Capability

ASSET_TYPES: list[AssetType] = [
    AssetType(
        name="javascript",
        extensions=(".js",),
        family=AssetFamily.SCRIPT,
        description="JavaScript sources (*.js)",
        capabilities=frozenset({Capability.MINIFY}),
    ),
    AssetType(
        name="coffeescript",
        extensions=(".coffee",),
        family=AssetFamily.SCRIPT,
        description="CoffeeScript sources (*.coffee)",
        capabilities=frozenset({Capability.COMPILE}),
    ),
    AssetType(
        name="typescript",
        extensions=(".ts",),
        family=AssetFamily.SCRIPT,
        description="TypeScript sources (*.ts)",
        capabilities=frozenset({Capability.COMPILE}),
    ),
]
