# topmark:header:start
#
#   project      : BuildBits
#   file         : __init__.py
#   file_relpath : src/buildbits/assettypes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in asset type groups (styles, scripts, images).

Each module exports an ``ASSET_TYPES`` list consumed by
[`buildbits.assettypes.instances`][buildbits.assettypes.instances].
"""
