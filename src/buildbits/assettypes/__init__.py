# topmark:header:start
#
#   project      : BuildBits
#   file         : __init__.py
#   file_relpath : src/buildbits/assettypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Asset types and the extension-based capability classifier.

This package maintains the registry of asset types known to BuildBits and the
read-only capability table derived from it. Use
[`buildbits.assettypes.capabilities`][buildbits.assettypes.capabilities] to ask
whether a path can be compiled, minified, optimized or embedded.
"""
