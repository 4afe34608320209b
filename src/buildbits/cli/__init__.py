# topmark:header:start
#
#   project      : BuildBits
#   file         : __init__.py
#   file_relpath : src/buildbits/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits command-line interface (click)."""
