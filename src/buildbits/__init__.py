# topmark:header:start
#
#   project      : BuildBits
#   file         : __init__.py
#   file_relpath : src/buildbits/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BuildBits package.

BuildBits is a front controller for asset build pipelines. It classifies
source files by extension, picks the transformation backend bound to that
extension (style and script compilers, minifiers, image compressors), derives
the output artifact path and normalizes whatever the backend reports into a
uniform `CompileResult`. It exposes both a CLI and a small typed API.
"""

from __future__ import annotations
