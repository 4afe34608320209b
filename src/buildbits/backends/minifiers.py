# topmark:header:start
#
#   project      : BuildBits
#   file         : minifiers.py
#   file_relpath : src/buildbits/backends/minifiers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minifier backends for JavaScript and CSS.

Bound by extension: a ``.js`` or ``.css`` input always reaches these
backends, whatever the job type.
"""

from __future__ import annotations

from buildbits.backends.command import CommandBackend
from buildbits.backends.registry import register_backend


@register_backend(".js")
class JsMinifier(CommandBackend):
    """Minify JavaScript with ``terser``."""

    name = "jsmin"
    description = "JavaScript minifier (terser)"
    command = ("terser", "{input}", "--compress", "--mangle", "--output", "{output}")


@register_backend(".css")
class CssMinifier(CommandBackend):
    """Minify CSS with ``cleancss``."""

    name = "cssmin"
    description = "CSS minifier (clean-css-cli)"
    command = ("cleancss", "-o", "{output}", "{input}")
