# topmark:header:start
#
#   project      : BuildBits
#   file         : styles.py
#   file_relpath : src/buildbits/backends/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style preprocessor backends (Less, Sass, SCSS).

Sass and SCSS both use Dart Sass, which picks the syntax from the input
extension; they are separate backends so each can be configured on its own.
"""

from __future__ import annotations

from buildbits.backends.command import CommandBackend
from buildbits.backends.registry import register_backend


@register_backend(".less")
class LessCompiler(CommandBackend):
    """Compile Less stylesheets with ``lessc``."""

    name = "less"
    description = "Less compiler (lessc)"
    command = ("lessc", "{input}", "{output}")


@register_backend(".sass")
class SassCompiler(CommandBackend):
    """Compile indented-syntax Sass with Dart Sass."""

    name = "sass"
    description = "Sass compiler (dart-sass)"
    command = ("sass", "--no-source-map", "{input}", "{output}")


@register_backend(".scss")
class ScssCompiler(CommandBackend):
    """Compile SCSS with Dart Sass."""

    name = "scss"
    description = "SCSS compiler (dart-sass)"
    command = ("sass", "--no-source-map", "{input}", "{output}")
