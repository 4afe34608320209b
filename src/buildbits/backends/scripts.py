# topmark:header:start
#
#   project      : BuildBits
#   file         : scripts.py
#   file_relpath : src/buildbits/backends/scripts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Script transpiler backends (CoffeeScript, TypeScript)."""

from __future__ import annotations

from buildbits.backends.command import CommandBackend
from buildbits.backends.registry import register_backend


@register_backend(".coffee")
class CoffeeCompiler(CommandBackend):
    """Compile CoffeeScript; ``coffee --print`` writes the result to stdout."""

    name = "coffeescript"
    description = "CoffeeScript compiler (coffee)"
    command = ("coffee", "--print", "--compile", "{input}")
    capture_stdout = True


@register_backend(".ts")
class TypeScriptCompiler(CommandBackend):
    """Compile a TypeScript file into a single JavaScript file with ``tsc``."""

    name = "typescript"
    description = "TypeScript compiler (tsc)"
    command = ("tsc", "--outFile", "{output}", "{input}")
