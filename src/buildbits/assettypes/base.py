# topmark:header:start
#
#   project      : BuildBits
#   file         : base.py
#   file_relpath : src/buildbits/assettypes/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Asset type definitions used to classify source files by extension.

An *asset type* describes a family of source files (e.g. Less stylesheets,
TypeScript sources, PNG images), the extensions that identify it, and the
capabilities BuildBits offers for it (compile, minify, optimize, data URI).

Recognition is purely name based: the extension is derived from the path
string and never requires touching the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING

from buildbits.config.logging import BuildbitsLogger, get_logger

if TYPE_CHECKING:
    from os import PathLike

logger: BuildbitsLogger = get_logger(__name__)


class Capability(Enum):
    """Operations BuildBits can perform on a file of a given extension.

    Attributes:
        COMPILE: Transpile/preprocess into a browser-ready `.js` or `.css` file.
        MINIFY: Produce a `.min.js` / `.min.css` sibling.
        OPTIMIZE: Losslessly recompress an image, keeping its format.
        DATA_URI: The file can be embedded as a ``data:`` URI.
    """

    COMPILE = "compile"
    MINIFY = "minify"
    OPTIMIZE = "optimize"
    DATA_URI = "data_uri"


class AssetFamily(Enum):
    """Coarse grouping of asset types.

    The family decides the compile target: compilable script sources become
    `.js`, every other compilable source becomes `.css`.
    """

    STYLE = "style"
    SCRIPT = "script"
    IMAGE = "image"


def extension_of(path: str | PathLike[str] | None) -> str:
    """Return the lower-cased extension (with leading dot) of ``path``.

    Only the last suffix counts (``app.min.js`` -> ``.js``). Empty or missing
    paths, and names without a suffix, yield an empty string.

    Args:
        path (str | PathLike[str] | None): The path to inspect.

    Returns:
        str: The normalized extension, or ``""``.
    """
    if not path:
        return ""
    return PurePath(path).suffix.lower()


@dataclass(frozen=True)
class AssetType:
    """An asset type recognized by BuildBits.

    Attributes:
        name (str): Internal identifier of the asset type (e.g. ``"less"``).
        extensions (tuple[str, ...]): Lower-case extensions including the leading
            dot (e.g. ``(".jpg", ".jpeg")``).
        family (AssetFamily): Style, script or image.
        description (str): Human-readable description.
        capabilities (frozenset[Capability]): What BuildBits may do with files
            of this type. A type may be recognized with no capabilities at all
            (it can still have a backend bound to its extension).
    """

    name: str
    extensions: tuple[str, ...]
    family: AssetFamily
    description: str
    capabilities: frozenset[Capability] = field(default_factory=frozenset)

    def matches(self, path: str | PathLike[str]) -> bool:
        """Return True if the extension of ``path`` belongs to this asset type."""
        return extension_of(path) in self.extensions

    def supports(self, capability: Capability) -> bool:
        """Return True if this asset type offers ``capability``."""
        return capability in self.capabilities
