# topmark:header:start
#
#   project      : BuildBits
#   file         : images.py
#   file_relpath : src/buildbits/backends/images.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lossless image compressor backends.

PNG, GIF, BMP and TIFF go through ``optipng`` (which reads all four formats);
JPEG goes through ``jpegtran``.
"""

from __future__ import annotations

from buildbits.backends.command import CommandBackend
from buildbits.backends.registry import register_backend


@register_backend(".png", ".gif", ".bmp", ".tiff")
class PngCompressor(CommandBackend):
    """Recompress PNG-family images with ``optipng``."""

    name = "png"
    description = "PNG compressor (optipng)"
    command = ("optipng", "-quiet", "-clobber", "-out", "{output}", "{input}")


@register_backend(".jpg", ".jpeg")
class JpegCompressor(CommandBackend):
    """Optimize JPEG images losslessly with ``jpegtran``."""

    name = "jpeg"
    description = "JPEG compressor (jpegtran)"
    command = (
        "jpegtran",
        "-copy",
        "none",
        "-optimize",
        "-progressive",
        "-outfile",
        "{output}",
        "{input}",
    )
