# topmark:header:start
#
#   project      : BuildBits
#   file         : __init__.py
#   file_relpath : src/buildbits/backends/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Transformation backends and their extension registry.

Importing a backend module registers its classes; `register_all_backends`
imports every module in this package so the registry is complete.
"""

import importlib
import pkgutil
from functools import lru_cache
from pathlib import Path

from buildbits.config.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def register_all_backends() -> None:
    """Import all backend modules in the current package (scanned once, then cached)."""
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if not module_info.ispkg:
            importlib.import_module(f"{__name__}.{module_info.name}")
