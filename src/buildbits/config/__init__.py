# topmark:header:start
#
#   project      : BuildBits
#   file         : __init__.py
#   file_relpath : src/buildbits/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for BuildBits.

* [`buildbits.config.logging`][buildbits.config.logging]: TRACE-aware colored logging.
* [`buildbits.config.io`][buildbits.config.io]: TOML reading and rendering.
* [`buildbits.config.model`][buildbits.config.model]: `Config` / `MutableConfig`
  and layered discovery.

This package module stays import-light: `buildbits.config.logging` is imported
by nearly every module, including the ones the config model depends on.
"""
