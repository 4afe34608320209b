# topmark:header:start
#
#   project      : BuildBits
#   file         : registry.py
#   file_relpath : src/buildbits/backends/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry binding file extensions to backend classes.

Built-in backends bind themselves at import time with the
[`register_backend`][buildbits.backends.registry.register_backend] class
decorator. [`BackendRegistry`][buildbits.backends.registry.BackendRegistry]
is the facade used by the dispatcher; it composes that base mapping with
overlay-only mutations so plugins and tests can add or hide bindings without
touching the built-ins.

Exactly one backend class is bound per extension. Selection is by extension
only, never by job type: ``.js`` always goes to the JavaScript minifier.

Typical usage:
    ```python
    from buildbits.backends.registry import BackendRegistry

    backend = BackendRegistry.create("theme.less", config)

    # Optional mutation (global state): always clean up.
    BackendRegistry.register(MyStylusCompiler, ".styl")
    try:
        ...
    finally:
        BackendRegistry.unregister(".styl")
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, ClassVar, Iterator, Mapping

from buildbits.assettypes.base import extension_of
from buildbits.config.logging import BuildbitsLogger, get_logger
from buildbits.errors import UnsupportedFileTypeError

if TYPE_CHECKING:
    from os import PathLike

    from buildbits.backends.base import Backend
    from buildbits.config.model import Config

logger: BuildbitsLogger = get_logger(__name__)


_registry: dict[str, type[Backend]] = {}


def _normalize_extension(ext: str) -> str:
    """Return ``ext`` lower-cased and with a leading dot.

    Raises:
        ValueError: If ``ext`` is empty.
    """
    ext = ext.strip().lower()
    if not ext or ext == ".":
        raise ValueError("Backend extensions must be non-empty")
    return ext if ext.startswith(".") else f".{ext}"


def register_backend(*extensions: str) -> Callable[[type[Backend]], type[Backend]]:
    """Class decorator binding a Backend class to one or more extensions.

    Args:
        *extensions (str): Extensions handled by the decorated class
            (e.g. ``".png"``, ``".gif"``). Case and leading dot are normalized.

    Returns:
        Callable[[type[Backend]], type[Backend]]: The registering decorator.

    Raises:
        ValueError: If no extension is given.
    """
    if not extensions:
        raise ValueError("register_backend() needs at least one extension")
    normalized: tuple[str, ...] = tuple(_normalize_extension(e) for e in extensions)

    def decorator(cls: type[Backend]) -> type[Backend]:
        """Bind ``cls`` to the extensions given to `register_backend`.

        Raises:
            ValueError: If an extension is already bound to a different class.
        """
        for ext in normalized:
            bound = _registry.get(ext)
            if bound is not None and bound is not cls:
                raise ValueError(
                    f"Extension '{ext}' already has a registered backend ({bound.__name__})."
                )
            logger.debug("Registering backend %s for extension: %s", cls.__name__, ext)
            _registry[ext] = cls
        return cls

    return decorator


def get_backend_registry() -> dict[str, type[Backend]]:
    """Return the base mapping of extensions to Backend classes."""
    return _registry


@dataclass(frozen=True)
class BackendMeta:
    """Serializable metadata about a backend binding."""

    extension: str
    name: str
    description: str = ""
    class_name: str = ""


class BackendRegistry:
    """Read-only oriented view of backend bindings, with overlay mutation hooks.

    Notes:
        - Reads compose the base registry with local overrides and removals.
        - Mutation hooks are intended for plugin authors and test scaffolding.
    """

    _lock: ClassVar[RLock] = RLock()
    _overrides: ClassVar[dict[str, type[Backend]]] = {}
    _removals: ClassVar[set[str]] = set()

    @classmethod
    def _compose(cls) -> dict[str, type[Backend]]:
        """Compose the base registry with local overrides/removals."""
        from buildbits.backends import register_all_backends

        register_all_backends()
        base = dict(get_backend_registry())
        base.update(cls._overrides)
        for ext in cls._removals:
            base.pop(ext, None)
        return base

    @classmethod
    def extensions(cls) -> tuple[str, ...]:
        """Return all extensions with a bound backend (sorted)."""
        with cls._lock:
            return tuple(sorted(cls._compose().keys()))

    @classmethod
    def is_registered(cls, extension: str) -> bool:
        """Return True if a backend is bound to ``extension``."""
        with cls._lock:
            return _normalize_extension(extension) in cls._compose()

    @classmethod
    def get(cls, extension: str) -> type[Backend] | None:
        """Return the Backend class bound to ``extension``, or None."""
        with cls._lock:
            return cls._compose().get(_normalize_extension(extension))

    @classmethod
    def as_mapping(cls) -> Mapping[str, type[Backend]]:
        """Return a read-only mapping of extension -> Backend class.

        Notes:
            The returned mapping is a `MappingProxyType` and must not be mutated.
        """
        with cls._lock:
            return MappingProxyType(cls._compose())

    @classmethod
    def iter_meta(cls) -> Iterator[BackendMeta]:
        """Iterate over metadata for all bindings, sorted by extension.

        Yields:
            BackendMeta: Serializable metadata about each binding.
        """
        with cls._lock:
            composed = cls._compose()
        for ext in sorted(composed):
            backend_cls = composed[ext]
            yield BackendMeta(
                extension=ext,
                name=backend_cls.name,
                description=backend_cls.description,
                class_name=backend_cls.__name__,
            )

    @classmethod
    def create(cls, path: str | PathLike[str], config: Config | None = None) -> Backend:
        """Instantiate the backend bound to the extension of ``path``.

        A new instance is returned on every call.

        Args:
            path (str | PathLike[str]): Input path; only its extension is used.
            config (Config | None): Effective configuration passed to the backend.

        Returns:
            Backend: A fresh backend instance.

        Raises:
            UnsupportedFileTypeError: If no backend is bound to the extension.
        """
        ext: str = extension_of(path)
        with cls._lock:
            backend_cls: type[Backend] | None = cls._compose().get(ext) if ext else None
        if backend_cls is None:
            logger.info("No backend registered for '%s' (extension %r)", path, ext)
            raise UnsupportedFileTypeError(path, ext)
        logger.debug("Selected backend %s for '%s'", backend_cls.__name__, path)
        return backend_cls(config)

    # Optional: mutation
    @classmethod
    def register(cls, backend_class: type[Backend], *extensions: str) -> None:
        """Bind ``backend_class`` to ``extensions`` (overlay only).

        Args:
            backend_class (type[Backend]): Backend class, instantiated per dispatch.
            *extensions (str): Extensions to bind.

        Raises:
            ValueError: If no extension is given or one is already bound.

        Notes:
            - This mutates global state. Prefer temporary usage in tests with try/finally.
        """
        if not extensions:
            raise ValueError("register() needs at least one extension")
        with cls._lock:
            composed = cls._compose()
            normalized = [_normalize_extension(e) for e in extensions]
            for ext in normalized:
                if ext in composed:
                    raise ValueError(f"Extension '{ext}' already has a registered backend.")
            for ext in normalized:
                cls._overrides[ext] = backend_class
                cls._removals.discard(ext)

    @classmethod
    def unregister(cls, extension: str) -> bool:
        """Remove the binding for ``extension``.

        Returns:
            bool: True if a binding was removed, else False.

        Notes:
            - This mutates global state. Base bindings are hidden, not deleted.
        """
        ext: str = _normalize_extension(extension)
        with cls._lock:
            existed = False
            if ext in cls._overrides:
                cls._overrides.pop(ext, None)
                existed = True
            if ext in get_backend_registry() and ext not in cls._removals:
                cls._removals.add(ext)
                existed = True
            return existed
