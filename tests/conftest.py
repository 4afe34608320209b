# topmark:header:start
#
#   project      : BuildBits
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the BuildBits test suite.

Sets up global fixtures and the logging configuration for test runs, plus
the ``bound_backend`` fixture binding stubs from `tests.backend_stubs`.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `MutableConfig`, then `freeze()` into a `Config`. Never
    mutate a frozen `Config`; use `Config.thaw()` → edit → `freeze()`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from buildbits.backends.registry import BackendRegistry
from buildbits.config import logging
from buildbits.config.model import MutableConfig
from tests.backend_stubs import RecordingBackend

if TYPE_CHECKING:
    from pathlib import Path

    from buildbits.backends.base import Backend
    from buildbits.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

# Type of the decorator itself: takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_buildbits_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure BuildBits' runtime log level is not forced via env during tests."""
    monkeypatch.delenv("BUILDBITS_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def isolated_user_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Path:
    """Point ``$XDG_CONFIG_HOME`` at an empty directory so user config never leaks in."""
    xdg: Path = tmp_path_factory.mktemp("xdg")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(xdg))
    return xdg


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so captured output is detailed."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an isolated project directory marked as config root.

    The directory holds a ``buildbits.toml`` with ``root = true`` so that
    upward discovery never reaches config files outside the temporary tree.

    Returns:
        Path: The temporary project directory, also the CWD.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    (cwd / "buildbits.toml").write_text("root = true\n", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults plus a TOML-shaped override mapping."""
    draft: MutableConfig = MutableConfig.from_defaults()
    if overrides:
        draft = draft.merge_with(MutableConfig.from_toml_dict(overrides))
    return draft.freeze()


@fixture()
def bound_backend() -> Iterator[Callable[[type[Backend], str], None]]:
    """Bind stub backends to test-only extensions; unbind them after the test.

    Yields:
        Callable[[type[Backend], str], None]: ``bind(backend_class, extension)``.
    """
    bound: list[str] = []
    RecordingBackend.calls.clear()

    def bind(backend_class: type[Backend], extension: str) -> None:
        BackendRegistry.register(backend_class, extension)
        bound.append(extension)

    yield bind

    for ext in bound:
        BackendRegistry.unregister(ext)
