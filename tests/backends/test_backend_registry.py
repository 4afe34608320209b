# topmark:header:start
#
#   project      : BuildBits
#   file         : test_backend_registry.py
#   file_relpath : tests/backends/test_backend_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for backend bindings and the overlay registry facade."""

from __future__ import annotations

import pkgutil
from types import MappingProxyType

import pytest

from buildbits.backends.base import Backend
from buildbits.backends.images import JpegCompressor, PngCompressor
from buildbits.backends.minifiers import CssMinifier, JsMinifier
from buildbits.backends.registry import BackendRegistry, register_backend
from buildbits.backends.scripts import CoffeeCompiler, TypeScriptCompiler
from buildbits.backends.styles import LessCompiler, SassCompiler, ScssCompiler
from buildbits.errors import UnsupportedFileTypeError
from tests.backend_stubs import RecordingBackend
from tests.conftest import parametrize


@parametrize(
    "path, backend_class",
    [
        ("a.less", LessCompiler),
        ("a.sass", SassCompiler),
        ("a.scss", ScssCompiler),
        ("a.coffee", CoffeeCompiler),
        ("a.ts", TypeScriptCompiler),
        ("a.js", JsMinifier),
        ("a.css", CssMinifier),
        ("a.png", PngCompressor),
        ("a.gif", PngCompressor),
        ("a.bmp", PngCompressor),
        ("a.tiff", PngCompressor),
        ("a.jpg", JpegCompressor),
        ("a.JPEG", JpegCompressor),
    ],
)
def test_builtin_selection(path: str, backend_class: type[Backend]) -> None:
    backend = BackendRegistry.create(path)
    assert type(backend) is backend_class


def test_create_returns_fresh_instances() -> None:
    first = BackendRegistry.create("a.less")
    second = BackendRegistry.create("b.less")
    assert first is not second


def test_create_passes_config() -> None:
    sentinel = object()
    backend = BackendRegistry.create("a.scss", sentinel)  # type: ignore[arg-type]
    assert backend.config is sentinel


@parametrize("path", ["notes.txt", "Makefile", "", "photo.webp"])
def test_unsupported_extension_raises(path: str) -> None:
    with pytest.raises(UnsupportedFileTypeError) as excinfo:
        BackendRegistry.create(path)
    assert isinstance(excinfo.value, NotImplementedError)


def test_unsupported_error_carries_extension() -> None:
    with pytest.raises(UnsupportedFileTypeError, match=r"'\.txt'") as excinfo:
        BackendRegistry.create("docs/notes.TXT")
    assert excinfo.value.extension == ".txt"


def test_as_mapping_is_read_only() -> None:
    mapping = BackendRegistry.as_mapping()
    assert isinstance(mapping, MappingProxyType)
    assert mapping[".ts"] is TypeScriptCompiler
    assert BackendRegistry.extensions() == tuple(sorted(mapping))


def test_iter_meta_is_sorted_and_named() -> None:
    metas = list(BackendRegistry.iter_meta())
    exts = [m.extension for m in metas]
    assert exts == sorted(exts)
    by_ext = {m.extension: m for m in metas}
    assert by_ext[".coffee"].name == "coffeescript"
    assert by_ext[".gif"].class_name == "PngCompressor"


def test_register_and_unregister_overlay() -> None:
    assert not BackendRegistry.is_registered(".styl")
    BackendRegistry.register(RecordingBackend, "STYL")
    try:
        assert BackendRegistry.is_registered(".styl")
        assert BackendRegistry.get(".styl") is RecordingBackend
    finally:
        assert BackendRegistry.unregister(".styl") is True
    assert not BackendRegistry.is_registered(".styl")
    assert BackendRegistry.unregister(".styl") is False


def test_register_refuses_bound_extension() -> None:
    with pytest.raises(ValueError, match="already has a registered backend"):
        BackendRegistry.register(RecordingBackend, ".less")


def test_hiding_builtin_is_non_destructive() -> None:
    assert BackendRegistry.unregister(".sass") is True
    try:
        assert not BackendRegistry.is_registered(".sass")
        with pytest.raises(UnsupportedFileTypeError):
            BackendRegistry.create("x.sass")
        assert BackendRegistry.unregister(".sass") is False
        BackendRegistry.register(SassCompiler, ".sass")
    finally:
        BackendRegistry._removals.discard(".sass")
        BackendRegistry._overrides.pop(".sass", None)
    assert BackendRegistry.get(".sass") is SassCompiler


def test_decorator_rejects_conflicting_binding() -> None:
    with pytest.raises(ValueError, match="already has a registered backend"):
        register_backend(".less")(RecordingBackend)


def test_decorator_requires_extensions() -> None:
    with pytest.raises(ValueError):
        register_backend()


def test_backend_modules_are_scanned_once(monkeypatch: pytest.MonkeyPatch) -> None:
    assert BackendRegistry.get(".less") is LessCompiler

    def no_rescan(*args: object, **kwargs: object) -> None:
        raise AssertionError("backend package scanned again")

    monkeypatch.setattr(pkgutil, "iter_modules", no_rescan)
    assert BackendRegistry.is_registered(".css")
    assert isinstance(BackendRegistry.create("a.png", None), PngCompressor)
