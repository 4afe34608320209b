# topmark:header:start
#
#   project      : BuildBits
#   file         : test_outputs.py
#   file_relpath : tests/pipeline/test_outputs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for output path derivation (compile, minify and optimize rules)."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from buildbits.errors import ConfigurationError
from buildbits.pipeline.job import Job, JobType
from buildbits.pipeline.outputs import (
    get_output_file_path,
    output_extension,
    require_input_path,
    resolve_output_path,
)
from tests.conftest import mark_pipeline, parametrize
from tests.strategies_buildbits import directories, stems


@mark_pipeline
@parametrize(
    "source, expected",
    [
        ("app.coffee", "app.js"),
        ("main.ts", "main.js"),
        ("style.less", "style.css"),
        ("theme.scss", "theme.css"),
        ("legacy.sass", "legacy.css"),
        ("assets/app.COFFEE", "assets/app.js"),
        ("lib/jquery.plugin.coffee", "lib/jquery.plugin.js"),
    ],
)
def test_get_output_file_path(source: str, expected: str) -> None:
    assert get_output_file_path(source) == Path(expected)


@mark_pipeline
@parametrize("source", ["", None, ".", "/"])
def test_get_output_file_path_rejects_empty(source: str | None) -> None:
    with pytest.raises(ConfigurationError, match="input path"):
        get_output_file_path(source)


@mark_pipeline
@parametrize(
    "job, expected",
    [
        (Job("src/theme.scss", "dist", JobType.COMPILE), "dist/theme.css"),
        (Job("src/app.coffee", "dist", JobType.COMPILE), "dist/app.js"),
        (Job("src/app.js", None, JobType.MINIFY), "src/app.min.js"),
        (Job("src/site.css", "", JobType.MINIFY), "src/site.min.css"),
        (Job("img/photo.png", "out", JobType.OPTIMIZE), "out/photo.png"),
        (Job("img/scan.TIFF", None, JobType.OPTIMIZE), "img/scan.TIFF"),
        (Job("theme.less", None, JobType.COMPILE), "theme.css"),
    ],
)
def test_resolve_output_path(job: Job, expected: str) -> None:
    assert resolve_output_path(job) == Path(expected)


@mark_pipeline
def test_minify_rule_is_permissive() -> None:
    """Anything that is not CSS minifies to ``.min.js``, whatever its extension."""
    assert output_extension(JobType.MINIFY, "notes.txt") == ".min.js"
    assert output_extension(JobType.MINIFY, "SITE.CSS") == ".min.css"


@mark_pipeline
def test_compile_of_non_script_falls_back_to_css() -> None:
    assert output_extension(JobType.COMPILE, "app.js") == ".css"
    assert output_extension(JobType.COMPILE, "readme") == ".css"


@mark_pipeline
def test_relative_and_absolute_output_dirs(tmp_path: Path) -> None:
    relative = resolve_output_path(Job("a/b/site.less", "build/css"))
    assert relative == Path("build/css/site.css")
    assert not relative.is_absolute()

    absolute = resolve_output_path(Job("a/b/site.less", tmp_path))
    assert absolute == tmp_path / "site.css"


@mark_pipeline
def test_require_input_path_returns_path() -> None:
    assert require_input_path("x.less") == Path("x.less")


@mark_pipeline
@given(stems, directories, st.sampled_from([".less", ".sass", ".scss"]))
def test_styles_compile_into_output_dir(stem: str, parts: list[str], ext: str) -> None:
    out_dir = Path(*parts) if parts else None
    result = resolve_output_path(Job(f"in/{stem}{ext}", out_dir, JobType.COMPILE))
    assert result.name == f"{stem}.css"
    assert result.parent == (out_dir or Path("in"))
