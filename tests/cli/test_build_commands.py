# topmark:header:start
#
#   project      : BuildBits
#   file         : test_build_commands.py
#   file_relpath : tests/cli/test_build_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `compile`, `minify` and `optimize` commands.

Stub backends are bound to test-only extensions, so no external tool is
needed except in the tests marked as integration tests.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import toml

from buildbits.cli.exit_codes import ExitCode
from tests.backend_stubs import ExplicitResultBackend, RecordingBackend, WritingBackend
from tests.cli.conftest import output_lines, run_cli_in
from tests.conftest import mark_cli, mark_integration, parametrize

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@mark_cli
def test_compile_reports_new_then_updated(
    isolation: Path, bound_backend: Callable[..., None]
) -> None:
    bound_backend(WritingBackend, ".up")
    (isolation / "a.up").write_text("abc", encoding="utf-8")

    first = run_cli_in(isolation, ["compile", "a.up"])
    assert first.exit_code == ExitCode.SUCCESS, first.output
    assert output_lines(first) == ["a.up -> a.css (new)"]
    assert (isolation / "a.css").read_text(encoding="utf-8") == "ABC"

    second = run_cli_in(isolation, ["compile", "a.up"])
    assert output_lines(second) == ["a.up -> a.css (updated)"]


@mark_cli
@parametrize(
    "command, expected",
    [
        ("compile", "dist/a.css"),
        ("minify", "dist/a.min.js"),
        ("optimize", "dist/a.up"),
    ],
)
def test_output_dir_option(
    isolation: Path, bound_backend: Callable[..., None], command: str, expected: str
) -> None:
    bound_backend(WritingBackend, ".up")
    (isolation / "a.up").write_text("x", encoding="utf-8")

    result = run_cli_in(isolation, [command, "-o", "dist", "a.up"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert output_lines(result) == [f"a.up -> {expected} (new)"]
    assert (isolation / expected).is_file()


@mark_cli
def test_configured_output_dir(isolation: Path, bound_backend: Callable[..., None]) -> None:
    bound_backend(RecordingBackend, ".rec")
    (isolation / "buildbits.toml").write_text(
        'root = true\n[output]\ndirectory = "public"\n', encoding="utf-8"
    )
    (isolation / "app.rec").write_text("", encoding="utf-8")

    result = run_cli_in(isolation, ["minify", "app.rec"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert len(RecordingBackend.calls) == 1
    assert RecordingBackend.calls[0][1] == (isolation / "public").resolve() / "app.min.js"


@mark_cli
def test_verbose_relays_backend_output(
    isolation: Path, bound_backend: Callable[..., None]
) -> None:
    bound_backend(RecordingBackend, ".rec")
    (isolation / "a.rec").write_text("", encoding="utf-8")

    quiet = run_cli_in(isolation, ["compile", "a.rec"])
    verbose = run_cli_in(isolation, ["-v", "compile", "a.rec"])

    assert "[recording]" not in quiet.output
    assert output_lines(verbose) == [
        "  [recording] step 1",
        "  [recording] step 2",
        "a.rec -> a.css (new)",
    ]


@mark_cli
def test_quiet_suppresses_result_lines(
    isolation: Path, bound_backend: Callable[..., None]
) -> None:
    bound_backend(WritingBackend, ".up")
    (isolation / "a.up").write_text("x", encoding="utf-8")

    result = run_cli_in(isolation, ["-q", "compile", "a.up"])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == ""
    assert (isolation / "a.css").is_file()


@mark_cli
def test_missing_input_exits_file_not_found(isolation: Path) -> None:
    result = run_cli_in(isolation, ["compile", "nope.less"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "No such file: 'nope.less'" in result.output
    assert "1 of 1 job(s) failed" in result.output


@mark_cli
def test_unsupported_type_exits_69(isolation: Path) -> None:
    (isolation / "notes.txt").write_text("", encoding="utf-8")
    result = run_cli_in(isolation, ["minify", "notes.txt"])
    assert result.exit_code == ExitCode.UNSUPPORTED_FILE_TYPE
    assert "Unsupported file type '.txt'" in result.output


@mark_cli
def test_unsuccessful_result_exits_backend_error(
    isolation: Path, bound_backend: Callable[..., None]
) -> None:
    bound_backend(ExplicitResultBackend, ".exp")
    (isolation / "a.exp").write_text("", encoding="utf-8")

    result = run_cli_in(isolation, ["compile", "a.exp"])

    assert result.exit_code == ExitCode.BACKEND_ERROR
    assert "a.exp -> a.custom (updated)" in result.output
    assert "  [error] line 3: unexpected token" in result.output
    assert "backend reported failure" in result.output


@mark_cli
def test_all_jobs_run_and_first_failure_sets_exit_code(
    isolation: Path, bound_backend: Callable[..., None]
) -> None:
    bound_backend(WritingBackend, ".up")
    (isolation / "good.up").write_text("x", encoding="utf-8")
    (isolation / "notes.txt").write_text("", encoding="utf-8")

    result = run_cli_in(isolation, ["compile", "missing.up", "good.up", "notes.txt"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "good.up -> good.css (new)" in result.output
    assert "Unsupported file type" in result.output
    assert "2 of 3 job(s) failed" in result.output
    assert (isolation / "good.css").is_file()


@mark_cli
def test_missing_config_file_exits_config_error(isolation: Path) -> None:
    (isolation / "a.less").write_text("", encoding="utf-8")
    result = run_cli_in(isolation, ["compile", "--config", "absent.toml", "a.less"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Config file not found" in result.output


@mark_cli
def test_invalid_project_config_exits_config_error(isolation: Path) -> None:
    (isolation / "buildbits.toml").write_text("root = true\n[output\n", encoding="utf-8")
    (isolation / "a.less").write_text("", encoding="utf-8")
    result = run_cli_in(isolation, ["compile", "a.less"])
    assert result.exit_code == ExitCode.CONFIG_ERROR


@mark_cli
def test_config_warnings_are_shown_unless_quiet(
    isolation: Path, bound_backend: Callable[..., None]
) -> None:
    bound_backend(RecordingBackend, ".rec")
    (isolation / "buildbits.toml").write_text("root = true\nexcludes = []\n", encoding="utf-8")
    (isolation / "a.rec").write_text("", encoding="utf-8")

    shown = run_cli_in(isolation, ["compile", "a.rec"])
    hidden = run_cli_in(isolation, ["-q", "compile", "a.rec"])

    assert shown.exit_code == ExitCode.SUCCESS
    assert "ignoring unknown key 'excludes'" in shown.output
    assert "excludes" not in hidden.output


@mark_cli
def test_verbose_and_quiet_are_exclusive(isolation: Path) -> None:
    result = run_cli_in(isolation, ["-v", "-q", "compile", "a.less"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


@mark_cli
def test_paths_are_required(isolation: Path) -> None:
    result = run_cli_in(isolation, ["minify"])
    assert result.exit_code == 2
    assert "Missing argument" in result.output


@mark_cli
@mark_integration
def test_failing_tool_exits_backend_error(isolation: Path) -> None:
    (isolation / "a.less").write_text("", encoding="utf-8")
    script = "import sys; print('ParseError: bad'); sys.exit(2)"
    command = [sys.executable, "-c", script, "{input}"]
    (isolation / "ci.toml").write_text(
        toml.dumps({"backends": {"less": {"command": command}}}), encoding="utf-8"
    )

    result = run_cli_in(isolation, ["-v", "compile", "--config", "ci.toml", "a.less"])

    assert result.exit_code == ExitCode.BACKEND_ERROR
    assert "[less] ParseError: bad" in result.output
    assert "less: " in result.output
    assert "exited with status 2" in result.output
    assert not (isolation / "a.css").exists()
