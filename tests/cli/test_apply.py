# topmark:header:start
#
#   project      : tgcom
#   file         : test_apply.py
#   file_relpath : tests/cli/test_apply.py
#   license      : MIT
#   copyright    : (c) 2025 tgcom contributors
#
# topmark:header:end

"""CLI tests for `tgcom apply`: selections, stdin, previews, config and exit codes."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_exit, assert_SUCCESS, assert_USAGE_ERROR, run_cli_in
from tests.conftest import parametrize, read_source, write_source
from tgcom.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

FOUR_LINES = "Line 1\nLine 2\nLine 3\nLine 4\n"

pytestmark = pytest.mark.cli


def _run(cwd: Path, *args: str, input_text: str | None = None) -> Result:
    return run_cli_in(cwd, ["apply", *args], input_text=input_text)


# --- Selections ---


def test_inline_range_comments_line(isolation: Path) -> None:
    f = write_source(isolation / "main.go", "a\nb\nc\n")

    result = _run(isolation, "-f", "main.go:2", "-a", "comment")

    assert_SUCCESS(result)
    assert read_source(f) == "a\n// b\nc\n"
    assert result.stdout == ""


def test_global_line_applies_to_positional_targets(isolation: Path) -> None:
    go = write_source(isolation / "main.go", "a\nb\n")
    py = write_source(isolation / "script.py", "a\nb\n")

    result = _run(isolation, "main.go", "script.py", "-l", "1")

    assert_SUCCESS(result)
    assert read_source(go) == "// a\nb\n"
    assert read_source(py) == "# a\nb\n"


def test_comma_separated_file_list(isolation: Path) -> None:
    go = write_source(isolation / "main.go", "a\nb\n")
    lua = write_source(isolation / "init.lua", "a\nb\n")

    result = _run(isolation, "-f", "main.go:2,init.lua", "-l", "1-2", "-a", "comment")

    assert_SUCCESS(result)
    assert read_source(go) == "a\n// b\n"
    assert read_source(lua) == "-- a\n-- b\n"


def test_label_section(isolation: Path) -> None:
    f = write_source(isolation / "app.py", "x\n# BEGIN debug\nprint(1)\n# END debug\ny\n")

    result = _run(isolation, "-f", "app.py", "-s", "BEGIN debug", "-e", "END debug")

    assert_SUCCESS(result)
    assert read_source(f) == "x\n# BEGIN debug\n# print(1)\n# END debug\ny\n"


def test_toggle_is_the_default_action(isolation: Path) -> None:
    f = write_source(isolation / "main.go", "// a\nb\n")

    assert_SUCCESS(_run(isolation, "-f", "main.go:1-2"))

    assert read_source(f) == "a\n// b\n"


def test_explicit_marker_for_unknown_extension(isolation: Path) -> None:
    f = write_source(isolation / "test.txt", FOUR_LINES)

    result = _run(isolation, "-f", "test.txt:2", "-m", "+++", "-a", "comment")

    assert_SUCCESS(result)
    assert read_source(f) == "Line 1\n+++ Line 2\nLine 3\nLine 4\n"


def test_language_overrides_extension(isolation: Path) -> None:
    f = write_source(isolation / "query.txt", "select 1;\n")

    assert_SUCCESS(_run(isolation, "-f", "query.txt:1", "-L", "SQL"))

    assert read_source(f) == "-- select 1;\n"


# --- Output modes ---


def test_dry_run_prints_preview_and_keeps_file(isolation: Path) -> None:
    f = write_source(isolation / "test.txt", FOUR_LINES)

    result = _run(isolation, "-f", "test.txt:2", "-m", "+++", "-a", "comment", "-d")

    assert_SUCCESS(result)
    assert result.stdout == "line 2: Line 2 -> +++ Line 2\n"
    assert read_source(f) == FOUR_LINES


def test_diff_is_printed(isolation: Path) -> None:
    write_source(isolation / "main.go", "a\nb\n")

    result = _run(isolation, "-f", "main.go:1", "--diff")

    assert_SUCCESS(result)
    assert "--- main.go (original)" in result.stdout
    assert "+++ main.go (updated)" in result.stdout
    assert "-a\n" in result.stdout
    assert "+// a\n" in result.stdout


def test_verbose_prints_summary(isolation: Path) -> None:
    write_source(isolation / "main.go", "a\nb\n")

    result = run_cli_in(isolation, ["-v", "apply", "-f", "main.go:1-2", "-a", "uncomment"])

    assert_SUCCESS(result)
    assert "main.go: changes written to file (2 line(s) selected, 0 changed)" in result.stdout


def test_stdin_is_streamed_to_stdout(isolation: Path) -> None:
    result = _run(
        isolation,
        "-l",
        "1-3",
        "-L",
        "go",
        input_text="line 1\nline 2\nline 3\nline 4\n",
    )

    assert_SUCCESS(result)
    assert result.stdout == "// line 1\n// line 2\n// line 3\nline 4\n"


def test_dash_target_with_inline_range(isolation: Path) -> None:
    result = _run(isolation, "-f", "-:2", "-m", "#", input_text="a\nb\n")

    assert_SUCCESS(result)
    assert result.stdout == "a\n# b\n"


@pytest.mark.skipif(sys.platform == "win32", reason="stdout translates '\\n' on Windows")
def test_stdin_keeps_crlf_terminators(isolation: Path) -> None:
    result = _run(isolation, "-l", "1", "-m", "//", input_text=b"a\r\nb\r\n")

    assert_SUCCESS(result)
    # Result.stdout normalizes "\r\n", the raw bytes do not
    assert result.stdout_bytes == b"// a\r\nb\r\n"


def test_stdin_requires_language_or_marker(isolation: Path) -> None:
    result = _run(isolation, "-l", "1", input_text="a\n")

    assert_USAGE_ERROR(result)
    assert "--language" in result.stderr


# --- Usage errors ---


@parametrize(
    "args",
    [
        ["-f", "main.go", "-s", "BEGIN"],
        ["-f", "main.go", "-e", "END"],
        ["-f", "main.go", "-l", "1", "-s", "BEGIN", "-e", "END"],
        ["-f", "main.go:1", "-L", "go", "-m", "//"],
        ["-f", "main.go", "-l", "5-2"],
        ["-f", "main.go", "-l", "abc"],
        ["-f", "main.go", "-l", "²"],
        ["-f", "main.go:x"],
        ["-f", "main.go:1:2"],
        ["-f", "main.go"],
        ["-f", "main.go:1", "-m", "a b c"],
    ],
)
def test_usage_errors(isolation: Path, args: list[str]) -> None:
    f = write_source(isolation / "main.go", "a\nb\n")

    result = _run(isolation, *args)

    assert_USAGE_ERROR(result)
    assert result.stderr.startswith("Error: ")
    assert read_source(f) == "a\nb\n"


def test_verbose_and_quiet_conflict(isolation: Path) -> None:
    assert_USAGE_ERROR(run_cli_in(isolation, ["-v", "-q", "apply", "-f", "main.go:1"]))


# --- Data and I/O errors ---


def test_out_of_range_leaves_file_unchanged(isolation: Path) -> None:
    f = write_source(isolation / "main.go", FOUR_LINES)

    result = _run(isolation, "-f", "main.go:3-9")

    assert_exit(result, ExitCode.DATA_ERROR)
    assert "out of range" in result.stderr
    assert read_source(f) == FOUR_LINES
    assert sorted(p.name for p in isolation.iterdir()) == ["main.go", "tgcom.toml"]


def test_label_not_found(isolation: Path) -> None:
    write_source(isolation / "main.go", "a\n")

    result = _run(isolation, "-f", "main.go", "-s", "BEGIN", "-e", "END")

    assert_exit(result, ExitCode.DATA_ERROR)
    assert "start label not found" in result.stderr


def test_missing_file(isolation: Path) -> None:
    result = _run(isolation, "-f", "missing.go:1")

    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert "missing.go" in result.stderr
    assert not (isolation / "missing.go").exists()


def test_unsupported_extension(isolation: Path) -> None:
    write_source(isolation / "notes.txt", "a\n")

    result = _run(isolation, "-f", "notes.txt:1")

    assert_exit(result, ExitCode.UNSUPPORTED_LANGUAGE)
    assert "unsupported file extension: .txt" in result.stderr


def test_unknown_language(isolation: Path) -> None:
    write_source(isolation / "main.go", "a\n")

    result = _run(isolation, "-f", "main.go:1", "-L", "cobol")

    assert_exit(result, ExitCode.UNSUPPORTED_LANGUAGE)


def test_existing_backup_blocks_rewrite(isolation: Path) -> None:
    f = write_source(isolation / "main.go", "a\n")
    write_source(isolation / "main.go.bak", "mine\n")

    result = _run(isolation, "-f", "main.go:1")

    assert_exit(result, ExitCode.IO_ERROR)
    assert read_source(f) == "a\n"
    assert read_source(isolation / "main.go.bak") == "mine\n"


@pytest.mark.skipif(
    sys.platform == "win32" or os.geteuid() == 0,
    reason="needs POSIX permissions enforced for the current user",
)
def test_read_only_directory_is_permission_denied(isolation: Path) -> None:
    sub = isolation / "ro"
    sub.mkdir()
    f = write_source(sub / "main.go", "a\n")
    sub.chmod(0o555)
    try:
        result = _run(isolation, "-f", "ro/main.go:1")
    finally:
        sub.chmod(0o755)

    assert_exit(result, ExitCode.PERMISSION_DENIED)
    assert read_source(f) == "a\n"


def test_batch_stops_at_first_failure(isolation: Path) -> None:
    first = write_source(isolation / "a.go", "a\nb\n")
    bad = write_source(isolation / "b.go", "only\n")
    last = write_source(isolation / "c.go", "a\nb\n")

    result = _run(isolation, "-f", "a.go,b.go,c.go", "-l", "2", "-a", "comment")

    assert_exit(result, ExitCode.DATA_ERROR)
    assert "1 file(s) were modified before the failure." in result.stderr
    assert "b.go: line number is out of range" in result.stderr
    assert read_source(first) == "a\n// b\n"
    assert read_source(bad) == "only\n"
    assert read_source(last) == "a\nb\n"


# --- Configuration ---


def test_config_default_action(isolation: Path) -> None:
    (isolation / "tgcom.toml").write_text(
        'root = true\n[defaults]\naction = "comment"\n', encoding="utf-8"
    )
    f = write_source(isolation / "main.go", "// a\n")

    assert_SUCCESS(_run(isolation, "-f", "main.go:1"))
    assert read_source(f) == "// // a\n"

    assert_SUCCESS(_run(isolation, "-f", "main.go:1", "-a", "uncomment"))
    assert read_source(f) == "// a\n"


def test_config_dry_run_default(isolation: Path) -> None:
    (isolation / "tgcom.toml").write_text(
        "root = true\n[defaults]\ndry_run = true\n", encoding="utf-8"
    )
    f = write_source(isolation / "main.go", "a\n")

    result = _run(isolation, "-f", "main.go:1")

    assert_SUCCESS(result)
    assert result.stdout == "line 1: a -> // a\n"
    assert read_source(f) == "a\n"


def test_no_config_ignores_discovered_files(isolation: Path) -> None:
    (isolation / "tgcom.toml").write_text(
        'root = true\n[defaults]\naction = "comment"\n', encoding="utf-8"
    )
    f = write_source(isolation / "main.go", "// a\n")

    assert_SUCCESS(_run(isolation, "-f", "main.go:1", "--no-config"))

    assert read_source(f) == "a\n"


def test_explicit_config_adds_extension(isolation: Path) -> None:
    extra = isolation / "extra.toml"
    extra.write_text(
        '[languages]\njinja = "{# #}"\n[extensions]\n".j2" = "jinja"\n', encoding="utf-8"
    )
    f = write_source(isolation / "page.j2", "{{ x }}\n")

    assert_SUCCESS(_run(isolation, "-f", "page.j2:1", "--config", str(extra)))

    assert read_source(f) == "{# {{ x }} #}\n"


def test_invalid_config_is_config_error(isolation: Path) -> None:
    (isolation / "tgcom.toml").write_text(
        'root = true\n[defaults]\naction = "explode"\n', encoding="utf-8"
    )
    write_source(isolation / "main.go", "a\n")

    result = _run(isolation, "-f", "main.go:1")

    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "tgcom.toml" in result.stderr
