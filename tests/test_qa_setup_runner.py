from __future__ import annotations

import time
from pathlib import Path

from src.qa_setup.runner import CommandResult, LocalShell, wrap_command


def test_wrap_command_prefixes_sail() -> None:
    assert wrap_command("npm run build", inside_sail=False) == "./vendor/bin/sail npm run build"


def test_wrap_command_inside_sail_is_unprefixed() -> None:
    assert wrap_command("npm run build", inside_sail=True) == "npm run build"


def test_local_shell_captures_output_and_exit_code(tmp_path: Path) -> None:
    sh = LocalShell(cwd=tmp_path)
    res = sh.execute("echo hello; echo oops 1>&2; exit 3")
    assert res.exit_code == 3
    assert not res.ok
    assert "hello" in res.output
    assert "oops" in res.output
    assert res.truncated is False


def test_local_shell_runs_in_cwd(tmp_path: Path) -> None:
    (tmp_path / "marker.txt").write_text("x", encoding="utf-8")
    res = LocalShell(cwd=tmp_path).execute("test -f marker.txt")
    assert res.ok


def test_local_shell_truncates_output(tmp_path: Path) -> None:
    sh = LocalShell(cwd=tmp_path, max_output_chars=10)
    res = sh.execute("printf '%s' 0123456789abcdef")
    assert res.output == "0123456789"
    assert res.truncated is True


def test_local_shell_timeout_reports_124(tmp_path: Path) -> None:
    sh = LocalShell(cwd=tmp_path, timeout_s=1)
    res = sh.execute("sleep 5")
    assert res.exit_code == 124


def test_local_shell_timeout_kills_grandchildren(tmp_path: Path) -> None:
    sh = LocalShell(cwd=tmp_path, timeout_s=1)
    res = sh.execute("bash -c 'sleep 3; touch marker'; true")
    assert res.exit_code == 124

    time.sleep(4)
    assert not (tmp_path / "marker").exists()


def test_local_shell_missing_cwd_reports_127(tmp_path: Path) -> None:
    res = LocalShell(cwd=tmp_path / "gone").execute("true")
    assert res.exit_code == 127


def test_command_result_ok() -> None:
    assert CommandResult(command="true", exit_code=0, output="", truncated=False).ok
