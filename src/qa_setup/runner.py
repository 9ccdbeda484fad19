from __future__ import annotations

import contextlib
import logging
import os
import signal
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from src.qa_setup.catalog import SAIL_PREFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    command: str
    exit_code: int
    output: str
    truncated: bool

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class Shell(Protocol):
    def execute(self, command: str) -> CommandResult: ...


def _truncate(text: str, *, max_chars: int) -> tuple[str, bool]:
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars], True


def _decode_output(b: bytes | str | None) -> str:
    if b is None:
        return ""
    if isinstance(b, str):
        return b
    return b.decode("utf-8", errors="replace")


def _kill_process_tree(proc: subprocess.Popen[bytes]) -> None:
    # `start_new_session=True` makes proc.pid the process group id on Linux.
    try:
        os.killpg(proc.pid, signal.SIGTERM)
    except OSError:
        with contextlib.suppress(OSError):
            proc.terminate()
    try:
        proc.wait(timeout=1.0)
    except subprocess.TimeoutExpired:
        pass
    # Grandchildren may outlive the shell; SIGKILL the whole group regardless.
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except OSError:
        with contextlib.suppress(OSError):
            proc.kill()


def wrap_command(command: str, *, inside_sail: bool) -> str:
    """Route a command through Sail unless we already run inside its container."""
    if inside_sail:
        return command
    return SAIL_PREFIX + command


class LocalShell:
    """Runs commands through /bin/sh in the project root and captures output."""

    def __init__(
        self,
        *,
        cwd: Path,
        timeout_s: int = 1800,
        max_output_chars: int = 50_000,
    ) -> None:
        self._cwd = cwd
        self._timeout_s = timeout_s
        self._max_output_chars = max_output_chars

    def execute(self, command: str) -> CommandResult:
        logger.debug("Running %r in %s", command, self._cwd)
        try:
            proc: subprocess.Popen[bytes] = subprocess.Popen(
                command,
                shell=True,
                cwd=str(self._cwd),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                start_new_session=True,
            )
        except OSError as exc:
            # cwd vanished or /bin/sh missing; report like a shell would.
            return CommandResult(
                command=command, exit_code=127, output=str(exc), truncated=False
            )

        try:
            stdout, _ = proc.communicate(timeout=self._timeout_s)
        except subprocess.TimeoutExpired as exc:
            _kill_process_tree(proc)
            partial = exc.stdout
            with contextlib.suppress(subprocess.TimeoutExpired, OSError, ValueError):
                partial, _ = proc.communicate(timeout=5.0)
            output = _decode_output(partial) or (
                f"Command timed out after {self._timeout_s}s"
            )
            output, truncated = _truncate(output, max_chars=self._max_output_chars)
            return CommandResult(
                command=command, exit_code=124, output=output, truncated=truncated
            )

        output, truncated = _truncate(
            _decode_output(stdout), max_chars=self._max_output_chars
        )
        return CommandResult(
            command=command,
            exit_code=proc.returncode,
            output=output,
            truncated=truncated,
        )
