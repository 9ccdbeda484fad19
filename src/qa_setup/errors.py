from __future__ import annotations


class QaSetupError(RuntimeError):
    """Base class for setup errors."""


class MissingPrerequisite(QaSetupError):
    def __init__(self, what: str, *, hint: str) -> None:
        super().__init__(f"{what} is not installed. Run: {hint}")
        self.what = what
        self.hint = hint


class ManifestUnreadable(QaSetupError):
    def __init__(self, path: str) -> None:
        super().__init__(f"File {path} does not exist, skipping.")
        self.path = path


class ManifestMalformed(QaSetupError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"File {path} {reason}, leaving it untouched.")
        self.path = path
        self.reason = reason


class CommandFailed(QaSetupError):
    def __init__(self, command: str, exit_code: int) -> None:
        super().__init__(f"Command failed with exit code {exit_code}: {command}")
        self.command = command
        self.exit_code = exit_code
