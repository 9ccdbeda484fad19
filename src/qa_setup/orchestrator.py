from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from src.qa_setup import ui
from src.qa_setup.catalog import (
    COMPOSER_JSON,
    COMPOSER_SCRIPTS,
    PACKAGE_JSON,
    PACKAGE_JSON_SCRIPTS,
    SAIL_INSTALL_HINT,
    TSCONFIG_INIT_COMMAND,
    TSCONFIG_JSON,
    backend_install_command,
    build_command,
    frontend_dev_packages,
    frontend_install_command,
)
from src.qa_setup.config import SetupConfig
from src.qa_setup.detection import (
    PackageManager,
    frontend_integration_present,
    read_package_json,
    sail_present,
    select_package_manager,
)
from src.qa_setup.errors import CommandFailed, MissingPrerequisite, QaSetupError
from src.qa_setup.manifest import ScriptValue, update_json_scripts
from src.qa_setup.runner import CommandResult, LocalShell, Shell, wrap_command
from src.qa_setup.stubs import STUB_FILES, StubFile

logger = logging.getLogger(__name__)

StepStatus = Literal["ok", "skipped", "failed"]

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class StepOutcome:
    name: str
    status: StepStatus
    detail: str | None = None


@dataclass
class SetupReport:
    package_manager: PackageManager | None = None
    integration_present: bool = False
    created_files: list[str] = field(default_factory=list)
    commands: list[CommandResult] = field(default_factory=list)
    steps: list[StepOutcome] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    exit_code: int = EXIT_SUCCESS

    @property
    def failed_steps(self) -> list[StepOutcome]:
        return [s for s in self.steps if s.status == "failed"]

    def step(self, name: str) -> StepOutcome | None:
        for s in self.steps:
            if s.name == name:
                return s
        return None


class _Skip(Exception):
    """Raised inside a step to mark it skipped; not an error."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail


class QaSetup:
    """One run of the QA environment setup against a project directory."""

    def __init__(self, root: Path, *, shell: Shell, config: SetupConfig) -> None:
        self.root = root
        self.shell = shell
        self.config = config
        self.report = SetupReport()

    # -- helpers -----------------------------------------------------------

    def _warn(self, message: str) -> None:
        self.report.warnings.append(message)
        ui.print_warning(message)

    def _step(self, name: str, fn: Callable[[], str | None]) -> StepOutcome:
        try:
            detail = fn()
            outcome = StepOutcome(name=name, status="ok", detail=detail)
        except _Skip as skip:
            outcome = StepOutcome(name=name, status="skipped", detail=skip.detail)
        except QaSetupError as exc:
            self._warn(str(exc))
            outcome = StepOutcome(name=name, status="failed", detail=str(exc))
        except OSError as exc:
            logger.exception("Step %s failed", name)
            self._warn(f"Step {name} failed: {exc}")
            outcome = StepOutcome(name=name, status="failed", detail=str(exc))
        self.report.steps.append(outcome)
        return outcome

    def _run(self, command: str) -> CommandResult:
        res = self.shell.execute(wrap_command(command, inside_sail=self.config.inside_sail))
        self.report.commands.append(res)
        if res.output:
            logger.debug("Output of %r:\n%s", res.command, res.output)
        if not res.ok:
            tail = res.output[-2_000:]
            logger.warning("%r exited with %d:\n%s", res.command, res.exit_code, tail)
            raise CommandFailed(res.command, res.exit_code)
        return res

    def _exists(self, rel_path: str) -> bool:
        return (self.root / rel_path).exists()

    # -- steps -------------------------------------------------------------

    def require_sail(self) -> None:
        if not sail_present(self.root):
            raise MissingPrerequisite("Laravel Sail", hint=SAIL_INSTALL_HINT)

    def detect_package_manager(self) -> str:
        pm = select_package_manager(self.root)
        self.report.package_manager = pm
        ui.print_info(f"Detected package manager: {pm}")
        return pm

    def detect_integration(self) -> str:
        pkg = read_package_json(self.root)
        if not pkg.exists:
            self._warn("package.json not found, skipping Inertia check.")
            raise _Skip("package.json not found")
        if pkg.error:
            self._warn(f"{pkg.error}, skipping Inertia check.")
            raise _Skip(pkg.error)

        present = frontend_integration_present(pkg.data)
        self.report.integration_present = present
        if present:
            ui.print_info("Inertia.js detected in package.json dependencies.")
            return "detected"
        ui.print_info("Inertia.js not detected. Skipping Vue frontend tools installation.")
        return "not detected"

    def install_backend(self) -> None:
        ui.print_info("Installing Composer dev dependencies...")
        self._run(backend_install_command())

    def install_frontend(self) -> None:
        pm = self._package_manager()
        ui.print_info(f"Installing frontend dev dependencies using {pm}...")
        packages = frontend_dev_packages(
            integration_present=self.report.integration_present
        )
        self._run(frontend_install_command(pm, packages))

    def update_scripts(self, rel_path: str, scripts: dict[str, ScriptValue]) -> None:
        ui.print_info(f"Updating {rel_path} scripts...")
        res = update_json_scripts(self.root / rel_path, scripts)
        if res.status == "missing":
            self._warn(res.error or f"File {res.path} does not exist, skipping.")
            raise _Skip("missing")

    def create_file_if_missing(self, stub: StubFile) -> None:
        if self._exists(stub.path):
            raise _Skip("exists")
        for alt in stub.satisfied_by:
            if self._exists(alt):
                raise _Skip(f"{alt} exists")
        dest = self.root / stub.path
        try:
            fh = dest.open("xb")
        except FileExistsError:
            raise _Skip("exists") from None
        try:
            with fh:
                fh.write(stub.payload())
        except OSError:
            # Stubs are write-once; never leave a partial file behind.
            dest.unlink(missing_ok=True)
            raise
        self.report.created_files.append(stub.path)
        ui.print_success(f"Created: {stub.path}")

    def generate_tsconfig(self) -> None:
        if self._exists(TSCONFIG_JSON):
            raise _Skip("exists")
        ui.print_info("Generating tsconfig.json...")
        self._run(TSCONFIG_INIT_COMMAND)

    def build(self) -> None:
        ui.print_info("Running initial frontend build...")
        self._run(build_command(self._package_manager()))

    def _package_manager(self) -> str:
        return self.report.package_manager or select_package_manager(self.root)

    def summarize(self) -> None:
        failed = self.report.failed_steps
        if failed:
            names = ", ".join(s.name for s in failed)
            ui.print_warning(
                f"QA environment setup finished with {len(failed)} failed step(s): {names}"
            )
        else:
            ui.print_success("QA environment is fully configured.")
        if self.report.created_files:
            ui.show_panel("Created files", "\n".join(self.report.created_files))
        ui.print_line('Run "composer check-all" to verify full quality checks.')
        ui.print_line(f'Run "{self._package_manager()} run test" to run frontend tests.')

    # -- entry -------------------------------------------------------------

    def run(self) -> SetupReport:
        ui.print_info("Starting QA environment setup using Laravel Sail.")
        try:
            self.require_sail()
        except MissingPrerequisite as exc:
            ui.print_error(str(exc))
            self.report.steps.append(
                StepOutcome(name="prerequisites", status="failed", detail=str(exc))
            )
            self.report.exit_code = EXIT_FAILURE
            return self.report

        self._step("package-manager", self.detect_package_manager)
        self._step("integration", self.detect_integration)
        self._step("install:backend", self.install_backend)
        self._step("install:frontend", self.install_frontend)
        self._step(
            f"manifest:{COMPOSER_JSON}",
            lambda: self.update_scripts(COMPOSER_JSON, COMPOSER_SCRIPTS),
        )
        self._step(
            f"manifest:{PACKAGE_JSON}",
            lambda: self.update_scripts(PACKAGE_JSON, PACKAGE_JSON_SCRIPTS),
        )
        for stub in STUB_FILES:
            self._step(f"stub:{stub.path}", lambda s=stub: self.create_file_if_missing(s))
        self._step(f"generate:{TSCONFIG_JSON}", self.generate_tsconfig)
        self._step("build", self.build)

        self.summarize()
        if self.config.strict and self.report.failed_steps:
            self.report.exit_code = EXIT_FAILURE
        return self.report


def run_setup(
    root: Path,
    *,
    shell: Shell | None = None,
    config: SetupConfig | None = None,
) -> SetupReport:
    cfg = config or SetupConfig.from_env()
    sh = shell or LocalShell(
        cwd=root,
        timeout_s=cfg.command_timeout_s,
        max_output_chars=cfg.max_output_chars,
    )
    return QaSetup(root, shell=sh, config=cfg).run()
