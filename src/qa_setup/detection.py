from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from src.qa_setup.catalog import (
    INTEGRATION_PACKAGE,
    PACKAGE_JSON,
    PNPM_LOCK_FILE,
    SAIL_BINARY,
)

logger = logging.getLogger(__name__)

PackageManager = Literal["npm", "pnpm"]

DEFAULT_PACKAGE_MANAGER: PackageManager = "npm"


@dataclass(frozen=True)
class PackageJsonReadResult:
    exists: bool
    data: dict[str, Any] | None
    error: str | None


def sail_present(root: Path) -> bool:
    return (root / SAIL_BINARY).exists()


def select_package_manager(root: Path) -> PackageManager:
    if (root / PNPM_LOCK_FILE).exists():
        return "pnpm"
    return DEFAULT_PACKAGE_MANAGER


def read_package_json(root: Path) -> PackageJsonReadResult:
    path = root / PACKAGE_JSON
    if not path.is_file():
        return PackageJsonReadResult(exists=False, data=None, error=None)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return PackageJsonReadResult(
            exists=True,
            data=None,
            error="package.json exists but could not be read",
        )

    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return PackageJsonReadResult(
            exists=True,
            data=None,
            error="package.json exists but is not valid JSON",
        )

    if not isinstance(data, dict):
        return PackageJsonReadResult(
            exists=True,
            data=None,
            error="package.json exists but did not parse to a JSON object",
        )
    return PackageJsonReadResult(exists=True, data=data, error=None)


def frontend_integration_present(package_json: dict[str, Any] | None) -> bool:
    if not isinstance(package_json, dict):
        return False
    for key in ("dependencies", "devDependencies"):
        deps = package_json.get(key)
        if isinstance(deps, dict) and INTEGRATION_PACKAGE in deps:
            return True
    return False
