"""Script merging for composer.json / package.json.

Existing script keys outside the update set are kept as they are; keys inside
it are overwritten. A manifest that is missing or not a JSON object is never
created or rewritten.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from src.qa_setup.errors import ManifestMalformed, ManifestUnreadable

logger = logging.getLogger(__name__)

ScriptValue = str | list[str]


@dataclass(frozen=True)
class ManifestUpdateResult:
    path: str
    status: Literal["updated", "missing"]
    error: str | None = None


def merge_scripts(
    data: Mapping[str, Any], scripts: Mapping[str, ScriptValue]
) -> dict[str, Any]:
    out = dict(data)
    current = out.get("scripts")
    merged: dict[str, Any] = dict(current) if isinstance(current, dict) else {}
    for name, value in scripts.items():
        merged[name] = list(value) if isinstance(value, list) else value
    out["scripts"] = merged
    return out


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by json.loads but are not JSON.
    raise ValueError(f"invalid JSON constant {name}")


def load_manifest(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ManifestUnreadable(str(path))
    try:
        data = json.loads(
            path.read_text(encoding="utf-8"), parse_constant=_reject_constant
        )
    except UnicodeDecodeError as exc:
        raise ManifestMalformed(str(path), "is not UTF-8 text") from exc
    except ValueError as exc:
        raise ManifestMalformed(str(path), "is not valid JSON") from exc
    if not isinstance(data, dict):
        raise ManifestMalformed(str(path), "did not parse to a JSON object")
    return data


def dump_manifest(data: Mapping[str, Any]) -> str:
    return json.dumps(data, indent=4, ensure_ascii=False) + "\n"


def update_json_scripts(
    path: Path, scripts: Mapping[str, ScriptValue]
) -> ManifestUpdateResult:
    """Merge `scripts` into the manifest at `path` and rewrite it.

    A missing file is reported in the result, not raised. Raises
    ManifestMalformed when the file exists but is not a JSON object; the file
    is left untouched in that case.
    """
    try:
        data = load_manifest(path)
    except ManifestUnreadable as exc:
        return ManifestUpdateResult(path=str(path), status="missing", error=str(exc))

    path.write_text(dump_manifest(merge_scripts(data, scripts)), encoding="utf-8")
    logger.debug("Merged %d scripts into %s", len(scripts), path)
    return ManifestUpdateResult(path=str(path), status="updated")
