from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


def _env_bool(name: str, *, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off", ""):
        return False
    return default


def _env_int(name: str, default: int) -> int:
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return int(default)
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid integer for %s=%r, using default %d", name, raw, default)
        return int(default)


_FALSY_ENV_VALUES = frozenset(
    ("", "0", "false", "(false)", "no", "off", "null", "(null)", "empty", "(empty)")
)


def _env_truthy(name: str) -> bool:
    """Any non-empty value outside the usual falsy spellings counts as set."""
    raw = os.environ.get(name)
    if raw is None:
        return False
    return raw.strip().lower() not in _FALSY_ENV_VALUES


def inside_sail() -> bool:
    # Sail sets SAIL=1 inside its containers.
    return _env_truthy("SAIL")


def command_timeout_s() -> int:
    return max(1, _env_int("QA_SETUP_COMMAND_TIMEOUT_S", 1800))


def max_output_chars() -> int:
    return max(1_000, _env_int("QA_SETUP_MAX_OUTPUT_CHARS", 50_000))


def strict_mode() -> bool:
    return _env_bool("QA_SETUP_STRICT", default=False)


@dataclass(frozen=True)
class SetupConfig:
    inside_sail: bool = False
    command_timeout_s: int = 1800
    max_output_chars: int = 50_000
    strict: bool = False

    @classmethod
    def from_env(cls) -> SetupConfig:
        return cls(
            inside_sail=inside_sail(),
            command_timeout_s=command_timeout_s(),
            max_output_chars=max_output_chars(),
            strict=strict_mode(),
        )
