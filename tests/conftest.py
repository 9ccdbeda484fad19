import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so tests can import the local `src/` package.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _isolate_setup_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # A developer shell inside Sail (or with strict mode on) must not leak into tests.
    for name in (
        "SAIL",
        "QA_SETUP_STRICT",
        "QA_SETUP_COMMAND_TIMEOUT_S",
        "QA_SETUP_MAX_OUTPUT_CHARS",
    ):
        monkeypatch.delenv(name, raising=False)
