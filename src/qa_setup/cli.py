"""Command-line entry point: ``qa-setup``."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from src.qa_setup.orchestrator import run_setup


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="qa-setup",
        description="Install and configure QA tools for Laravel + Vue + Inertia stack",
        epilog="Environment:\n"
        "  SAIL=1                        run commands directly (already inside Sail)\n"
        "  QA_SETUP_STRICT=1             exit 1 when any setup step failed\n"
        "  QA_SETUP_COMMAND_TIMEOUT_S    per-command timeout in seconds (default 1800)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Laravel project root (default: current directory)",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true", help="log captured command output"
    )
    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    root = (args.project_dir or Path.cwd()).resolve()
    if not root.is_dir():
        parser.error(f"project directory does not exist: {root}")

    report = run_setup(root)
    return report.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
