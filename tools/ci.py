#!/usr/bin/env python3
# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=symbolic", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps (all of them by default) and report results."""
    selected = _select_steps(argv if argv is not None else sys.argv[1:])
    if selected is None:
        names = ", ".join(name for name, _ in STEPS)
        print(chalk.red(f"Unknown step. Choose from: {names}"), file=sys.stderr)
        return 2

    results = [_run_step(name, cmd) for name, cmd in selected]
    return _report(results)


# ################
# Implementation
# ################


def _select_steps(names: list[str]) -> list[tuple[str, list[str]]] | None:
    if not names:
        return STEPS
    by_name = {name.lower(): (name, cmd) for name, cmd in STEPS}
    try:
        return [by_name[name.lower()] for name in names]
    except KeyError:
        return None


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(name))
    print(sep)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=_repo_root())
    return name, proc.returncode == 0, time.monotonic() - start


def _report(results: list[tuple[str, bool, float]]) -> int:
    sep = "=" * 60
    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(sep))
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(colour(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


def _repo_root() -> str:
    return str(Path(__file__).parent.parent)


if __name__ == "__main__":
    sys.exit(main())
