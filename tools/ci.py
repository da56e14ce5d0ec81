#!/usr/bin/env python3
# Copyright 2026 Guardgen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run CI checks locally: format, lint, tests, and build.

Pass step keys (``format``, ``lint``, ``tests``, ``build``) to run a subset.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, tuple[str, list[str]]] = {
    "format": ("Format check", ["ruff", "format", "--check", "src/", "tests/"]),
    "lint": ("Lint", ["ruff", "check", "src/", "tests/"]),
    "tests": ("Tests", ["pytest", "--cov=guardgen", "--cov-report=term-missing"]),
    "build": ("Build", [sys.executable, "-m", "build"]),
}


def main(argv: list[str]) -> int:
    """Run the selected CI steps (all by default) and report results."""
    unknown = [key for key in argv if key not in STEPS]
    if unknown:
        print(chalk.red(f"Unknown step(s): {', '.join(unknown)}. Known: {', '.join(STEPS)}"))
        return 2
    selected = argv or list(STEPS)

    results: list[tuple[str, bool, float]] = []
    for key in selected:
        name, cmd = STEPS[key]
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=Path(__file__).parent.parent)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    for name, passed, elapsed in results:
        status = chalk.green("PASS") if passed else chalk.red("FAIL")
        print(f"  {status}  {name} ({elapsed:.1f}s)")
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
