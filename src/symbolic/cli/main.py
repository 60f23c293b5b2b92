# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Symbolic command-line interface."""

import logging
import sys
from pathlib import Path

from symbolic.errors import SymbolicError
from symbolic.pipeline.args import parse_args
from symbolic.pipeline.config import RunConfiguration
from symbolic.workspace.config import SettingsError, find_settings

# ###############
# Public Interface
# ###############

BANNER = "Symbolic, the language that has no keywords"


def main() -> None:
    """Run the Symbolic CLI."""
    print(BANNER)

    try:
        settings = find_settings(Path.cwd())
    except SettingsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = parse_args(sys.argv, optimizer=settings.optimizer)
    except SymbolicError as exc:
        print(f"Error: invalid args: {exc}", file=sys.stderr)
        sys.exit(1)

    with config:
        sys.exit(_run(config))


# ################
# Implementation
# ################


def _run(config: RunConfiguration) -> int:
    """Read the input and echo it; later stages are not implemented yet."""
    print(f"{config.target.verb} {config.input.name}...")
    try:
        data = config.input.read_text()
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1

    print(f"Read:\n{data}")
    return 0
