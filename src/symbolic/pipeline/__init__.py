# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Pipeline stages and run-configuration resolution."""

from symbolic.pipeline.args import ParseState, Phase, parse_args, step
from symbolic.pipeline.config import OptimizerConfig, RunConfiguration
from symbolic.pipeline.stage import FROM_STAGES, TO_STAGES, Stage

__all__ = [
    "FROM_STAGES",
    "TO_STAGES",
    "OptimizerConfig",
    "ParseState",
    "Phase",
    "RunConfiguration",
    "Stage",
    "parse_args",
    "step",
]
