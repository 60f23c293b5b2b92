# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Resolved run configuration handed to the compiler driver."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from symbolic.pipeline.stage import Stage
from symbolic.streams.named import NamedReader, NamedWriter

# ###############
# Public Interface
# ###############


class OptimizerConfig(BaseModel):
    """Optimization passes requested for the bytecode compiler.

    Attributes:
        constant_fold: Pre-calculate the values of constant expressions,
            e.g. ``a = 114 + 514`` compiles to a single ``PUSH_CONST 628``.
        remove_dead_code: Drop instructions that can never be reached.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    constant_fold: bool = Field(alias="constant-fold", default=False)
    remove_dead_code: bool = Field(alias="remove-dead-code", default=False)


@dataclass(frozen=True)
class RunConfiguration:
    """The fully resolved result of argument parsing.

    The configuration owns its input and output handles; closing it releases
    any files that were opened for them.

    Attributes:
        source: The stage the input is already expressed in.
        target: The stage the run stops at.
        input: Where the program is read from.
        output: Where the result is written to.
        optimizer: Optimization passes to apply.
    """

    source: Stage
    target: Stage
    input: NamedReader
    output: NamedWriter
    optimizer: OptimizerConfig = field(default_factory=OptimizerConfig)

    def close(self) -> None:
        """Release both handles."""
        self.input.close()
        self.output.close()

    def __enter__(self) -> RunConfiguration:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
