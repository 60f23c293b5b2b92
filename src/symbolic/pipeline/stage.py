# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Pipeline stages and their total order.

A stage describes how far a representation of the program has been
processed, from raw source text up to the output of running it.
"""

from __future__ import annotations

import enum
import functools

from symbolic.errors import ErrorKind, SymbolicError

# ###############
# Public Interface
# ###############


@functools.total_ordering
class Stage(enum.Enum):
    """A point in the source-to-output transformation sequence."""

    SOURCE = "source"
    TOKEN_STREAM = "tokens"
    SYNTAX_TREE = "ast"
    BYTECODE = "bytecode"
    EXECUTED_OUTPUT = "output"

    @property
    def rank(self) -> int:
        """Position in the pipeline; lower ranks are less processed."""
        return _RANKS[self]

    @property
    def verb(self) -> str:
        """Status verb describing a run that stops at this stage.

        Raises:
            ValueError: For ``SOURCE``, which is never a target.
        """
        try:
            return _VERBS[self]
        except KeyError:
            raise ValueError(f"{self.name} is not a target stage") from None

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Stage):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def parse_from(cls, value: str) -> Stage:
        """Map a ``--from`` argument to the stage the input is expressed in.

        Raises:
            SymbolicError: INVALID_OPTION if *value* is not a valid starting stage.
        """
        return _lookup(FROM_STAGES, value, "--from")

    @classmethod
    def parse_to(cls, value: str) -> Stage:
        """Map a ``--to`` argument to the stage the run stops at.

        Raises:
            SymbolicError: INVALID_OPTION if *value* is not a valid target stage.
        """
        return _lookup(TO_STAGES, value, "--to")


# EXECUTED_OUTPUT is never a starting point.
FROM_STAGES: dict[str, Stage] = {
    "src": Stage.SOURCE,
    "source": Stage.SOURCE,
    "tokens": Stage.TOKEN_STREAM,
    "ast": Stage.SYNTAX_TREE,
    "bytecode": Stage.BYTECODE,
}

# SOURCE is never a target; EXECUTED_OUTPUT is the implicit default.
TO_STAGES: dict[str, Stage] = {
    "tokens": Stage.TOKEN_STREAM,
    "ast": Stage.SYNTAX_TREE,
    "bytecode": Stage.BYTECODE,
}


# ################
# Implementation
# ################

_RANKS: dict[Stage, int] = {
    Stage.SOURCE: 0,
    Stage.TOKEN_STREAM: 1,
    Stage.SYNTAX_TREE: 2,
    Stage.BYTECODE: 3,
    Stage.EXECUTED_OUTPUT: 4,
}

_VERBS: dict[Stage, str] = {
    Stage.TOKEN_STREAM: "Tokenizing",
    Stage.SYNTAX_TREE: "Parsing",
    Stage.BYTECODE: "Compiling",
    Stage.EXECUTED_OUTPUT: "Running",
}


def _lookup(table: dict[str, Stage], value: str, option: str) -> Stage:
    try:
        return table[value]
    except KeyError:
        choices = ", ".join(table)
        raise SymbolicError(
            ErrorKind.INVALID_OPTION,
            f"invalid value {value!r} for {option} (choose from {choices})",
        ) from None
