# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line argument resolution.

Turns the raw process arguments into a validated :class:`RunConfiguration`.
The accepted grammar is::

    symbolic [--from <src|source|tokens|ast|bytecode>]
             [--to <tokens|ast|bytecode>]
             [<input-file-or->] [<output-file-or->]

Options may appear anywhere and a repeated option overrides the earlier one.
The first positional token names the input, the second the output; ``-``
selects the matching standard stream. The stage range is validated once,
after every token has been consumed.

Parsing is a fold over the token list: :func:`step` consumes one option or
positional token from the front and returns a new :class:`ParseState`
together with the tokens that remain.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from symbolic.errors import ErrorKind, SymbolicError
from symbolic.pipeline.config import OptimizerConfig, RunConfiguration
from symbolic.pipeline.stage import Stage
from symbolic.streams.named import STANDARD_STREAM_NAME, NamedReader, NamedWriter

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class Phase(enum.Enum):
    """Which positional slots have been claimed so far."""

    PARSING = "parsing"
    INPUT_BOUND = "input-bound"
    BOTH_BOUND = "both-bound"


@dataclass(frozen=True)
class ParseState:
    """Accumulated configuration between two parsing steps."""

    source: Stage
    target: Stage
    input: NamedReader
    output: NamedWriter
    optimizer: OptimizerConfig
    phase: Phase = Phase.PARSING

    @classmethod
    def initial(cls, optimizer: OptimizerConfig | None = None) -> ParseState:
        """Return the state before any token is read."""
        return cls(
            source=Stage.SOURCE,
            target=Stage.EXECUTED_OUTPUT,
            input=NamedReader.stdin(),
            output=NamedWriter.stdout(),
            optimizer=optimizer if optimizer is not None else OptimizerConfig(),
        )

    def release(self) -> None:
        """Close any files opened for the positional slots."""
        self.input.close()
        self.output.close()


def parse_args(argv: Sequence[str], optimizer: OptimizerConfig | None = None) -> RunConfiguration:
    """Resolve a run configuration from the full process argument list.

    Args:
        argv: The arguments including the program name at index 0.
        optimizer: Optimizer settings to carry through; all passes are off if omitted.

    Returns:
        A validated RunConfiguration owning the opened input and output handles.

    Raises:
        SymbolicError: INVALID_OPTION for malformed options or an inverted stage
            range, TOO_MANY_FILES for a third positional token, or a file-system
            kind if a positional file cannot be opened.
    """
    if not argv:
        raise SymbolicError(ErrorKind.INVALID_OPTION, "missing program name")

    state = ParseState.initial(optimizer)
    tokens: Sequence[str] = argv[1:]
    try:
        while tokens:
            state, tokens = step(state, tokens)
        _check_stage_range(state)
    except SymbolicError:
        state.release()
        raise

    logger.debug(
        "Resolved %s -> %s (%s => %s)",
        state.source.name,
        state.target.name,
        state.input.name,
        state.output.name,
    )
    return RunConfiguration(
        source=state.source,
        target=state.target,
        input=state.input,
        output=state.output,
        optimizer=state.optimizer,
    )


def step(state: ParseState, tokens: Sequence[str]) -> tuple[ParseState, Sequence[str]]:
    """Consume the leading option or positional token.

    Args:
        state: The state built from the tokens consumed so far.
        tokens: The unconsumed tokens; must not be empty.

    Returns:
        The new state and the tokens that remain after this step.

    Raises:
        SymbolicError: On the first malformed token.
    """
    token, rest = tokens[0], tokens[1:]

    if token == "--from":
        value, rest = _option_value(token, rest)
        return replace(state, source=Stage.parse_from(value)), rest

    if token == "--to":
        value, rest = _option_value(token, rest)
        return replace(state, target=Stage.parse_to(value)), rest

    return _bind_positional(state, token), rest


# ################
# Implementation
# ################


def _option_value(option: str, rest: Sequence[str]) -> tuple[str, Sequence[str]]:
    """Split off the argument of *option*."""
    if not rest:
        raise SymbolicError(ErrorKind.INVALID_OPTION, f"missing value for {option}")
    return rest[0], rest[1:]


def _bind_positional(state: ParseState, filename: str) -> ParseState:
    """Claim the next free positional slot for *filename*."""
    if state.phase is Phase.PARSING:
        reader = NamedReader.stdin() if filename == STANDARD_STREAM_NAME else NamedReader.open(filename)
        logger.debug("Bound input to %s", reader.name)
        return replace(state, input=reader, phase=Phase.INPUT_BOUND)

    if state.phase is Phase.INPUT_BOUND:
        writer = NamedWriter.stdout() if filename == STANDARD_STREAM_NAME else NamedWriter.create(filename)
        logger.debug("Bound output to %s", writer.name)
        return replace(state, output=writer, phase=Phase.BOTH_BOUND)

    raise SymbolicError(ErrorKind.TOO_MANY_FILES, f"unexpected file argument {filename!r}")


def _check_stage_range(state: ParseState) -> None:
    if state.source > state.target:
        raise SymbolicError(
            ErrorKind.INVALID_OPTION,
            f"cannot go from {state.source.value} back to {state.target.value}",
        )
