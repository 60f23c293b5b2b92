# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for pipeline stages and their ordering."""

import pytest

from symbolic.errors import ErrorKind, SymbolicError
from symbolic.pipeline.stage import FROM_STAGES, TO_STAGES, Stage

# ###############
# Ordering
# ###############


def test_stages_are_totally_ordered() -> None:
    ordered = [Stage.SOURCE, Stage.TOKEN_STREAM, Stage.SYNTAX_TREE, Stage.BYTECODE, Stage.EXECUTED_OUTPUT]
    assert sorted(reversed(ordered)) == ordered
    for lower, higher in zip(ordered, ordered[1:]):
        assert lower < higher
        assert lower <= higher
        assert higher > lower
        assert higher >= lower
        assert not higher <= lower


def test_ranks_are_distinct() -> None:
    assert [stage.rank for stage in Stage] == [0, 1, 2, 3, 4]


def test_comparison_with_other_types_is_unsupported() -> None:
    with pytest.raises(TypeError):
        _ = Stage.SOURCE < 1  # type: ignore[operator]


# ###############
# Mapping tables
# ###############


def test_source_is_never_a_target() -> None:
    assert Stage.SOURCE not in TO_STAGES.values()


def test_executed_output_is_never_a_start() -> None:
    assert Stage.EXECUTED_OUTPUT not in FROM_STAGES.values()


@pytest.mark.parametrize(
    ("value", "stage"),
    [
        ("src", Stage.SOURCE),
        ("source", Stage.SOURCE),
        ("tokens", Stage.TOKEN_STREAM),
        ("ast", Stage.SYNTAX_TREE),
        ("bytecode", Stage.BYTECODE),
    ],
)
def test_parse_from(value: str, stage: Stage) -> None:
    assert Stage.parse_from(value) is stage


@pytest.mark.parametrize("value", ["src", "source", "output", "Tokens"])
def test_parse_to_rejects(value: str) -> None:
    with pytest.raises(SymbolicError) as exc_info:
        Stage.parse_to(value)
    assert exc_info.value.kind is ErrorKind.INVALID_OPTION
    assert "--to" in str(exc_info.value)


# ###############
# Status verbs
# ###############


@pytest.mark.parametrize(
    ("stage", "verb"),
    [
        (Stage.TOKEN_STREAM, "Tokenizing"),
        (Stage.SYNTAX_TREE, "Parsing"),
        (Stage.BYTECODE, "Compiling"),
        (Stage.EXECUTED_OUTPUT, "Running"),
    ],
)
def test_verb(stage: Stage, verb: str) -> None:
    assert stage.verb == verb


def test_source_has_no_verb() -> None:
    with pytest.raises(ValueError, match="not a target"):
        _ = Stage.SOURCE.verb
