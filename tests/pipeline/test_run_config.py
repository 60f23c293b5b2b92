# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the resolved run configuration."""

import dataclasses
from pathlib import Path

import pytest
from pydantic import ValidationError

from symbolic.pipeline.config import OptimizerConfig, RunConfiguration
from symbolic.pipeline.stage import Stage
from symbolic.streams.named import NamedReader, NamedWriter


def _config(tmp_path: Path) -> RunConfiguration:
    source_file = tmp_path / "in.sym"
    source_file.write_text("x", encoding="utf-8")
    return RunConfiguration(
        source=Stage.SOURCE,
        target=Stage.BYTECODE,
        input=NamedReader.open(str(source_file)),
        output=NamedWriter.create(str(tmp_path / "out.bin")),
    )


def test_optimizer_defaults_off() -> None:
    optimizer = OptimizerConfig()
    assert optimizer.constant_fold is False
    assert optimizer.remove_dead_code is False


def test_optimizer_accepts_aliases() -> None:
    optimizer = OptimizerConfig.model_validate({"constant-fold": True, "remove-dead-code": True})
    assert optimizer.constant_fold
    assert optimizer.remove_dead_code


def test_optimizer_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError):
        OptimizerConfig.model_validate({"inline": True})


def test_optimizer_is_frozen() -> None:
    optimizer = OptimizerConfig()
    with pytest.raises(ValidationError):
        optimizer.constant_fold = True  # type: ignore[misc]


def test_configuration_is_immutable(tmp_path: Path) -> None:
    with _config(tmp_path) as config:
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.target = Stage.SYNTAX_TREE  # type: ignore[misc]


def test_close_releases_file_handles(tmp_path: Path) -> None:
    config = _config(tmp_path)
    with config:
        assert not config.input.closed
        assert not config.output.closed
    assert config.input.closed
    assert config.output.closed


def test_close_leaves_standard_streams_open() -> None:
    config = RunConfiguration(
        source=Stage.SOURCE,
        target=Stage.EXECUTED_OUTPUT,
        input=NamedReader.stdin(),
        output=NamedWriter.stdout(),
    )
    config.close()
    assert not config.input.closed
    assert not config.output.closed
