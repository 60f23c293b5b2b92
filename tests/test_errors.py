# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the error taxonomy."""

import io

import pytest

from symbolic.errors import ErrorKind, SymbolicError


@pytest.mark.parametrize(
    ("exc", "kind"),
    [
        (FileNotFoundError(2, "No such file or directory"), ErrorKind.NOT_FOUND),
        (PermissionError(13, "Permission denied"), ErrorKind.PERMISSION_DENIED),
        (InterruptedError(4, "Interrupted system call"), ErrorKind.INTERRUPTED),
        (io.UnsupportedOperation("not readable"), ErrorKind.UNSUPPORTED),
        (EOFError("truncated"), ErrorKind.UNEXPECTED_EOF),
        (IsADirectoryError(21, "Is a directory"), ErrorKind.UNKNOWN),
        (OSError("something odd"), ErrorKind.UNKNOWN),
    ],
)
def test_from_os_error_kinds(exc: BaseException, kind: ErrorKind) -> None:
    error = SymbolicError.from_os_error(exc, "prog.sym")
    assert error.kind is kind
    assert error.is_file_system_error
    assert str(error).startswith("prog.sym: ")


def test_from_os_error_uses_strerror() -> None:
    error = SymbolicError.from_os_error(FileNotFoundError(2, "No such file or directory"), "a.sym")
    assert str(error) == "a.sym: No such file or directory"


def test_default_message_is_kind() -> None:
    error = SymbolicError(ErrorKind.TOO_MANY_FILES)
    assert str(error) == "too many file arguments"
    assert error.description is None


def test_description_overrides_message() -> None:
    error = SymbolicError(ErrorKind.INVALID_OPTION, "missing value for --to")
    assert str(error) == "missing value for --to"
    assert error.description == "missing value for --to"


@pytest.mark.parametrize("kind", [ErrorKind.TOO_MANY_FILES, ErrorKind.INVALID_OPTION])
def test_argument_errors_are_not_file_system_errors(kind: ErrorKind) -> None:
    assert not SymbolicError(kind).is_file_system_error
