# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy shared by the Symbolic front-end."""

from __future__ import annotations

import enum
import io

# ###############
# Public Interface
# ###############


class ErrorKind(enum.Enum):
    """All failure kinds the front-end can report."""

    # Argument parsing
    TOO_MANY_FILES = "too many file arguments"
    INVALID_OPTION = "invalid option"

    # File system
    NOT_FOUND = "not found"
    PERMISSION_DENIED = "permission denied"
    INTERRUPTED = "interrupted"
    UNSUPPORTED = "unsupported operation"
    UNEXPECTED_EOF = "unexpected end of input"
    UNKNOWN = "unknown"


_FILE_SYSTEM_KINDS = frozenset(
    {
        ErrorKind.NOT_FOUND,
        ErrorKind.PERMISSION_DENIED,
        ErrorKind.INTERRUPTED,
        ErrorKind.UNSUPPORTED,
        ErrorKind.UNEXPECTED_EOF,
        ErrorKind.UNKNOWN,
    }
)


class SymbolicError(Exception):
    """Raised when the run configuration cannot be resolved.

    Attributes:
        kind: The structured failure kind.
        description: Optional free-text detail; callers format the final message.
    """

    def __init__(self, kind: ErrorKind, description: str | None = None) -> None:
        super().__init__(description or kind.value)
        self.kind = kind
        self.description = description

    @property
    def is_file_system_error(self) -> bool:
        """Return True if the failure originated from opening a file."""
        return self.kind in _FILE_SYSTEM_KINDS

    @classmethod
    def from_os_error(cls, exc: BaseException, path: str) -> SymbolicError:
        """Build an error for a failed open of *path* from the platform exception."""
        kind = _kind_for(exc)
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc) or kind.value
        return cls(kind, f"{path}: {reason}")


# ################
# Implementation
# ################

# Order matters: io.UnsupportedOperation is also an OSError subclass.
_OS_ERROR_KINDS: list[tuple[type[BaseException], ErrorKind]] = [
    (io.UnsupportedOperation, ErrorKind.UNSUPPORTED),
    (FileNotFoundError, ErrorKind.NOT_FOUND),
    (PermissionError, ErrorKind.PERMISSION_DENIED),
    (InterruptedError, ErrorKind.INTERRUPTED),
    (EOFError, ErrorKind.UNEXPECTED_EOF),
]


def _kind_for(exc: BaseException) -> ErrorKind:
    for exc_type, kind in _OS_ERROR_KINDS:
        if isinstance(exc, exc_type):
            return kind
    return ErrorKind.UNKNOWN
