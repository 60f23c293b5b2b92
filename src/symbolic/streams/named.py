# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Byte streams annotated with a display name.

Every input and output of a run is wrapped in a named handle so that
diagnostics can refer to it uniformly, whether it is a file on disk or one
of the process' standard streams (which are always named ``-``).

Standard streams are looked up on first use, so a handle for them can be
created even when the process was started with that stream closed.
"""

from __future__ import annotations

import io
import sys
from typing import BinaryIO, TypeVar

from symbolic.errors import SymbolicError

# ###############
# Public Interface
# ###############

STANDARD_STREAM_NAME = "-"

_S = TypeVar("_S", bound="_NamedStream")


class _NamedStream:
    """Shared ownership logic of readable and writable handles."""

    # Name of the ``sys`` attribute backing the standard-stream variant.
    _standard_attr = ""

    def __init__(self, name: str, stream: BinaryIO | None, is_standard: bool) -> None:
        self.name = name
        self.is_standard = is_standard
        self._file = stream

    @property
    def closed(self) -> bool:
        """Return True once a file handle has been released."""
        return self._file is not None and not self.is_standard and self._file.closed

    def close(self) -> None:
        """Release the underlying file. Standard streams stay open."""
        if self._file is not None and not self.is_standard:
            self._file.close()

    @property
    def _stream(self) -> BinaryIO:
        if self._file is not None:
            return self._file
        text_stream = getattr(sys, self._standard_attr)
        if text_stream is None:
            raise io.UnsupportedOperation(f"standard stream sys.{self._standard_attr} is not available")
        return text_stream.buffer

    def __enter__(self: _S) -> _S:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class NamedReader(_NamedStream):
    """A readable byte stream with a display name."""

    _standard_attr = "stdin"

    @classmethod
    def open(cls, path: str) -> NamedReader:
        """Open the file at *path* for reading.

        Raises:
            SymbolicError: With a file-system kind if the file cannot be opened.
        """
        try:
            stream = open(path, "rb")
        except (OSError, EOFError) as exc:
            raise SymbolicError.from_os_error(exc, path) from exc
        return cls(path, stream, is_standard=False)

    @classmethod
    def stdin(cls) -> NamedReader:
        """Handle for the process' standard input; never fails."""
        return cls(STANDARD_STREAM_NAME, None, is_standard=True)

    def read(self, size: int = -1) -> bytes:
        return self._stream.read(size)

    def readinto(self, buffer: bytearray | memoryview) -> int:
        return self._stream.readinto(buffer)

    def read_text(self, encoding: str = "utf-8") -> str:
        """Read the remaining input and decode it."""
        return self.read().decode(encoding)


class NamedWriter(_NamedStream):
    """A writable byte stream with a display name."""

    _standard_attr = "stdout"

    @classmethod
    def create(cls, path: str) -> NamedWriter:
        """Create or truncate the file at *path* for writing.

        Raises:
            SymbolicError: With a file-system kind if the file cannot be created.
        """
        try:
            stream = open(path, "wb")
        except (OSError, EOFError) as exc:
            raise SymbolicError.from_os_error(exc, path) from exc
        return cls(path, stream, is_standard=False)

    @classmethod
    def stdout(cls) -> NamedWriter:
        """Handle for the process' standard output; never fails."""
        return cls(STANDARD_STREAM_NAME, None, is_standard=True)

    def write(self, data: bytes) -> int:
        return self._stream.write(data)

    def flush(self) -> None:
        self._stream.flush()
