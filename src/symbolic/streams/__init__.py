# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Named input and output stream handles."""

from symbolic.streams.named import STANDARD_STREAM_NAME, NamedReader, NamedWriter

__all__ = [
    "STANDARD_STREAM_NAME",
    "NamedReader",
    "NamedWriter",
]
