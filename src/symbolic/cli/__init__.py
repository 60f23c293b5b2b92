# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for Symbolic."""
