# Copyright 2026 Symbolic Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for Symbolic documentation."""

import sys
from pathlib import Path

# Document the checked-out sources, not an installed copy.
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

project = "Symbolic"
author = "Symbolic Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]
autodoc_member_order = "bysource"

root_doc = "index"
html_theme = "alabaster"
