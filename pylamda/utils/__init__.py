#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for parsing, diagnostics, and validation

This sub-package holds the line cursor, the single-line field and record
parsers, the caret diagnostic renderer, and the opt-in consistency checks
used by the reader layer.
"""

from __future__ import annotations
