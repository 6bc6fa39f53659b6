#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Readers for LAMDA data files

* :class:`~pylamda.readers.lamda.LAMDAReader` - file and text front end
* :func:`~pylamda.readers.lamda.parse_lamda` - parse text held in memory

All readers share the :class:`~pylamda.readers.base.BaseReader` interface.
"""

from __future__ import annotations

from pylamda.readers.lamda import LAMDAReader, parse_lamda

__all__ = ["LAMDAReader", "parse_lamda"]
