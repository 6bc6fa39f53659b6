#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract base class for pylamda readers

Every concrete reader inherits from :class:`BaseReader` and implements
:meth:`~BaseReader.parse`, which turns already-loaded text into a typed
model from :mod:`pylamda.models`.  Loading the text from disk is shared
here so that parsing itself never touches the filesystem.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pylamda.exceptions import FileFormatError
from pylamda.models.records import LAMDADocument

logger = logging.getLogger(__name__)


class BaseReader(ABC):
    """Abstract base for LAMDA-format readers

    Subclasses must override :meth:`parse`.  :meth:`read` loads a file as
    UTF-8 text and delegates to it.

    The *validate* keyword argument controls whether the opt-in
    consistency checks of :mod:`pylamda.utils.validation` run after
    parsing.  It defaults to ``False``: parsing alone only enforces the
    line grammar.

    Notes
    -----
    The dependency direction is::

        utils ← models ← readers
    """

    encoding: str = "utf-8"
    """Text encoding used by :meth:`read`."""

    @abstractmethod
    def parse(self, text: str, *, validate: bool = False) -> LAMDADocument:
        """Parse a complete document held in memory

        Parameters
        ----------
        text : str
            Full document text.
        validate : bool, optional
            If ``True``, run the cross-section consistency checks after a
            successful parse.  Default ``False``.

        Returns
        -------
        LAMDADocument
            Fully populated document.

        Raises
        ------
        ParseError
            At the first structural problem in *text*.
        ValidationError
            If *validate* is ``True`` and a consistency check fails.
        """
        ...

    def read(self, path: Path | str, *, validate: bool = False) -> LAMDADocument:
        """Load a file and parse it

        Parameters
        ----------
        path : Path | str
            Filesystem path to the LAMDA data file.
        validate : bool, optional
            Forwarded to :meth:`parse`.

        Returns
        -------
        LAMDADocument
            Fully populated document.

        Raises
        ------
        FileFormatError
            If the file does not exist or is not valid text in
            :attr:`encoding`.
        ParseError
            If the file content is malformed.
        ValidationError
            If *validate* is ``True`` and a consistency check fails.
        """
        filepath = Path(path)
        logger.debug("Opening LAMDA file: %s", filepath)

        if not filepath.is_file():
            raise FileFormatError(f"LAMDA file not found: {filepath}")

        try:
            text = filepath.read_bytes().decode(self.encoding)
        except UnicodeDecodeError as exc:
            raise FileFormatError(
                f"Cannot decode {filepath} as {self.encoding}: {exc}"
            ) from exc

        return self.parse(text, validate=validate)
