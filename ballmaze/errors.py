# -*- coding: utf-8 -*-
"""Errors raised by maze construction and generation."""
from __future__ import annotations


class MazeError(Exception):
    """Base class for maze errors."""


class InvalidDimensions(MazeError, ValueError):
    def __init__(self, rows: object, columns: object) -> None:
        super().__init__(f"maze needs at least 1x1 cells, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns


class OutOfBounds(MazeError, IndexError):
    """A cell or passage outside the grid. Indicates a bug in the caller."""


class RandomSourceExhausted(MazeError):
    """A bounded random source ran out of values."""
