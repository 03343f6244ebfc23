# -*- coding: utf-8 -*-
"""Grid model: visited flags and the two passage matrices."""
from __future__ import annotations

from .constants import DIRECTION_STEPS, Cell, Direction
from .errors import InvalidDimensions, OutOfBounds


class Grid:
    """A ``rows x columns`` maze grid.

    ``horizontal_walls[r][c]`` is True when the passage between ``(r, c)`` and
    ``(r + 1, c)`` is open; ``vertical_walls[r][c]`` is True when the passage
    between ``(r, c)`` and ``(r, c + 1)`` is open. Everything starts closed
    and unvisited. The only mutators are :meth:`mark_visited` and
    :meth:`open_passage`.
    """

    def __init__(self, rows: int, columns: int) -> None:
        for n in (rows, columns):
            if isinstance(n, bool) or not isinstance(n, int) or n < 1:
                raise InvalidDimensions(rows, columns)
        self.rows = rows
        self.columns = columns
        self.visited = [[False] * columns for _ in range(rows)]
        self.horizontal_walls = [[False] * columns for _ in range(rows - 1)]
        self.vertical_walls = [[False] * (columns - 1) for _ in range(rows)]

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, columns={self.columns})"

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def _check(self, row: int, column: int) -> None:
        if not self.in_bounds(row, column):
            raise OutOfBounds(f"cell ({row}, {column}) outside {self.rows}x{self.columns} grid")

    def is_visited(self, row: int, column: int) -> bool:
        self._check(row, column)
        return self.visited[row][column]

    def mark_visited(self, row: int, column: int) -> None:
        self._check(row, column)
        self.visited[row][column] = True

    def open_passage(self, from_cell: Cell, to_cell: Cell, direction: Direction) -> None:
        fr, fc = from_cell
        tr, tc = to_cell
        self._check(fr, fc)
        self._check(tr, tc)
        step = DIRECTION_STEPS.get(direction)
        if step is None or (fr + step[0], fc + step[1]) != (tr, tc):
            raise OutOfBounds(f"({tr}, {tc}) is not {direction} of ({fr}, {fc})")

        if direction in ("up", "down"):
            self.horizontal_walls[min(fr, tr)][fc] = True
        else:
            self.vertical_walls[fr][min(fc, tc)] = True

    def passage_open(self, cell: Cell, direction: Direction) -> bool:
        """Whether the side of ``cell`` facing ``direction`` is an open passage.

        Sides on the outer border are never open.
        """
        row, column = cell
        self._check(row, column)
        dr, dc = DIRECTION_STEPS[direction]
        nr, nc = row + dr, column + dc
        if not self.in_bounds(nr, nc):
            return False
        if dr:
            return self.horizontal_walls[min(row, nr)][column]
        return self.vertical_walls[row][min(column, nc)]

    def to_text(self) -> str:
        """ASCII dump of the maze, one ``+--+`` row per grid line."""
        lines = ["+" + "--+" * self.columns]
        for r in range(self.rows):
            body = "|"
            for c in range(self.columns):
                body += "  "
                body += " " if c < self.columns - 1 and self.vertical_walls[r][c] else "|"
            lines.append(body)
            floor = "+"
            for c in range(self.columns):
                floor += "  +" if r < self.rows - 1 and self.horizontal_walls[r][c] else "--+"
            lines.append(floor)
        return "\n".join(lines)
