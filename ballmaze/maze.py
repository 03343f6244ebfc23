"""Maze generation and grid queries."""

from __future__ import annotations

import logging
from collections import deque
from typing import Optional

from .constants import DIRECTION_STEPS, DIRECTIONS, Cell, Direction
from .grid import Grid
from .rng import RandomSource, make_rng, shuffle

log = logging.getLogger(__name__)


def _candidates(row: int, column: int) -> list[tuple[int, int, Direction]]:
    # up, right, down, left
    return [(row + DIRECTION_STEPS[d][0], column + DIRECTION_STEPS[d][1], d) for d in DIRECTIONS]


def generate_maze(
    rows: int,
    columns: int,
    rng: Optional[RandomSource] = None,
    seed: Optional[int] = None,
    start: Optional[Cell] = None,
) -> Grid:
    """Carve a perfect maze with a randomized depth-first traversal.

    Each stack frame holds a cell and its shuffled, not yet tried neighbours,
    so the visit order is the same as the recursive formulation while the
    depth is bounded only by memory.
    """
    grid = Grid(rows, columns)
    if rng is None:
        rng = make_rng(seed)

    if start is None:
        start = (rng.randrange(rows), rng.randrange(columns))
    sr, sc = start
    grid.mark_visited(sr, sc)
    log.debug("generating %dx%d maze from %s", rows, columns, start)

    stack = [(sr, sc, iter(shuffle(_candidates(sr, sc), rng)))]
    while stack:
        row, column, pending = stack[-1]
        for nr, nc, direction in pending:
            if not grid.in_bounds(nr, nc) or grid.visited[nr][nc]:
                continue
            grid.open_passage((row, column), (nr, nc), direction)
            grid.mark_visited(nr, nc)
            stack.append((nr, nc, iter(shuffle(_candidates(nr, nc), rng))))
            break
        else:
            stack.pop()

    return grid


def neighbors(grid: Grid, cell: Cell) -> list[tuple[Cell, Direction]]:
    row, column = cell
    out = []
    for nr, nc, d in _candidates(row, column):
        if grid.in_bounds(nr, nc):
            out.append(((nr, nc), d))
    return out


def open_neighbors(grid: Grid, cell: Cell) -> list[Cell]:
    return [n for n, d in neighbors(grid, cell) if grid.passage_open(cell, d)]


def count_open_passages(grid: Grid) -> int:
    return sum(map(sum, grid.horizontal_walls)) + sum(map(sum, grid.vertical_walls))


def reachable_cells(grid: Grid, start: Cell = (0, 0)) -> set[Cell]:
    seen = {start}
    q = deque([start])
    while q:
        cell = q.popleft()
        for nxt in open_neighbors(grid, cell):
            if nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen


def is_perfect(grid: Grid) -> bool:
    """True when the open passages form a spanning tree over all cells."""
    total = grid.rows * grid.columns
    if count_open_passages(grid) != total - 1:
        return False
    return len(reachable_cells(grid)) == total


def find_path(grid: Grid, start: Cell, goal: Cell) -> list[Cell]:
    if not (grid.in_bounds(*start) and grid.in_bounds(*goal)):
        return [start]

    q = deque([start])
    prev: dict[Cell, Optional[Cell]] = {start: None}

    while q:
        cell = q.popleft()
        if cell == goal:
            break
        for nxt in open_neighbors(grid, cell):
            if nxt not in prev:
                prev[nxt] = cell
                q.append(nxt)

    if goal not in prev:
        return [start]

    path: list[Cell] = []
    cur: Optional[Cell] = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path
