# -*- coding: utf-8 -*-
"""Turn a finished grid into obstacle placements in world coordinates."""
from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    BALL_RADIUS_DIVISOR,
    BOUNDARY_THICKNESS,
    GOAL_SCALE,
    WALL_THICKNESS,
    Cell,
    Kind,
)
from .grid import Grid
from .util import clamp


@dataclass(frozen=True)
class Placement:
    center_x: float
    center_y: float
    width: float
    height: float
    kind: Kind

    @property
    def radius(self) -> float:
        return min(self.width, self.height) / 2.0

    @property
    def left(self) -> float:
        return self.center_x - self.width / 2.0

    @property
    def top(self) -> float:
        return self.center_y - self.height / 2.0


@dataclass(frozen=True)
class MazeGeometry:
    walls: tuple[Placement, ...]
    goal: Placement
    ball: Placement
    cell_width: float
    cell_height: float

    @property
    def placements(self) -> list[Placement]:
        """Walls, then the goal, then the ball start."""
        return [*self.walls, self.goal, self.ball]


def cell_size(world_width: float, world_height: float, rows: int, columns: int) -> tuple[float, float]:
    return world_width / columns, world_height / rows


def cell_center(cell: Cell, cell_width: float, cell_height: float) -> tuple[float, float]:
    row, column = cell
    return column * cell_width + cell_width / 2.0, row * cell_height + cell_height / 2.0


def world_to_cell(grid: Grid, x: float, y: float, cell_width: float, cell_height: float) -> Cell:
    row = int(clamp(y // cell_height, 0, grid.rows - 1))
    column = int(clamp(x // cell_width, 0, grid.columns - 1))
    return row, column


def map_geometry(
    grid: Grid,
    cell_width: float,
    cell_height: float,
    wall_thickness: float = WALL_THICKNESS,
) -> MazeGeometry:
    """Emit one wall per closed passage plus the goal and ball placements.

    Horizontal walls come first (row-major), then vertical walls. Open
    passages emit nothing.
    """
    if cell_width <= 0 or cell_height <= 0 or wall_thickness <= 0:
        raise ValueError(
            f"cell size and wall thickness must be positive, got "
            f"{cell_width}x{cell_height} / {wall_thickness}"
        )

    walls: list[Placement] = []
    for r, row in enumerate(grid.horizontal_walls):
        for c, is_open in enumerate(row):
            if is_open:
                continue
            walls.append(
                Placement(
                    c * cell_width + cell_width / 2.0,
                    (r + 1) * cell_height,
                    cell_width,
                    wall_thickness,
                    "wall",
                )
            )

    for r, row in enumerate(grid.vertical_walls):
        for c, is_open in enumerate(row):
            if is_open:
                continue
            walls.append(
                Placement(
                    (c + 1) * cell_width,
                    r * cell_height + cell_height / 2.0,
                    wall_thickness,
                    cell_height,
                    "wall",
                )
            )

    gx, gy = cell_center((grid.rows - 1, grid.columns - 1), cell_width, cell_height)
    goal = Placement(gx, gy, cell_width * GOAL_SCALE, cell_height * GOAL_SCALE, "goal")

    bx, by = cell_center((0, 0), cell_width, cell_height)
    diameter = 2.0 * min(cell_width, cell_height) / BALL_RADIUS_DIVISOR
    ball = Placement(bx, by, diameter, diameter, "ball-start")

    return MazeGeometry(tuple(walls), goal, ball, cell_width, cell_height)


def boundary_placements(
    width: float, height: float, thickness: float = BOUNDARY_THICKNESS
) -> list[Placement]:
    """The four frame walls around a ``width x height`` world: top, bottom, left, right."""
    return [
        Placement(width / 2.0, 0.0, width, thickness, "boundary"),
        Placement(width / 2.0, height, width, thickness, "boundary"),
        Placement(0.0, height / 2.0, thickness, height, "boundary"),
        Placement(width, height / 2.0, thickness, height, "boundary"),
    ]
