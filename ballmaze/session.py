# -*- coding: utf-8 -*-
"""Session controller: maze + world + input + win state for one player."""
from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Optional

from .constants import DIRECTION_STEPS, MAX_FRAME_DT, WIN_GRAVITY, Cell, Direction
from .geometry import MazeGeometry, boundary_placements, cell_size, map_geometry, world_to_cell
from .grid import Grid
from .maze import find_path, generate_maze
from .models import Settings
from .rng import make_rng
from .world import World

log = logging.getLogger(__name__)

WinHandler = Callable[["Session"], None]


def direction_for_key(key_map: Mapping[str, Sequence[str]], key_name: str) -> Optional[Direction]:
    """Look up which direction a key name is bound to.

    Single letters compare case-insensitively so ``W`` and ``w`` both work.
    """
    if len(key_name) == 1:
        key_name = key_name.lower()
    for direction, keys in key_map.items():
        for k in keys:
            if (k.lower() if len(k) == 1 else k) == key_name:
                return direction  # type: ignore[return-value]
    return None


@dataclass
class Level:
    """All state tied to a single generated maze."""

    grid: Grid
    geometry: MazeGeometry
    world: World
    start_time: float
    touching_goal: bool = False


class Session:
    def __init__(self, settings: Settings, rng: Optional[random.Random] = None) -> None:
        self.settings = settings
        self.rng = rng if rng is not None else make_rng(settings.seed)
        self.won = False
        self._win_handlers: list[WinHandler] = []
        self.level = self.new_level()

    def new_level(self) -> Level:
        """Generate a maze, map it to placements and build its physics world."""
        s = self.settings
        grid = generate_maze(s.rows, s.columns, rng=self.rng)
        cw, ch = cell_size(s.world_width, s.world_height, s.rows, s.columns)
        geometry = map_geometry(grid, cw, ch, s.wall_thickness)

        world = World(s.world_width, s.world_height)
        world.add_all(boundary_placements(s.world_width, s.world_height))
        world.add_all(geometry.placements)
        log.debug("level %dx%d built with %d walls", s.rows, s.columns, len(geometry.walls))
        return Level(grid=grid, geometry=geometry, world=world, start_time=time.monotonic())

    @property
    def grid(self) -> Grid:
        return self.level.grid

    @property
    def world(self) -> World:
        return self.level.world

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.level.start_time

    def add_win_handler(self, handler: WinHandler) -> None:
        """Register ``handler`` to run when the ball reaches the goal.

        A handler that is already registered is not added again.
        """
        if handler not in self._win_handlers:
            self._win_handlers.append(handler)

    def remove_win_handler(self, handler: WinHandler) -> None:
        if handler in self._win_handlers:
            self._win_handlers.remove(handler)

    def push(self, direction: Direction) -> bool:
        """Add a fixed velocity delta to the ball. Ignored once the maze is won."""
        if self.won:
            return False
        dr, dc = DIRECTION_STEPS[direction]
        vx, vy = self.world.ball_velocity()
        self.world.set_ball_velocity(vx + dc * self.settings.impulse, vy + dr * self.settings.impulse)
        return True

    def handle_key(self, key_name: str) -> bool:
        direction = direction_for_key(self.settings.key_map, key_name)
        if direction is None:
            return False
        return self.push(direction)

    def step(self, dt: float) -> bool:
        """Advance physics, then check for the ball starting to touch the goal.

        Returns True on the step that triggers the win.
        """
        self.world.step(min(dt, MAX_FRAME_DT))
        touching = self.world.ball_touches_goal()
        started = touching and not self.level.touching_goal
        self.level.touching_goal = touching
        if started and not self.won:
            self._win()
            return True
        return False

    def _win(self) -> None:
        self.won = True
        released = self.world.release_walls()
        self.world.gravity = (0.0, WIN_GRAVITY)
        log.debug("goal reached after %.1fs, %d walls released", self.elapsed, released)
        for handler in list(self._win_handlers):
            handler(self)

    def reset(self) -> None:
        """Start over with a freshly generated maze. Win handlers stay registered."""
        self.won = False
        self.level = self.new_level()

    def ball_cell(self) -> Cell:
        g = self.level.geometry
        x, y = self.world.ball_position()
        return world_to_cell(self.grid, x, y, g.cell_width, g.cell_height)

    def goal_cell(self) -> Cell:
        return self.grid.rows - 1, self.grid.columns - 1

    def hint_path(self) -> list[Cell]:
        return find_path(self.grid, self.ball_cell(), self.goal_cell())
