# -*- coding: utf-8 -*-
"""Project-wide constants and type aliases for the ball maze."""
from __future__ import annotations

from typing import Literal

# ----- Maze -----
DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 15
MIN_CELLS = 2
MAX_CELLS = 60

# ----- World (pixel-equivalent units) -----
WORLD_WIDTH = 960.0
WORLD_HEIGHT = 640.0

WALL_THICKNESS = 5.0
BOUNDARY_THICKNESS = 2.0
GOAL_SCALE = 0.7          # goal is 70% of a cell in each axis
BALL_RADIUS_DIVISOR = 4.0  # radius = min(cell_w, cell_h) / 4

# ----- Physics -----
PHYSICS_DT = 1.0 / 120.0
MAX_FRAME_DT = 0.1
IMPULSE = 300.0           # velocity delta per key press, units/s
WIN_GRAVITY = 900.0       # units/s^2, applied on win
BALL_ELASTICITY = 0.5
WALL_DENSITY = 1.0
BALL_STEP_FRACTION = 0.5   # max share of the ball radius travelled per sub-step

HUD_SECONDS = 5.0

# ----- Glyphs -----
ASCII_GLYPHS = {"wall": "#", "boundary": "#", "goal": "X", "ball-start": "O", "hint": "."}
UNICODE_GLYPHS = {"wall": "█", "boundary": "█", "goal": "▒", "ball-start": "●", "hint": "·"}

Kind = Literal["wall", "goal", "ball-start", "boundary"]
Direction = Literal["up", "right", "down", "left"]
Cell = tuple[int, int]

DIRECTIONS: tuple[Direction, ...] = ("up", "right", "down", "left")
DIRECTION_STEPS: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "right": (0, 1),
    "down": (1, 0),
    "left": (0, -1),
}

# Names as reported by curses.keyname(); single letters match case-insensitively.
DEFAULT_KEY_MAP: dict[str, tuple[str, ...]] = {
    "up": ("w", "KEY_UP"),
    "right": ("d", "KEY_RIGHT"),
    "down": ("s", "KEY_DOWN"),
    "left": ("a", "KEY_LEFT"),
}
