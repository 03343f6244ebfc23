# -*- coding: utf-8 -*-
"""Physics world built from placements, using pymunk."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

import pymunk

from .constants import BALL_ELASTICITY, BALL_STEP_FRACTION, PHYSICS_DT, WALL_DENSITY, Kind
from .geometry import Placement

log = logging.getLogger(__name__)


def clamp_speed(vx: float, vy: float, limit: float) -> tuple[float, float]:
    """Scale ``(vx, vy)`` down to ``limit`` if it is faster, keeping its heading."""
    speed = math.hypot(vx, vy)
    if speed > limit > 0:
        return vx * limit / speed, vy * limit / speed
    return vx, vy


@dataclass
class WorldBody:
    kind: Kind
    body: pymunk.Body
    shape: pymunk.Shape


@dataclass(frozen=True)
class BodyView:
    """Axis-aligned snapshot of one body, y growing downwards."""

    kind: Kind
    left: float
    top: float
    right: float
    bottom: float


class World:
    """Top-down space: zero gravity until the walls are released."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.space = pymunk.Space()
        self.space.gravity = (0, 0)
        self.bodies: list[WorldBody] = []
        self.ball: Optional[WorldBody] = None
        self.goal: Optional[WorldBody] = None
        # Set from the ball's radius; keeps a sub-step shorter than the radius
        # so the ball cannot skip over a closed wall.
        self.max_ball_speed = 0.0

    def _limit_ball_velocity(self, body: pymunk.Body, gravity, damping: float, dt: float) -> None:
        pymunk.Body.update_velocity(body, gravity, damping, dt)
        body.velocity = clamp_speed(body.velocity[0], body.velocity[1], self.max_ball_speed)

    def add(self, placement: Placement) -> WorldBody:
        if placement.kind == "ball-start":
            body = pymunk.Body()
            body.position = (placement.center_x, placement.center_y)
            shape: pymunk.Shape = pymunk.Circle(body, placement.radius)
            shape.mass = 1.0
            shape.friction = 0.0
            self.max_ball_speed = placement.radius * BALL_STEP_FRACTION / PHYSICS_DT
            body.velocity_func = self._limit_ball_velocity
        else:
            body = pymunk.Body(body_type=pymunk.Body.STATIC)
            body.position = (placement.center_x, placement.center_y)
            shape = pymunk.Poly.create_box(body, (placement.width, placement.height))
            # Mass is only used once a wall is released and turns dynamic.
            shape.density = WALL_DENSITY
            shape.friction = 0.5
            if placement.kind == "goal":
                shape.sensor = True
        shape.elasticity = BALL_ELASTICITY
        self.space.add(body, shape)

        wb = WorldBody(placement.kind, body, shape)
        self.bodies.append(wb)
        if placement.kind == "ball-start":
            self.ball = wb
        elif placement.kind == "goal":
            self.goal = wb
        return wb

    def add_all(self, placements: Iterable[Placement]) -> None:
        for p in placements:
            self.add(p)
        log.debug("world has %d bodies", len(self.bodies))

    @property
    def gravity(self) -> tuple[float, float]:
        g = self.space.gravity
        return g[0], g[1]

    @gravity.setter
    def gravity(self, value: tuple[float, float]) -> None:
        self.space.gravity = value

    def step(self, dt: float) -> None:
        """Advance by ``dt`` seconds in fixed sub-steps."""
        remaining = dt
        while remaining > 1e-9:
            h = min(PHYSICS_DT, remaining)
            self.space.step(h)
            remaining -= h

    def ball_velocity(self) -> tuple[float, float]:
        if self.ball is None:
            return 0.0, 0.0
        v = self.ball.body.velocity
        return v[0], v[1]

    def set_ball_velocity(self, vx: float, vy: float) -> None:
        if self.ball is not None:
            self.ball.body.velocity = clamp_speed(vx, vy, self.max_ball_speed)

    def ball_position(self) -> tuple[float, float]:
        if self.ball is None:
            return 0.0, 0.0
        p = self.ball.body.position
        return p[0], p[1]

    def touching(self, a: WorldBody, b: WorldBody) -> bool:
        """True when the shapes of ``a`` and ``b`` overlap (sensors included)."""
        return any(info.shape is b.shape for info in self.space.shape_query(a.shape))

    def ball_touches_goal(self) -> bool:
        if self.ball is None or self.goal is None:
            return False
        return self.touching(self.ball, self.goal)

    def release_walls(self) -> int:
        """Turn every maze wall dynamic so it falls. Returns how many were released."""
        n = 0
        for wb in self.bodies:
            if wb.kind == "wall" and wb.body.body_type == pymunk.Body.STATIC:
                wb.body.body_type = pymunk.Body.DYNAMIC
                n += 1
        return n

    def snapshot(self) -> list[BodyView]:
        views = []
        for wb in self.bodies:
            bb = wb.shape.cache_bb()
            views.append(BodyView(wb.kind, bb.left, bb.bottom, bb.right, bb.top))
        return views
