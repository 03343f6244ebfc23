import math

import pytest

from ballmaze.constants import PHYSICS_DT
from ballmaze.geometry import Placement
from ballmaze.world import World, clamp_speed


def _world_with_ball_and_goal(ball_x: float) -> World:
    world = World(400.0, 100.0)
    world.add(Placement(300.0, 50.0, 40.0, 40.0, "goal"))
    world.add(Placement(ball_x, 50.0, 20.0, 20.0, "ball-start"))
    return world


def test_apart_shapes_are_not_touching() -> None:
    world = _world_with_ball_and_goal(50.0)
    assert not world.ball_touches_goal()
    world.step(1 / 60)
    assert not world.ball_touches_goal()


def test_overlapping_sensor_counts_as_touching() -> None:
    world = _world_with_ball_and_goal(50.0)
    world.ball.body.position = (290.0, 50.0)
    assert world.ball_touches_goal()


def test_touching_does_not_see_unrelated_wall() -> None:
    world = _world_with_ball_and_goal(50.0)
    wall = world.add(Placement(100.0, 50.0, 5.0, 100.0, "wall"))
    assert not world.touching(world.ball, wall)
    world.ball.body.position = (95.0, 50.0)
    assert world.touching(world.ball, wall)
    assert not world.ball_touches_goal()


def test_clamp_speed_keeps_heading() -> None:
    assert clamp_speed(3.0, 4.0, 10.0) == (3.0, 4.0)
    vx, vy = clamp_speed(30.0, 40.0, 10.0)
    assert (vx, vy) == pytest.approx((6.0, 8.0))


def test_ball_speed_stays_below_radius_per_substep() -> None:
    world = _world_with_ball_and_goal(50.0)
    radius = 10.0
    assert world.max_ball_speed * PHYSICS_DT < radius

    world.set_ball_velocity(10_000.0, 0.0)
    assert math.hypot(*world.ball_velocity()) == pytest.approx(world.max_ball_speed)

    world.ball.body.velocity = (0.0, 10_000.0)
    world.step(PHYSICS_DT)
    assert math.hypot(*world.ball_velocity()) <= world.max_ball_speed + 1e-6
