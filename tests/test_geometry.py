import pytest

from ballmaze.geometry import (
    Placement,
    boundary_placements,
    cell_center,
    cell_size,
    map_geometry,
    world_to_cell,
)
from ballmaze.grid import Grid
from ballmaze.maze import generate_maze
from ballmaze.rng import ScriptedRandom


def _closed_count(grid: Grid) -> int:
    closed = sum(not v for row in grid.horizontal_walls for v in row)
    return closed + sum(not v for row in grid.vertical_walls for v in row)


def test_closed_horizontal_wall_position() -> None:
    grid = Grid(2, 2)
    grid.open_passage((0, 0), (1, 0), "down")
    grid.open_passage((0, 0), (0, 1), "right")
    grid.open_passage((1, 0), (1, 1), "right")

    geo = map_geometry(grid, 100, 50)

    assert geo.walls == (Placement(150.0, 50.0, 100.0, 5.0, "wall"),)


def test_closed_vertical_wall_position() -> None:
    geo = map_geometry(Grid(1, 2), 100, 50, wall_thickness=3)
    assert geo.walls == (Placement(100.0, 25.0, 3.0, 50.0, "wall"),)


def test_open_passages_emit_nothing() -> None:
    grid = Grid(1, 2)
    grid.open_passage((0, 0), (0, 1), "right")
    assert map_geometry(grid, 10, 10).walls == ()


def test_fresh_grid_emits_every_interior_wall_horizontal_first() -> None:
    grid = Grid(2, 3)
    geo = map_geometry(grid, 30, 20)

    assert len(geo.walls) == 1 * 3 + 2 * 2
    horizontal = geo.walls[:3]
    vertical = geo.walls[3:]
    assert [(w.center_x, w.center_y) for w in horizontal] == [(15, 20), (45, 20), (75, 20)]
    assert [(w.center_x, w.center_y) for w in vertical] == [(30, 10), (60, 10), (30, 30), (60, 30)]
    assert all(w.width == 30 and w.height == 5 for w in horizontal)
    assert all(w.width == 5 and w.height == 20 for w in vertical)


def test_two_by_two_scripted_maze_leaves_one_wall() -> None:
    grid = generate_maze(2, 2, rng=ScriptedRandom([0, 0] + [3, 2, 1] * 4))
    geo = map_geometry(grid, 100, 50)

    assert len(geo.walls) == 2 * 2 - 3
    assert geo.walls[0] == Placement(50.0, 50.0, 100.0, 5.0, "wall")


@pytest.mark.parametrize("seed", range(5))
def test_wall_count_matches_closed_entries(seed: int) -> None:
    grid = generate_maze(6, 9, seed=seed)
    geo = map_geometry(grid, 12, 8)
    assert len(geo.walls) == _closed_count(grid)
    # interior edges minus spanning tree edges
    assert len(geo.walls) == (5 * 9 + 6 * 8) - (6 * 9 - 1)


def test_goal_sits_in_far_corner_at_seventy_percent() -> None:
    cw, ch = 64.0, 37.5
    grid = generate_maze(10, 15, seed=4)
    geo = map_geometry(grid, cw, ch)

    total_w, total_h = 15 * cw, 10 * ch
    assert geo.goal.kind == "goal"
    assert geo.goal.center_x == pytest.approx(total_w - cw / 2)
    assert geo.goal.center_y == pytest.approx(total_h - ch / 2)
    assert geo.goal.width == pytest.approx(0.7 * cw)
    assert geo.goal.height == pytest.approx(0.7 * ch)


def test_ball_starts_in_first_cell_with_quarter_cell_radius() -> None:
    geo = map_geometry(Grid(3, 3), 100, 50)
    assert geo.ball.kind == "ball-start"
    assert (geo.ball.center_x, geo.ball.center_y) == (50.0, 25.0)
    assert geo.ball.radius == pytest.approx(12.5)
    assert geo.ball.width == geo.ball.height == pytest.approx(25.0)


def test_placements_order_is_walls_goal_ball() -> None:
    geo = map_geometry(Grid(2, 2), 10, 10)
    kinds = [p.kind for p in geo.placements]
    assert kinds == ["wall"] * 4 + ["goal", "ball-start"]


def test_mapper_is_pure() -> None:
    grid = generate_maze(7, 5, seed=11)
    before = (repr(grid.horizontal_walls), repr(grid.vertical_walls))

    first = map_geometry(grid, 20, 30).placements
    second = map_geometry(grid, 20, 30).placements

    assert first == second
    assert (repr(grid.horizontal_walls), repr(grid.vertical_walls)) == before


@pytest.mark.parametrize("cw, ch, t", [(0, 10, 5), (10, -1, 5), (10, 10, 0)])
def test_mapper_rejects_non_positive_sizes(cw, ch, t) -> None:
    with pytest.raises(ValueError):
        map_geometry(Grid(2, 2), cw, ch, t)


def test_one_by_one_maze_has_goal_on_ball() -> None:
    geo = map_geometry(generate_maze(1, 1, seed=0), 40, 40)
    assert geo.walls == ()
    assert (geo.goal.center_x, geo.goal.center_y) == (geo.ball.center_x, geo.ball.center_y)


def test_boundary_frames_the_world() -> None:
    top, bottom, left, right = boundary_placements(300, 200)
    assert top == Placement(150, 0, 300, 2, "boundary")
    assert bottom == Placement(150, 200, 300, 2, "boundary")
    assert left == Placement(0, 100, 2, 200, "boundary")
    assert right == Placement(300, 100, 2, 200, "boundary")


def test_cell_helpers() -> None:
    assert cell_size(960, 640, 10, 15) == (64.0, 64.0)
    assert cell_center((2, 1), 10, 20) == (15.0, 50.0)

    grid = Grid(3, 4)
    assert world_to_cell(grid, 15, 50, 10, 20) == (2, 1)
    # clamped to the grid
    assert world_to_cell(grid, -5, 999, 10, 20) == (2, 0)


def test_placement_edges() -> None:
    p = Placement(50, 20, 10, 4, "wall")
    assert p.left == 45
    assert p.top == 18
