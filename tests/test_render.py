from ballmaze.constants import ASCII_GLYPHS
from ballmaze.models import Settings
from ballmaze.render import canvas_lines, rasterize
from ballmaze.session import Session
from ballmaze.style import Style
from ballmaze.world import BodyView


def dummy_style(*, unicode_ok: bool = False) -> Style:
    # Keep colors disabled so tests don't require curses initialization.
    return Style(
        unicode_ok=unicode_ok,
        colors_ok=False,
        color_mode="none",
        hud_pair=0,
        wall_pair=0,
        boundary_pair=0,
        goal_pair=0,
        ball_pair=0,
        hint_pair=0,
    )


def test_rasterize_scales_boxes() -> None:
    views = [BodyView("wall", 0, 45, 100, 55)]
    canvas = rasterize(views, 100, 100, 10, 10)

    lines = canvas_lines(canvas, ASCII_GLYPHS)
    assert lines[4] == "#" * 10
    assert lines[5] == "#" * 10
    assert lines[3] == " " * 10


def test_thin_wall_still_covers_a_column() -> None:
    canvas = rasterize([BodyView("wall", 50, 0, 51, 100)], 100, 100, 10, 5)
    assert all(row[5] == "wall" for row in canvas)
    assert all(row[4] is None and row[6] is None for row in canvas)


def test_bodies_outside_world_are_skipped() -> None:
    canvas = rasterize([BodyView("wall", -50, 0, -10, 10)], 100, 100, 10, 10)
    assert all(k is None for row in canvas for k in row)


def test_ball_drawn_over_goal_over_wall() -> None:
    views = [
        BodyView("ball-start", 40, 40, 60, 60),
        BodyView("goal", 30, 30, 70, 70),
        BodyView("wall", 0, 0, 100, 100),
    ]
    canvas = rasterize(views, 100, 100, 10, 10)
    assert canvas[5][5] == "ball-start"
    assert canvas[3][3] == "goal"
    assert canvas[0][0] == "wall"
    assert sum(k == "ball-start" for row in canvas for k in row) == 1


def test_hint_points_fill_empty_space() -> None:
    canvas = rasterize([], 100, 100, 10, 10, hint_points=[(5, 5), (95, 95)])
    assert canvas[0][0] == "hint"
    assert canvas[9][9] == "hint"


def test_session_snapshot_renders_ball_and_goal() -> None:
    session = Session(Settings(rows=4, columns=6, seed=2, world_width=600.0, world_height=400.0))
    world = session.world
    lines = canvas_lines(rasterize(world.snapshot(), world.width, world.height, 60, 20), ASCII_GLYPHS)

    text = "\n".join(lines)
    assert text.count("O") == 1
    assert "X" in text
    # frame is drawn on every edge
    assert set(lines[0]) == {"#"}
    assert all(line[0] == "#" for line in lines)


def test_style_glyphs_without_colors() -> None:
    ascii_style = dummy_style()
    assert ascii_style.glyph("wall") == "#"
    assert ascii_style.glyph(None) == " "
    assert dummy_style(unicode_ok=True).glyph("ball-start") == "●"
    assert isinstance(ascii_style.kind_attr("goal"), int)
    assert ascii_style.kind_attr("wall") == ascii_style.kind_attr("boundary")
