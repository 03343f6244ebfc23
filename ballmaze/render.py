# -*- coding: utf-8 -*-
"""Top-down rendering of the physics world into terminal characters."""
from __future__ import annotations

import curses
import math
from collections.abc import Iterable, Sequence
from typing import Callable, Optional

from .geometry import cell_center
from .models import Settings
from .session import Session
from .style import Style
from .util import clamp, safe_addstr
from .world import BodyView

# Later kinds overwrite earlier ones.
DRAW_ORDER = {"boundary": 0, "wall": 1, "goal": 2, "ball-start": 3}

Canvas = list[list[Optional[str]]]


def rasterize(
    views: Iterable[BodyView],
    world_width: float,
    world_height: float,
    out_w: int,
    out_h: int,
    hint_points: Sequence[tuple[float, float]] = (),
) -> Canvas:
    """Scale body boxes onto an ``out_w x out_h`` grid of kinds (None = empty).

    Every body covers at least one character, so thin walls never vanish.
    Bodies entirely outside the world are skipped.
    """
    canvas: Canvas = [[None] * out_w for _ in range(out_h)]
    if out_w <= 0 or out_h <= 0:
        return canvas
    sx = out_w / world_width
    sy = out_h / world_height

    for x, y in hint_points:
        ox = int(clamp(x * sx, 0, out_w - 1))
        oy = int(clamp(y * sy, 0, out_h - 1))
        canvas[oy][ox] = "hint"

    for v in sorted(views, key=lambda v: DRAW_ORDER.get(v.kind, 0)):
        if v.right < 0 or v.bottom < 0 or v.left > world_width or v.top > world_height:
            continue
        x0 = int(clamp(math.floor(v.left * sx), 0, out_w - 1))
        x1 = int(clamp(math.floor(v.right * sx), 0, out_w - 1))
        y0 = int(clamp(math.floor(v.top * sy), 0, out_h - 1))
        y1 = int(clamp(math.floor(v.bottom * sy), 0, out_h - 1))
        if v.kind == "ball-start":
            # Ball is one glyph at its centre.
            x0 = x1 = int(clamp(math.floor((v.left + v.right) / 2 * sx), 0, out_w - 1))
            y0 = y1 = int(clamp(math.floor((v.top + v.bottom) / 2 * sy), 0, out_h - 1))
        for oy in range(y0, y1 + 1):
            row = canvas[oy]
            for ox in range(x0, x1 + 1):
                row[ox] = v.kind
    return canvas


def canvas_lines(canvas: Canvas, glyphs: dict[str, str]) -> list[str]:
    return ["".join(glyphs.get(k, " ") if k else " " for k in row) for row in canvas]


def _hint_points(session: Session) -> list[tuple[float, float]]:
    g = session.level.geometry
    return [cell_center(c, g.cell_width, g.cell_height) for c in session.hint_path()]


def draw_hud(
    stdscr,
    tr: Callable[[str], str],
    session: Session,
    settings: Settings,
    style: Style,
) -> None:
    """Draw 2-line HUD at the bottom of the screen."""
    h, w = stdscr.getmaxyx()
    vx, vy = session.world.ball_velocity()

    tags: list[str] = []
    tags.append(tr("tag_utf8") if style.unicode_ok else tr("tag_ascii"))
    if style.colors_ok and style.color_mode == "256":
        tags.append(tr("cap_color_256"))
    elif style.colors_ok:
        tags.append(tr("tag_color"))
    else:
        tags.append(tr("tag_mono"))
    if settings.hint:
        tags.append(tr("tag_hint"))
    if settings.seed is not None:
        tags.append(tr("tag_seed", seed=settings.seed))

    line1 = tr("hud_line1")
    line2 = tr(
        "hud_line2",
        rows=session.grid.rows,
        cols=session.grid.columns,
        time=session.elapsed,
        speed=math.hypot(vx, vy),
        tags="+".join(tags),
    )

    attr = curses.A_BOLD
    if style.colors_ok and style.hud_pair:
        attr |= curses.color_pair(style.hud_pair)
    safe_addstr(stdscr, h - 2, 0, line1[: max(0, w - 1)], attr)
    safe_addstr(stdscr, h - 1, 0, line2[: max(0, w - 1)], attr)


def render_scene(
    stdscr,
    tr: Callable[[str], str],
    session: Session,
    settings: Settings,
    style: Style,
    hud_visible: bool,
) -> None:
    h, w = stdscr.getmaxyx()
    if h < 8 or w < 24:
        stdscr.erase()
        safe_addstr(stdscr, 0, 0, tr("msg_too_small"))
        return

    header_lines = 1
    footer_lines = 2 if hud_visible else 0
    out_h = max(1, h - header_lines - footer_lines)
    out_w = max(1, w - 1)

    title = tr("won_title") if session.won else tr("scene_title")
    hdr_attr = curses.A_REVERSE
    if style.colors_ok and style.hud_pair:
        hdr_attr |= curses.color_pair(style.hud_pair)
    safe_addstr(stdscr, 0, 0, title[: max(0, w - 1)], hdr_attr)

    world = session.world
    hints = _hint_points(session) if settings.hint and not session.won else []
    canvas = rasterize(world.snapshot(), world.width, world.height, out_w, out_h, hints)

    for oy, row in enumerate(canvas):
        x = 0
        while x < out_w:
            kind = row[x]
            attr = style.kind_attr(kind)
            start = x
            buf = [style.glyph(kind)]
            x += 1
            while x < out_w and style.kind_attr(row[x]) == attr:
                buf.append(style.glyph(row[x]))
                x += 1
            safe_addstr(stdscr, oy + header_lines, start, "".join(buf), attr)

    if hud_visible:
        draw_hud(stdscr, tr, session, settings, style)
