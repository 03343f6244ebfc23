"""Terminal capabilities and styling (unicode, colors)."""

from __future__ import annotations

import curses
import locale
import os
import sys
from dataclasses import dataclass
from typing import Literal, Optional

from .constants import ASCII_GLYPHS, UNICODE_GLYPHS
from .models import Settings
from .util import safe_addstr


@dataclass
class Capabilities:
    unicode_ok: bool
    colors_ok: bool
    color_mode: Literal["none", "basic", "256"]


@dataclass
class Style:
    unicode_ok: bool
    colors_ok: bool
    color_mode: Literal["none", "basic", "256"]
    hud_pair: int
    wall_pair: int
    boundary_pair: int
    goal_pair: int
    ball_pair: int
    hint_pair: int

    def glyph(self, kind: Optional[str]) -> str:
        if kind is None:
            return " "
        table = UNICODE_GLYPHS if self.unicode_ok else ASCII_GLYPHS
        return table.get(kind, " ")

    def kind_attr(self, kind: Optional[str]) -> int:
        if kind is None:
            return curses.A_NORMAL
        bold = kind in ("goal", "ball-start")
        pair = {
            "wall": self.wall_pair,
            "boundary": self.boundary_pair,
            "goal": self.goal_pair,
            "ball-start": self.ball_pair,
            "hint": self.hint_pair,
        }.get(kind, 0)
        attr = curses.A_BOLD if bold else curses.A_NORMAL
        if self.colors_ok and pair:
            attr |= curses.color_pair(pair)
        elif kind == "hint":
            attr |= curses.A_DIM
        return attr


def init_style(stdscr) -> Style:
    unicode_ok = prefer_utf8()

    colors_ok = False
    color_mode: Literal["none", "basic", "256"] = "none"
    pairs_by_role = {"hud": 0, "wall": 0, "boundary": 0, "goal": 0, "ball": 0, "hint": 0}

    if curses.has_colors():
        try:
            curses.start_color()
            try:
                curses.use_default_colors()
            except Exception:
                pass
            colors_ok = True
        except Exception:
            colors_ok = False

    if colors_ok:
        colors = getattr(curses, "COLORS", 0) or 0
        pairs = getattr(curses, "COLOR_PAIRS", 0) or 0
        if colors >= 256 and pairs >= 64:
            color_mode = "256"
        else:
            color_mode = "basic"

        def safe_init_pair(pid: int, fg: int, bg: int) -> bool:
            try:
                curses.init_pair(pid, fg, bg)
                return True
            except Exception:
                return False

        bg = -1
        if color_mode == "256":
            # gold walls, teal goal, violet ball
            palette = {"hud": 15, "wall": 220, "boundary": 250, "goal": 30, "ball": 177, "hint": 240}
        else:
            palette = {
                "hud": curses.COLOR_WHITE,
                "wall": curses.COLOR_YELLOW,
                "boundary": curses.COLOR_WHITE,
                "goal": curses.COLOR_CYAN,
                "ball": curses.COLOR_MAGENTA,
                "hint": curses.COLOR_BLUE,
            }

        pid = 1
        for role, fg in palette.items():
            if pid >= pairs:
                break
            if safe_init_pair(pid, fg, bg):
                pairs_by_role[role] = pid
                pid += 1

    return Style(
        unicode_ok=unicode_ok,
        colors_ok=colors_ok,
        color_mode=color_mode,
        hud_pair=pairs_by_role["hud"],
        wall_pair=pairs_by_role["wall"],
        boundary_pair=pairs_by_role["boundary"],
        goal_pair=pairs_by_role["goal"],
        ball_pair=pairs_by_role["ball"],
        hint_pair=pairs_by_role["hint"],
    )


def effective_style(base: Style, settings: Settings) -> Style:
    unicode_ok = base.unicode_ok
    if settings.unicode == "on":
        unicode_ok = True
    elif settings.unicode == "off":
        unicode_ok = False

    colors_ok = base.colors_ok
    if settings.colors == "off":
        colors_ok = False

    return Style(
        unicode_ok=unicode_ok,
        colors_ok=colors_ok,
        color_mode=base.color_mode if colors_ok else "none",
        hud_pair=base.hud_pair if colors_ok else 0,
        wall_pair=base.wall_pair if colors_ok else 0,
        boundary_pair=base.boundary_pair if colors_ok else 0,
        goal_pair=base.goal_pair if colors_ok else 0,
        ball_pair=base.ball_pair if colors_ok else 0,
        hint_pair=base.hint_pair if colors_ok else 0,
    )


def detect_caps(base_style: Style) -> Capabilities:
    return Capabilities(
        unicode_ok=base_style.unicode_ok,
        colors_ok=base_style.colors_ok,
        color_mode=base_style.color_mode if base_style.colors_ok else "none",
    )


def prefer_utf8() -> bool:
    enc = (
        (sys.stdout.encoding or "")
        + "|"
        + locale.getpreferredencoding(False)
        + "|"
        + (os.environ.get("LC_ALL") or "")
        + "|"
        + (os.environ.get("LANG") or "")
    ).upper()
    return ("UTF-8" in enc) or ("UTF8" in enc)


def box_chars(unicode_ok: bool):
    if unicode_ok:
        return {"tl": "┌", "tr": "┐", "bl": "└", "br": "┘", "h": "─", "v": "│"}
    return {"tl": "+", "tr": "+", "bl": "+", "br": "+", "h": "-", "v": "|"}


def draw_box(stdscr, y: int, x: int, h: int, w: int, unicode_ok: bool, attr: int = 0) -> None:
    bc = box_chars(unicode_ok)
    safe_addstr(stdscr, y, x, bc["tl"] + bc["h"] * (w - 2) + bc["tr"], attr)
    for yy in range(y + 1, y + h - 1):
        safe_addstr(stdscr, yy, x, bc["v"], attr)
        safe_addstr(stdscr, yy, x + w - 1, bc["v"], attr)
    safe_addstr(stdscr, y + h - 1, x, bc["bl"] + bc["h"] * (w - 2) + bc["br"], attr)
