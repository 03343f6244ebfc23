# -*- coding: utf-8 -*-
"""UI helpers: prompts, settings menu, win banner."""
from __future__ import annotations

import curses
from typing import Callable, List, Literal, Optional, Tuple

from .constants import MAX_CELLS, MIN_CELLS
from .i18n import LOCALES, make_tr, option_display
from .models import Settings
from .style import Capabilities, Style, draw_box
from .util import clamp, safe_addstr

def confirm_yes_no(stdscr, tr: Callable[[str], str], prompt_key: str) -> bool:
    prompt = tr(prompt_key)
    h, w = stdscr.getmaxyx()
    line = tr("prompt_yes_no", prompt=prompt)
    safe_addstr(stdscr, h - 1, 0, line[: max(0, w - 1)], curses.A_REVERSE)
    stdscr.refresh()

    stdscr.nodelay(False)
    try:
        while True:
            ch = stdscr.getch()
            if ch in (ord("y"), ord("Y")):
                return True
            if ch in (ord("n"), ord("N")):
                return False
    finally:
        stdscr.nodelay(True)

def cycle_value(values: List[str], cur: str, delta: int) -> str:
    try:
        i = values.index(cur)
    except ValueError:
        i = 0
    return values[(i + delta) % len(values)]

def adjust_setting(settings: Settings, kind: str, key: str, delta: int) -> None:
    """Apply one left/right step of the menu to ``settings``."""
    if kind == "range":
        if key in ("rows", "columns"):
            cur = getattr(settings, key)
            setattr(settings, key, int(clamp(cur + delta, MIN_CELLS, MAX_CELLS)))
    elif kind == "toggle":
        setattr(settings, key, not getattr(settings, key))
    elif kind == "choice":
        cur = str(getattr(settings, key))
        if key in ("colors", "unicode"):
            setattr(settings, key, cycle_value(["auto", "on", "off"], cur, delta))
        elif key == "hud":
            settings.hud = cycle_value(["auto5", "always", "off"], cur, delta)  # type: ignore
        elif key == "language":
            lang_choices = list(LOCALES.keys())
            if "en" in lang_choices:
                lang_choices = ["en"] + [l for l in lang_choices if l != "en"]
            settings.language = cycle_value(lang_choices, cur, delta)

MenuItem = Tuple[str, str, str]

SETTING_ITEMS: List[MenuItem] = [
    ("menu_item_rows", "range", "rows"),
    ("menu_item_columns", "range", "columns"),
    ("menu_item_hint", "toggle", "hint"),
    ("menu_item_colors", "choice", "colors"),
    ("menu_item_unicode", "choice", "unicode"),
    ("menu_item_hud", "choice", "hud"),
    ("menu_item_language", "choice", "language"),
]

def menu_items(mode: Literal["start", "pause"]) -> List[MenuItem]:
    if mode == "pause":
        return (
            [("menu_action_resume", "action", "resume")]
            + SETTING_ITEMS
            + [("menu_action_restart", "action", "restart"), ("menu_action_quit", "action", "quit")]
        )
    return [("menu_action_start", "action", "start")] + SETTING_ITEMS + [("menu_action_quit", "action", "quit")]

def menu_key(settings: Settings, items: List[MenuItem], sel: int, ch: int) -> Tuple[int, Optional[str]]:
    """Apply one key press to the menu.

    Returns the new selection and the requested action, if any: an action
    item's key, "quit" or "escape".
    """
    if ch == 27:
        return sel, "escape"
    if ch in (ord("q"), ord("Q")):
        return sel, "quit"
    if ch == curses.KEY_UP:
        return (sel - 1) % len(items), None
    if ch == curses.KEY_DOWN:
        return (sel + 1) % len(items), None

    _, kind, key = items[sel]
    if ch in (curses.KEY_LEFT, curses.KEY_RIGHT):
        adjust_setting(settings, kind, key, -1 if ch == curses.KEY_LEFT else 1)
    elif ch in (10, 13, curses.KEY_ENTER, ord(" ")):
        if kind == "action":
            return sel, key
        if kind in ("choice", "toggle"):
            adjust_setting(settings, kind, key, 1)
    return sel, None

def _help_line(tr: Callable[[str], str], settings: Settings, key: str) -> str:
    if key in ("rows", "columns"):
        return tr("help_size_desc")
    if key == "hint":
        return tr("help_hint_desc")
    if key == "hud":
        return tr(f"help_hud_{settings.hud}")
    return tr("help_in_game")

def _draw_menu(stdscr, tr, base_style: Style, caps: Capabilities, settings: Settings, items: List[MenuItem], sel: int) -> None:
    H, W = stdscr.getmaxyx()
    box_w = min(64, W - 4)
    box_h = min(len(items) + 7, H - 2)
    box_x = (W - box_w) // 2
    box_y = (H - box_h) // 2

    border_attr = curses.A_NORMAL
    if base_style.colors_ok and base_style.hud_pair:
        border_attr |= curses.color_pair(base_style.hud_pair)
    draw_box(stdscr, box_y, box_x, box_h, box_w, base_style.unicode_ok, border_attr)
    safe_addstr(stdscr, box_y, box_x + 2, tr("menu_title")[: box_w - 4], border_attr | curses.A_BOLD)

    cap_parts = [tr("cap_utf8_ok") if caps.unicode_ok else tr("cap_utf8_no")]
    if caps.colors_ok and caps.color_mode == "256":
        cap_parts.append(tr("cap_color_256"))
    elif caps.colors_ok:
        cap_parts.append(tr("cap_color"))
    else:
        cap_parts.append(tr("cap_mono"))
    caps_line = tr("menu_terminal", caps=", ".join(cap_parts))
    safe_addstr(stdscr, box_y + 1, box_x + 2, caps_line[: box_w - 4], curses.A_DIM)

    # One-char padding before the border keeps curses from auto-wrapping.
    inner_w = box_w - 5
    prefix = "▶ " if base_style.unicode_ok else "> "
    for i, (label_key, kind, key) in enumerate(items):
        value = ""
        if kind == "range":
            value = f"[ {getattr(settings, key):3d} ]"
        elif kind in ("choice", "toggle"):
            value = f"[ {option_display(tr, key, str(getattr(settings, key)))} ]"
        line = (prefix if i == sel else "  ") + f"{tr(label_key):<12} {value}"
        attr = curses.A_REVERSE if i == sel else curses.A_NORMAL
        safe_addstr(stdscr, box_y + 3 + i, box_x + 2, line[:inner_w], attr)

    help_line = _help_line(tr, settings, items[sel][2])
    safe_addstr(stdscr, box_y + box_h - 3, box_x + 2, help_line[:inner_w], curses.A_DIM)
    safe_addstr(stdscr, box_y + box_h - 2, box_x + 2, tr("menu_footer")[:inner_w], curses.A_DIM)

def run_menu(stdscr, base_style: Style, caps: Capabilities, settings: Settings, mode: Literal["start", "pause"]) -> str:
    """Show the settings menu until the player starts, resumes, restarts or quits."""
    items = menu_items(mode)
    sel = 0
    try:
        while True:
            # confirm_yes_no leaves the screen non-blocking
            stdscr.nodelay(False)
            tr = make_tr(settings.language)
            stdscr.erase()
            H, W = stdscr.getmaxyx()
            if H < len(items) + 9 or W < 44:
                safe_addstr(stdscr, 0, 0, tr("menu_small"))
                safe_addstr(stdscr, 2, 0, tr("menu_small_hint"))
                stdscr.refresh()
                ch = stdscr.getch()
                if ch in (ord("q"), ord("Q")) and confirm_yes_no(stdscr, tr, "prompt_quit_short"):
                    return "quit"
                if ch in (10, 13, curses.KEY_ENTER):
                    return "resume" if mode == "pause" else "start"
                continue

            _draw_menu(stdscr, tr, base_style, caps, settings, items, sel)
            stdscr.refresh()

            sel, action = menu_key(settings, items, sel, stdscr.getch())
            if action == "escape":
                if mode == "pause":
                    return "resume"
                action = "quit"
            if action == "quit":
                if confirm_yes_no(stdscr, tr, "prompt_exit"):
                    return "quit"
                continue
            if action is not None:
                return action
    finally:
        stdscr.nodelay(True)

def draw_win_banner(stdscr, tr: Callable[[str], str], seconds: float) -> None:
    """Centered win message drawn over the falling walls."""
    h, w = stdscr.getmaxyx()

    msg1 = tr("win_title")
    msg2 = tr("win_time", sec=seconds)
    msg3 = tr("win_press_key")

    y = h // 2 - 1
    for i, msg in enumerate((msg1, msg2, msg3)):
        x = max(0, (w - len(msg)) // 2)
        safe_addstr(stdscr, y + i, x, msg[: max(0, w - x - 1)], curses.A_BOLD | curses.A_REVERSE)
