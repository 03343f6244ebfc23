"""Main game loop and curses entrypoint.

The runtime is split into three phases per frame:
- input: read keys and turn them into impulses or commands
- update: step the physics world and check the win condition
- render: draw the world, HUD and win banner
"""

from __future__ import annotations
from typing import Optional

import curses
import locale
import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass

from .constants import HUD_SECONDS
from .i18n import make_tr
from .models import Settings, settings_from_env
from .render import render_scene
from .session import Session
from .style import Capabilities, Style, detect_caps, effective_style, init_style
from .ui import confirm_yes_no, draw_win_banner, run_menu

log = logging.getLogger(__name__)


@dataclass
class FrameState:
    """Per-level timing and UI state kept outside the session."""

    hud_until: float = 0.0
    last_tick: float = 0.0
    win_seconds: Optional[float] = None


def key_name(ch: int) -> str:
    try:
        return curses.keyname(ch).decode("ascii", "replace")
    except ValueError:
        return ""


def _read_input(
    stdscr,
    tr: Callable[[str], str],
    base_style: Style,
    caps: Capabilities,
    settings: Settings,
    session: Session,
    frame: FrameState,
    style: Style,
) -> tuple[str, Style]:
    """Consume all pending key events.

    Returns (action, new_style) where action is one of:
    - "continue" (default)
    - "restart"
    - "quit"
    """

    while True:
        chkey = stdscr.getch()
        if chkey == -1:
            break

        # ESC: pause menu
        if chkey == 27:
            menu_action = run_menu(stdscr, base_style, caps, settings, mode="pause")
            if menu_action == "quit":
                return "quit", style
            if menu_action == "restart":
                return "restart", style
            style = effective_style(base_style, settings)
            frame.last_tick = time.monotonic()
            if settings.hud == "auto5":
                frame.hud_until = frame.last_tick + HUD_SECONDS
            continue

        if chkey in (ord("q"), ord("Q")):
            if confirm_yes_no(stdscr, tr, "prompt_exit"):
                return "quit", style
            continue

        if chkey in (ord("r"), ord("R")):
            return "restart", style

        if chkey in (ord("h"), ord("H")):
            settings.hint = not settings.hint
            continue

        session.handle_key(key_name(chkey))

    return "continue", style


def _hud_visible(settings: Settings, now: float, hud_until: float) -> bool:
    if settings.hud == "always":
        return True
    if settings.hud == "off":
        return False
    return now < hud_until


def main(stdscr) -> None:
    curses.curs_set(0)
    stdscr.keypad(True)
    curses.noecho()
    curses.cbreak()

    base_style = init_style(stdscr)
    settings = settings_from_env(os.environ)
    caps = detect_caps(base_style)

    action = run_menu(stdscr, base_style, caps, settings, mode="start")
    if action == "quit":
        return

    session = Session(settings)
    frame = FrameState()

    def on_win(s: Session) -> None:
        frame.win_seconds = s.elapsed

    # Registered once for the whole run; reset() keeps it.
    session.add_win_handler(on_win)

    style = effective_style(base_style, settings)
    stdscr.nodelay(True)

    while True:
        now = time.monotonic()
        frame.hud_until = now + HUD_SECONDS
        frame.last_tick = now
        frame.win_seconds = None

        while True:
            now = time.monotonic()
            dt = now - frame.last_tick
            frame.last_tick = now

            tr = make_tr(settings.language)
            action, style = _read_input(
                stdscr, tr, base_style, caps, settings, session, frame, style
            )
            if action == "quit":
                return
            if action == "restart":
                log.debug("new maze requested")
                session.reset()
                break

            session.step(dt)

            stdscr.erase()
            render_scene(
                stdscr, tr, session, settings, style, _hud_visible(settings, now, frame.hud_until)
            )
            if frame.win_seconds is not None:
                draw_win_banner(stdscr, tr, frame.win_seconds)
            stdscr.refresh()

            time.sleep(0.01)


def run() -> None:
    log_file = os.environ.get("BALLMAZE_LOG")
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    try:
        locale.setlocale(locale.LC_ALL, "")
    except Exception:
        pass
    curses.wrapper(main)
