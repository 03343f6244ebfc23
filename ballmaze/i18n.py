# -*- coding: utf-8 -*-
"""Localization utilities (English + Russian)."""
from __future__ import annotations

from typing import Callable, Dict


LOCALES: Dict[str, Dict[str, str]] = {
    "en": {
        "lang_name": "English",

        "msg_too_small": "Terminal too small. Enlarge it.",

        "prompt_yes_no": "{prompt} Y/N ",
        "prompt_exit": "Exit the game?",
        "prompt_quit_short": "Quit?",

        "menu_title": " SETTINGS / MENU ",
        "menu_terminal": "Terminal: {caps}",
        "menu_footer": "←/→: change   Enter: select   ESC: back",
        "menu_small": "Terminal too small for the menu. Enlarge it.",
        "menu_small_hint": "Enter: continue   Q: quit",

        "menu_action_start": "Start",
        "menu_action_resume": "Resume",
        "menu_action_restart": "New maze",
        "menu_action_quit": "Quit",

        "menu_item_rows": "Rows",
        "menu_item_columns": "Columns",
        "menu_item_colors": "Color",
        "menu_item_unicode": "Unicode",
        "menu_item_hud": "HUD",
        "menu_item_hint": "Hint",
        "menu_item_language": "Language",

        "help_in_game": "In game: W/A/S/D or arrows push the ball, H hint, R new maze, ESC menu, Q quit",

        "help_size_desc": "Takes effect with the next maze.",

        "help_hud_auto5": "auto5 — first 5 seconds",
        "help_hud_always": "always — always visible",
        "help_hud_off": "off — hidden",

        "help_hint_desc": "Shows the shortest way from the ball to the goal.",

        "opt_auto": "auto",
        "opt_on": "on",
        "opt_off": "off",
        "opt_auto5": "auto5",
        "opt_always": "always",

        "cap_utf8_ok": "UTF-8✓",
        "cap_utf8_no": "UTF-8×",
        "cap_color_256": "256c",
        "cap_color": "color",
        "cap_mono": "mono",

        "scene_title": "BALL MAZE — reach the goal",
        "won_title": "YOU WIN — R new maze  ESC menu  Q quit",

        "hud_line1": "W/A/S/D or arrows push  H hint  R new maze  ESC menu  Q quit",
        "hud_line2": "Maze:{rows}x{cols}  Time:{time:6.1f}s  Speed:{speed:6.0f}  {tags}",

        "tag_ascii": "ASCII",
        "tag_utf8": "UTF-8",
        "tag_color": "color",
        "tag_mono": "mono",
        "tag_hint": "HINT",
        "tag_seed": "seed={seed}",

        "win_title": "You reached the goal!",
        "win_time": "Time: {sec:.1f}s",
        "win_press_key": "Press R for a new maze…",
    },
    "ru": {
        "lang_name": "Русский",

        "msg_too_small": "Окно слишком маленькое. Увеличьте терминал.",

        "prompt_yes_no": "{prompt} Y/N ",
        "prompt_exit": "Выйти из игры?",
        "prompt_quit_short": "Выйти?",

        "menu_title": " НАСТРОЙКИ / МЕНЮ ",
        "menu_terminal": "Терминал: {caps}",
        "menu_footer": "←/→: изменить   Enter: выбрать   ESC: назад",
        "menu_small": "Окно слишком маленькое для меню. Увеличьте терминал.",
        "menu_small_hint": "Enter: продолжить   Q: выйти",

        "menu_action_start": "Начать",
        "menu_action_resume": "Продолжить",
        "menu_action_restart": "Новый лабиринт",
        "menu_action_quit": "Выход",

        "menu_item_rows": "Строки",
        "menu_item_columns": "Столбцы",
        "menu_item_colors": "Цвет",
        "menu_item_unicode": "Unicode",
        "menu_item_hud": "HUD",
        "menu_item_hint": "Подсказка",
        "menu_item_language": "Язык",

        "help_in_game": "В игре: W/A/S/D или стрелки толкают шар, H подсказка, R новый лабиринт, ESC меню, Q выход",

        "help_size_desc": "Применяется к следующему лабиринту.",

        "help_hud_auto5": "auto5 — первые 5 секунд",
        "help_hud_always": "always — всегда",
        "help_hud_off": "off — скрыт",

        "help_hint_desc": "Показывает кратчайший путь от шара до цели.",

        "opt_auto": "auto",
        "opt_on": "on",
        "opt_off": "off",
        "opt_auto5": "auto5",
        "opt_always": "always",

        "cap_utf8_ok": "UTF-8✓",
        "cap_utf8_no": "UTF-8×",
        "cap_color_256": "256c",
        "cap_color": "цвет",
        "cap_mono": "моно",

        "scene_title": "ЛАБИРИНТ С ШАРОМ — доберитесь до цели",
        "won_title": "ПОБЕДА — R:новый лабиринт  ESC:меню  Q:выход",

        "hud_line1": "W/A/S/D или стрелки:толчок  H:подсказка  R:новый  ESC:меню  Q:выход",
        "hud_line2": "Лабиринт:{rows}x{cols}  Время:{time:6.1f}с  Скорость:{speed:6.0f}  {tags}",

        "tag_ascii": "ASCII",
        "tag_utf8": "UTF-8",
        "tag_color": "цвет",
        "tag_mono": "моно",
        "tag_hint": "ПОДСК",
        "tag_seed": "seed={seed}",

        "win_title": "Вы добрались до цели!",
        "win_time": "Время: {sec:.1f} c",
        "win_press_key": "Нажмите R для нового лабиринта…",
    },
}

def make_tr(lang: str) -> Callable[[str], str]:
    def tr(key: str, **kwargs) -> str:
        table = LOCALES.get(lang) or LOCALES["en"]
        s = table.get(key) or LOCALES["en"].get(key) or key
        if kwargs:
            try:
                return s.format(**kwargs)
            except Exception:
                return s
        return s
    return tr

def option_display(tr: Callable[[str], str], key: str, value: str) -> str:
    mapping = {
        "auto": "opt_auto",
        "on": "opt_on",
        "off": "opt_off",
        "auto5": "opt_auto5",
        "always": "opt_always",
        "True": "opt_on",
        "False": "opt_off",
    }
    if key == "language":
        return (LOCALES.get(value) or LOCALES["en"]).get("lang_name", value)
    return tr(mapping.get(value, value))
