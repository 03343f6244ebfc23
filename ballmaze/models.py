# -*- coding: utf-8 -*-
"""Core data models (configuration)."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal, Optional

from .constants import (
    DEFAULT_COLUMNS,
    DEFAULT_KEY_MAP,
    DEFAULT_ROWS,
    IMPULSE,
    WALL_THICKNESS,
    WORLD_HEIGHT,
    WORLD_WIDTH,
)

log = logging.getLogger(__name__)


@dataclass
class Settings:
    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    seed: Optional[int] = None
    language: str = "en"

    colors: Literal["auto", "on", "off"] = "auto"
    unicode: Literal["auto", "on", "off"] = "auto"
    hud: Literal["auto5", "always", "off"] = "auto5"
    hint: bool = False

    impulse: float = IMPULSE
    key_map: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_KEY_MAP))

    world_width: float = WORLD_WIDTH
    world_height: float = WORLD_HEIGHT
    wall_thickness: float = WALL_THICKNESS


def settings_from_env(environ: Mapping[str, str]) -> Settings:
    """Settings with overrides from ``BALLMAZE_*`` environment variables."""
    settings = Settings()
    raw_seed = environ.get("BALLMAZE_SEED")
    if raw_seed:
        try:
            settings.seed = int(raw_seed)
        except ValueError:
            log.warning("ignoring non-integer BALLMAZE_SEED=%r", raw_seed)
    return settings
