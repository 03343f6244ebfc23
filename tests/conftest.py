"""Test configuration.

Pytest may be started from inside ``tests/``; put the project root on the
path so ``ballmaze`` imports without an install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def small_settings():
    from ballmaze.models import Settings

    return Settings(rows=3, columns=4, seed=7, world_width=400.0, world_height=300.0)
