#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ball maze in the terminal.

A perfect maze is carved with a randomized depth-first traversal, turned into
static walls of a pymunk world, and a ball is pushed through it with
W/A/S/D or the arrow keys. Touching the goal drops all walls.

Run:
  python3 main.py
  BALLMAZE_SEED=42 python3 main.py      # reproducible maze sequence
  BALLMAZE_LOG=ballmaze.log python3 main.py
"""

from ballmaze.game import run


if __name__ == "__main__":
    run()
