"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
from typing import Optional

import numpy as np

from .geometry import Vec


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def box_overlap(a, b) -> bool:
    """
    Check if the bounding boxes of two entities overlap.

    Boxes that only share an edge do not count. Boxes with zero or negative
    size never overlap anything.
    """
    if a.width <= 0 or a.height <= 0 or b.width <= 0 or b.height <= 0:
        return False
    return (a.position.x + a.width > b.position.x and
            a.position.x < b.position.x + b.width and
            a.position.y + a.height > b.position.y and
            a.position.y < b.position.y + b.height)


def random_position(rng: random.Random, max_x: float, max_y: float) -> Vec:
    """Whole-pixel position uniformly drawn from [0, max_x) x [0, max_y)"""
    if max_x < 1 or max_y < 1:
        raise ValueError(f"No room to place a sprite: bounds ({max_x}, {max_y})")
    return Vec(float(rng.randrange(int(max_x))), float(rng.randrange(int(max_y))))


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
