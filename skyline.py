"""
Skyline module -- City backdrop generated once, frozen for the session.
"""
from typing import NamedTuple, Tuple

import numpy as np

BUILDING_COLOR = (51, 51, 51)
WINDOW_COLOR   = (255, 204, 0)
NUM_BUILDINGS  = 10
WINDOW_GRID    = 15
WINDOW_SIZE    = 8
WINDOW_INSET   = 5


class Building(NamedTuple):
    x: float
    width: float
    height: float
    windows: Tuple[Tuple[int, int], ...]   # (wx, wy) offsets from the top-left


def _window_grid(rng, width, height):
    """Lit windows on a WINDOW_GRID lattice, each lit with p = 0.5."""
    wys = np.arange(0, height - 10, WINDOW_GRID)
    wxs = np.arange(0, width - 10, WINDOW_GRID)
    lit = rng.random((len(wys), len(wxs))) > 0.5
    rows, cols = np.nonzero(lit)
    return tuple((int(wxs[c]), int(wys[r])) for r, c in zip(rows, cols))


def generate_city_buildings(rng=None, count=NUM_BUILDINGS):
    """Build the skyline.  Call once at start-up and keep the result."""
    if rng is None:
        rng = np.random.default_rng()
    buildings = []
    for i in range(count):
        height, width, jitter = rng.random(3)
        height = 40 + height * 80
        width = 40 + width * 60
        buildings.append(Building(
            x=i * 70 + jitter * 20,
            width=width,
            height=height,
            windows=_window_grid(rng, width, height),
        ))
    return tuple(buildings)


def draw_skyline(canvas, buildings, horizon_y):
    for b in buildings:
        top = horizon_y - b.height
        canvas.fill_rect(b.x, top, b.width, b.height, BUILDING_COLOR)
        for wx, wy in b.windows:
            canvas.fill_rect(b.x + WINDOW_INSET + wx, top + WINDOW_INSET + wy,
                             WINDOW_SIZE, WINDOW_SIZE, WINDOW_COLOR)
