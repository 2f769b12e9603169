from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from camera import CANVAS_HEIGHT, CANVAS_WIDTH
from track import reset_track


class RecordingCanvas:
    """Canvas stand-in that keeps every draw call as (name, args)."""

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple[str, tuple]] = []

    def clear(self, color=(0, 0, 0)) -> None:
        self.calls.append(("clear", (color,)))

    def fill_polygon(self, points, color) -> None:
        self.calls.append(("fill_polygon", (tuple(points), color)))

    def fill_rect(self, x, y, w, h, color) -> None:
        self.calls.append(("fill_rect", (x, y, w, h, color)))

    def fill_gradient(self, x, y, w, h, top, bottom) -> None:
        self.calls.append(("fill_gradient", (x, y, w, h, top, bottom)))

    def stroke_arc(self, cx, cy, radius, start, stop, width, color) -> None:
        self.calls.append(("stroke_arc", (cx, cy, radius, start, stop, width, color)))

    def fill_text(self, text, x, y, color, align="left") -> None:
        self.calls.append(("fill_text", (text, x, y, color, align)))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def polygons(self) -> list[tuple]:
        return [args for name, args in self.calls if name == "fill_polygon"]


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture(scope="session")
def track():
    return reset_track()
