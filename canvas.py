"""
Canvas module -- Draw-call surface over a pygame.Surface.
=========================================================
Everything the scene draws goes through these calls:

  clear, fill_polygon, fill_rect, fill_gradient, stroke_arc, fill_text

Colours are RGB tuples.  Arc angles follow screen space (y down), so an
angle grows clockwise on screen: pi..2*pi is the upper half circle.
"""
import math

import numpy as np
import pygame

from camera import round_half_up as _px

BLACK = (0, 0, 0)
ARC_STEP = 2.0   # max pixels of arc length per polygon edge


class Canvas:
    """Render surface used by the scene renderer."""

    def __init__(self, surface, font_name="Arial", font_size=20):
        self.surface = surface
        self._font_name = font_name
        self._font_size = font_size
        self._font = None

    @property
    def width(self):
        return self.surface.get_width()

    @property
    def height(self):
        return self.surface.get_height()

    @property
    def font(self):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont(self._font_name, self._font_size)
        return self._font

    # -------------------------------------------------------------------
    def clear(self, color=BLACK):
        self.surface.fill(color)

    def fill_polygon(self, points, color):
        pygame.draw.polygon(self.surface, color, [(_px(x), _px(y)) for x, y in points])

    def fill_rect(self, x, y, w, h, color):
        pygame.draw.rect(self.surface, color, pygame.Rect(_px(x), _px(y), _px(w), _px(h)))

    def fill_gradient(self, x, y, w, h, top, bottom):
        """Vertical linear gradient, one scanline per row."""
        h = int(h)
        if h <= 0:
            return
        t = np.linspace(0.0, 1.0, h)[:, None]
        ramp = np.rint(np.array(top) * (1 - t) + np.array(bottom) * t).astype(int)
        x0, x1 = _px(x), _px(x + w) - 1
        for row, rgb in enumerate(ramp.tolist()):
            pygame.draw.line(self.surface, tuple(rgb), (x0, _px(y) + row), (x1, _px(y) + row))

    def stroke_arc(self, cx, cy, radius, start, stop, width, color):
        """Arc from *start* to *stop*, clockwise on screen."""
        sweep = stop - start
        if sweep <= 0:
            return
        # filled band between inner and outer edge; angles map straight
        # onto y-down screen space
        outer = radius + width / 2
        inner = max(0.0, radius - width / 2)
        steps = max(2, math.ceil(sweep * outer / ARC_STEP) + 1)
        theta = np.linspace(start, stop, steps)
        cos, sin = np.cos(theta), np.sin(theta)
        outer_pts = zip((cx + outer * cos).tolist(), (cy + outer * sin).tolist())
        inner_pts = zip((cx + inner * cos[::-1]).tolist(), (cy + inner * sin[::-1]).tolist())
        self.fill_polygon(list(outer_pts) + list(inner_pts), color)

    def fill_text(self, text, x, y, color, align="left"):
        """Draw *text* with its baseline at *y*."""
        img = self.font.render(text, True, color)
        if align == "right":
            x -= img.get_width()
        elif align == "center":
            x -= img.get_width() / 2
        self.surface.blit(img, (_px(x), _px(y - self.font.get_ascent())))
