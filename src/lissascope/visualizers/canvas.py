"""
pygame implementation of the engine's drawing sink.
"""

from typing import Sequence

import numpy as np
import pygame

from lissascope.core.animation import Canvas, Color, Point


# pygame converts coordinates to C longs; keep far-off points well inside that range
COORD_LIMIT = 1e6


class PygameCanvas(Canvas):
    """
    Draws onto a pygame Surface.

    The surface may be a subsurface of the window, in which case all
    coordinates are relative to its top-left corner.
    """

    def __init__(self, surface: pygame.Surface, background_color: Color = (0, 0, 0)):
        self.surface = surface
        self.background_color = background_color

    @property
    def width(self) -> int:
        return self.surface.get_width()

    @property
    def height(self) -> int:
        return self.surface.get_height()

    def clear(self):
        self.surface.fill(self.background_color)

    def stroke_path(self, points: Sequence[Point], color: Color, width: int):
        # A single point is only a move-to; nothing to stroke yet
        if len(points) < 2:
            return
        pts = self._clip(np.asarray(points, dtype=np.float64))
        pygame.draw.lines(self.surface, color, False, [(float(x), float(y)) for x, y in pts], max(1, int(width)))

    def fill_circle(self, x: float, y: float, radius: float, color: Color):
        cx, cy = self._clip(np.array([x, y], dtype=np.float64))
        pygame.draw.circle(self.surface, color, (int(round(cx)), int(round(cy))), max(1, int(radius)))

    def _clip(self, coords: np.ndarray) -> np.ndarray:
        """Clamp x/y to COORD_LIMIT around the surface; last axis is (x, y)."""
        lo = np.array([-COORD_LIMIT, -COORD_LIMIT])
        hi = np.array([self.width + COORD_LIMIT, self.height + COORD_LIMIT])
        return np.clip(coords, lo, hi)

    def to_array(self) -> np.ndarray:
        """Surface pixels as an (H, W, 3) uint8 array."""
        # pygame uses (width, height) but numpy expects (height, width)
        arr = pygame.surfarray.array3d(self.surface)
        return np.transpose(arr, (1, 0, 2))
