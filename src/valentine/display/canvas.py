"""Rasterize world-coordinate points into terminal cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np

from valentine.display.color import Color
from valentine.utilities.env import CanvasMarker

WORLD_BOUNDS = (-2.0, 2.0)
BRAILLE_OFFSET = 0x2800
EMPTY_CELL = -1

# Bit for each (row, column) dot inside a 2x4 braille cell.
_BRAILLE_BITS = np.array(
    [
        [0x01, 0x08],
        [0x02, 0x10],
        [0x04, 0x20],
        [0x40, 0x80],
    ],
    dtype=np.uint8,
)
_SINGLE_BIT = np.array([[0x01]], dtype=np.uint8)

_MARKER_BITS: dict[CanvasMarker, np.ndarray] = {
    CanvasMarker.BRAILLE: _BRAILLE_BITS,
    CanvasMarker.DOT: _SINGLE_BIT,
    CanvasMarker.BLOCK: _SINGLE_BIT,
}
_MARKER_GLYPHS = {
    CanvasMarker.DOT: "•",
    CanvasMarker.BLOCK: "█",
}


@dataclass(frozen=True)
class CellRun:
    """Adjacent cells on one row that share a color."""

    row: int
    col: int
    text: str
    color: Color


class Canvas:
    """A grid of terminal cells addressed in world coordinates.

    Each cell holds ``resolution`` sub-cell dots. World ``y`` grows upwards
    while terminal rows grow downwards, so the vertical axis is flipped when
    points are rasterized. Points outside the bounds are dropped.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        x_bounds: tuple[float, float] = WORLD_BOUNDS,
        y_bounds: tuple[float, float] = WORLD_BOUNDS,
        marker: CanvasMarker = CanvasMarker.BRAILLE,
    ) -> None:
        if x_bounds[0] >= x_bounds[1] or y_bounds[0] >= y_bounds[1]:
            raise ValueError("Canvas bounds must be increasing (min, max) pairs")
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self.marker = marker
        self._bits = _MARKER_BITS[marker]
        self._dots = np.zeros((self.height, self.width), dtype=np.uint8)
        self._cell_colors = np.full(
            (self.height, self.width), EMPTY_CELL, dtype=np.int16
        )
        self._colors: list[Color] = []

    @property
    def resolution(self) -> tuple[int, int]:
        cell_height, cell_width = self._bits.shape
        return self.width * cell_width, self.height * cell_height

    def is_empty(self) -> bool:
        return not self._dots.any()

    def paint(self, points: np.ndarray, color: Color) -> None:
        """Paint an ``(N, 2)`` array of world coordinates in ``color``."""

        if self.width == 0 or self.height == 0 or len(points) == 0:
            return

        left, right = self.x_bounds
        bottom, top = self.y_bounds
        xs = points[:, 0]
        ys = points[:, 1]
        inside = (xs >= left) & (xs <= right) & (ys >= bottom) & (ys <= top)
        if not inside.any():
            return

        resolution_x, resolution_y = self.resolution
        grid_x = ((xs[inside] - left) * (resolution_x - 1) / (right - left)).astype(
            np.intp
        )
        grid_y = ((top - ys[inside]) * (resolution_y - 1) / (top - bottom)).astype(
            np.intp
        )

        cell_height, cell_width = self._bits.shape
        rows = grid_y // cell_height
        cols = grid_x // cell_width
        np.bitwise_or.at(
            self._dots,
            (rows, cols),
            self._bits[grid_y % cell_height, grid_x % cell_width],
        )

        if color not in self._colors:
            self._colors.append(color)
        self._cell_colors[rows, cols] = self._colors.index(color)

    def glyph(self, bits: int) -> str:
        if self.marker is CanvasMarker.BRAILLE:
            return chr(BRAILLE_OFFSET + bits)
        return _MARKER_GLYPHS[self.marker]

    def runs(self) -> Iterator[CellRun]:
        """Yield painted cells grouped into same-colored runs, row by row."""

        for row in range(self.height):
            run_start: int | None = None
            run_color = EMPTY_CELL
            glyphs: list[str] = []
            for col in range(self.width + 1):
                color_index = (
                    int(self._cell_colors[row, col]) if col < self.width else EMPTY_CELL
                )
                if run_start is not None and color_index != run_color:
                    yield CellRun(
                        row=row,
                        col=run_start,
                        text="".join(glyphs),
                        color=self._colors[run_color],
                    )
                    run_start = None
                    glyphs = []
                if color_index == EMPTY_CELL:
                    continue
                if run_start is None:
                    run_start = col
                    run_color = color_index
                glyphs.append(self.glyph(int(self._dots[row, col])))
