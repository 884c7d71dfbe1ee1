"""Conversions between canvas pixels and grid cells."""

from dataclasses import dataclass
from typing import NamedTuple

from .config import CANVAS_HEIGHT, CANVAS_WIDTH, CELL_SIZE


class Cell(NamedTuple):
    """An immutable (x, y) grid position."""

    x: int
    y: int

    def shifted(self, dx, dy):
        return Cell(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class GridGeometry:
    """Maps a pixel canvas onto a grid of square cells.

    ``origin`` is the pixel offset of the canvas inside the window, so the
    play area can sit below a HUD strip.
    """

    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    cell_size: int = CELL_SIZE
    origin: tuple = (0, 0)

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive.")
        if self.canvas_width < self.cell_size or self.canvas_height < self.cell_size:
            raise ValueError("Canvas must be at least one cell in each direction.")

    @property
    def cols(self):
        return self.canvas_width // self.cell_size

    @property
    def rows(self):
        return self.canvas_height // self.cell_size

    def contains(self, cell):
        """Return True when the cell lies inside the grid bounds."""
        x, y = cell
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell_to_canvas(self, cell):
        """Return the pixel position of the cell's top-left corner."""
        x, y = cell
        ox, oy = self.origin
        return (ox + x * self.cell_size, oy + y * self.cell_size)

    def cell_center(self, cell):
        left, top = self.cell_to_canvas(cell)
        half = self.cell_size / 2
        return (left + half, top + half)

    def canvas_to_cell(self, px, py):
        """Return the cell under a pixel position, or None outside the grid."""
        ox, oy = self.origin
        cell = Cell(int((px - ox) // self.cell_size), int((py - oy) // self.cell_size))
        if not self.contains(cell):
            return None
        return cell
