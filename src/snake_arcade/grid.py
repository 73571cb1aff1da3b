"""Grid geometry for the snake game."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np


class Grid:
    """Fixed rectangular board with terminal walls.

    Pure geometry: the grid holds no game state. Coordinates are
    ``(x, y)`` pairs, i.e. (column, row), with the origin at the top-left.
    """

    def __init__(self, width: int = 20, height: int = 20) -> None:
        if width < 2 or height < 2:
            raise ValueError("Grid dimensions must be at least 2×2.")
        self.width = width
        self.height = height

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def contains(self, cell: tuple[int, int]) -> bool:
        """Check whether a coordinate lies within the grid."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self) -> list[tuple[int, int]]:
        """Return every cell in row-major order."""
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def free_cells(
        self, occupied: Iterable[tuple[int, int]],
    ) -> list[tuple[int, int]]:
        """Return the cells not in *occupied*, in row-major order.

        Occupied coordinates outside the grid are ignored.
        """
        mask = np.ones((self.height, self.width), dtype=bool)
        for cell in occupied:
            if self.contains(cell):
                x, y = cell
                mask[y, x] = False
        ys, xs = np.nonzero(mask)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
