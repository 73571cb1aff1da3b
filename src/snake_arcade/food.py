"""Food placement logic."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_arcade.grid import Grid

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when every grid cell is occupied and food cannot be placed."""


class FoodKind(enum.Enum):
    """Food variants. Only normal food exists today."""

    NORMAL = "normal"


@dataclass(frozen=True)
class Food:
    """A single piece of food on the board."""

    position: tuple[int, int]
    kind: FoodKind = FoodKind.NORMAL

    def to_dict(self) -> dict:
        return {"position": list(self.position), "kind": self.kind.value}


class FoodPlacer:
    """Places food uniformly at random on unoccupied cells.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Sampling draws from the precomputed free-cell list, so a single draw
    always succeeds when any free cell exists.
    """

    def __init__(
        self, grid: Grid, rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn(self, occupied: Iterable[tuple[int, int]]) -> Food:
        """Return new food on a cell not in *occupied*.

        Raises :class:`BoardFullError` if no free cell remains.
        """
        free = self.grid.free_cells(occupied)
        if not free:
            logger.warning("No free cells available for food placement.")
            raise BoardFullError(
                f"All {self.grid.cell_count} cells are occupied."
            )
        position = free[int(self.rng.integers(len(free)))]
        logger.debug("Placed food at %s (%d free cells).", position, len(free))
        return Food(position)
