"""Classification of a prospective head position."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snake_arcade.grid import Grid


class Collision(enum.Enum):
    """Outcome of moving the head onto a cell."""

    CLEAR = "clear"
    WALL = "wall"
    SELF = "self"

    @property
    def fatal(self) -> bool:
        return self is not Collision.CLEAR


def classify(
    head: tuple[int, int],
    grid: Grid,
    body: Sequence[tuple[int, int]],
    grows: bool = False,
) -> Collision:
    """Classify *head* against the walls and the pre-move *body*.

    A non-growing move vacates the tail cell in the same step, so moving
    the head onto the current tail is legal unless the snake *grows*.
    """
    if not grid.contains(head):
        return Collision.WALL
    remaining = body if grows else list(body)[:-1]
    if head in remaining:
        return Collision.SELF
    return Collision.CLEAR
