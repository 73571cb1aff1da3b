"""Snake body, heading, and movement."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Sequence


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name, e.g. ``"left"``."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def line_body(
    head: tuple[int, int], direction: Direction, length: int,
) -> list[tuple[int, int]]:
    """Build a straight body whose segments trail behind *head*."""
    if length < 1:
        raise ValueError("Snake length must be at least 1.")
    dx, dy = direction.value
    x, y = head
    return [(x - dx * i, y - dy * i) for i in range(length)]


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The body is only
    mutated through :meth:`advance`.
    """

    def __init__(
        self,
        body: Sequence[tuple[int, int]],
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[tuple[int, int]] = deque()
        self.direction = direction
        self._grow_pending = 0
        self.initialize(body, direction)

    def initialize(
        self, body: Sequence[tuple[int, int]], direction: Direction,
    ) -> None:
        """Replace the body and heading, clearing any queued growth.

        Raises ``ValueError`` if *body* is empty, not contiguous, or
        overlaps itself.
        """
        cells = [tuple(seg) for seg in body]
        if not cells:
            raise ValueError("Snake body must contain at least one segment.")
        for (ax, ay), (bx, by) in zip(cells, cells[1:]):
            if abs(ax - bx) + abs(ay - by) != 1:
                raise ValueError(
                    f"Snake body is not contiguous between {(ax, ay)} "
                    f"and {(bx, by)}."
                )
        if len(set(cells)) != len(cells):
            raise ValueError("Snake body overlaps itself.")
        self.body = deque(cells)
        self.direction = direction
        self._grow_pending = 0

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        return self.body[-1]

    @property
    def growth_pending(self) -> int:
        return self._grow_pending

    def __len__(self) -> int:
        return len(self.body)

    def propose_next_head(
        self, direction: Direction | None = None,
    ) -> tuple[int, int]:
        """Compute the next head position without moving.

        Uses the current heading when *direction* is omitted.
        """
        dx, dy = (direction or self.direction).value
        x, y = self.head
        return x + dx, y + dy

    def advance(
        self, new_head: tuple[int, int], grow: bool = False,
    ) -> tuple[int, int] | None:
        """Move the head to *new_head*.

        Returns the vacated tail cell, or ``None`` if the snake grew. A
        growing move consumes one unit of queued growth, if any.
        """
        self.body.appendleft(new_head)
        if grow:
            if self._grow_pending > 0:
                self._grow_pending -= 1
            return None
        return self.body.pop()

    def schedule_growth(self, segments: int = 1) -> None:
        """Queue growth for the next *segments* moves."""
        self._grow_pending += segments

    def occupied_cells(self) -> set[tuple[int, int]]:
        """Return the set of cells covered by the body."""
        return set(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
