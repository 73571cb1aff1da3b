"""Game configuration constants supplied at session construction."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from snake_arcade.snake import Direction, line_body

logger = logging.getLogger(__name__)


class SpeedTier(enum.Enum):
    """Difficulty presets, in milliseconds per game step."""

    SLOW = 150
    NORMAL = 100
    FAST = 60

    @classmethod
    def from_name(cls, name: str) -> SpeedTier:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(t.name.lower() for t in cls)
            raise ValueError(
                f"Unknown speed tier {name!r}; expected one of: {choices}."
            ) from None


@dataclass(frozen=True)
class GameConfig:
    """Board, starting layout, scoring and speed for a game.

    Supports JSON serialization so a setup can be shared and replayed.
    """

    # Board
    grid_width: int = 20
    grid_height: int = 20

    # Starting snake
    start_head: tuple[int, int] = (5, 10)
    start_length: int = 3
    start_direction: str = "right"

    # Scoring
    points_per_food: int = 10
    growth_per_food: int = 1

    # Timing
    speed: str = "normal"

    # Food placement
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_width < 2 or self.grid_height < 2:
            raise ValueError("grid_width and grid_height must each be at least 2.")
        if self.start_length < 1:
            raise ValueError("start_length must be at least 1.")
        if self.points_per_food < 0:
            raise ValueError("points_per_food must be >= 0.")
        if self.growth_per_food < 1:
            raise ValueError("growth_per_food must be at least 1.")
        SpeedTier.from_name(self.speed)

        for x, y in self.start_body:
            if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
                raise ValueError(
                    "start_length does not fit the configured grid from "
                    f"start_head {tuple(self.start_head)}; move the head or "
                    "reduce start_length."
                )

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.start_direction)

    @property
    def start_body(self) -> list[tuple[int, int]]:
        """Canonical starting body, head first."""
        return line_body(
            tuple(self.start_head), self.direction, self.start_length,
        )

    @property
    def speed_tier(self) -> SpeedTier:
        return SpeedTier.from_name(self.speed)

    @property
    def tick_interval_ms(self) -> int:
        """Milliseconds between game steps for the configured tier."""
        return self.speed_tier.value

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["start_head"] = list(self.start_head)
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}.")
        data = dict(raw)
        if "start_head" in data:
            data["start_head"] = tuple(data["start_head"])
        return cls(**data)
