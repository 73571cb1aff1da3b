"""Tick-driven game session state machine."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from snake_arcade.collision import Collision, classify
from snake_arcade.config import GameConfig
from snake_arcade.food import BoardFullError, Food, FoodPlacer
from snake_arcade.grid import Grid
from snake_arcade.snake import Direction, Snake
from snake_arcade.storage import BestScoreStore, MemoryBestScoreStore

logger = logging.getLogger(__name__)


class Phase(str, enum.Enum):
    """Lifecycle states for a game session."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"

    @property
    def terminal(self) -> bool:
        return self in (Phase.GAME_OVER, Phase.WON)


@dataclass(frozen=True)
class TickResult:
    """What a renderer needs after one call to :meth:`GameSession.tick`."""

    phase: Phase
    score: int
    ate_food: bool
    snake_cells: tuple[tuple[int, int], ...]
    food_cell: tuple[int, int] | None
    collision: Collision = Collision.CLEAR

    def to_dict(self) -> dict:
        return {
            "phase": self.phase.value,
            "score": self.score,
            "ate_food": self.ate_food,
            "snake_cells": [list(c) for c in self.snake_cells],
            "food_cell": list(self.food_cell) if self.food_cell else None,
            "collision": self.collision.value,
        }


class GameSession:
    """Single-player snake game driven by external :meth:`tick` calls.

    The session owns the snake, food, score and phase. Best score is
    loaded once from *store* at construction and written back only when a
    finished game beats it. Illegal transitions (pausing while idle,
    ticking while paused, ...) are silent no-ops; lifecycle methods return
    whether the transition happened.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: BestScoreStore | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.store = store if store is not None else MemoryBestScoreStore()
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )
        self.food_placer = FoodPlacer(self.grid, rng=self.rng)

        self._best_score = self.store.load()
        self._phase = Phase.IDLE
        self._reset()

    # --- lifecycle -------------------------------------------------------

    def start(self) -> bool:
        """Lay out a fresh board and begin running."""
        if self._phase not in (Phase.IDLE, Phase.GAME_OVER, Phase.WON):
            return False
        self._reset()
        self._phase = Phase.RUNNING
        logger.info(
            "Session started on %dx%d grid (best score %d).",
            self.grid.width, self.grid.height, self._best_score,
        )
        return True

    def restart(self) -> bool:
        """Start again after the game has ended."""
        if not self._phase.terminal:
            return False
        return self.start()

    def pause(self) -> bool:
        if self._phase is not Phase.RUNNING:
            return False
        self._phase = Phase.PAUSED
        return True

    def resume(self) -> bool:
        if self._phase is not Phase.PAUSED:
            return False
        self._phase = Phase.RUNNING
        return True

    def toggle_pause(self) -> bool:
        """Pause while running, resume while paused."""
        if self._phase is Phase.PAUSED:
            return self.resume()
        return self.pause()

    def request_direction(self, direction: Direction) -> bool:
        """Buffer a heading for the next tick.

        Only the latest request survives until the next tick. A request for
        the exact opposite of the current heading is ignored.
        """
        if self._phase is not Phase.RUNNING:
            return False
        if direction is self.snake.direction.opposite:
            return False
        self._pending_direction = direction
        return True

    # --- simulation ------------------------------------------------------

    def tick(self) -> TickResult:
        """Advance the game by one step.

        Does nothing unless the session is running.
        """
        if self._phase is not Phase.RUNNING:
            return self.snapshot()

        if self._pending_direction is not None:
            self.snake.direction = self._pending_direction
            self._pending_direction = None

        new_head = self.snake.propose_next_head()
        ate_food = self.food is not None and new_head == self.food.position
        grows = ate_food or self.snake.growth_pending > 0

        collision = classify(new_head, self.grid, self.snake.body, grows=grows)
        self.ticks += 1
        if collision.fatal:
            self._finish(Phase.GAME_OVER, collision)
            return self._result(ate_food=False, collision=collision)

        if ate_food:
            self.snake.schedule_growth(self.config.growth_per_food)
        self.snake.advance(new_head, grow=grows)

        if ate_food:
            self._score += self.config.points_per_food
            try:
                self.food = self.food_placer.spawn(self.snake.occupied_cells())
            except BoardFullError:
                self.food = None
                self._finish(Phase.WON, collision)

        return self._result(ate_food=ate_food, collision=collision)

    # --- read accessors --------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def score(self) -> int:
        return self._score

    @property
    def best_score(self) -> int:
        return self._best_score

    @property
    def snake_body(self) -> tuple[tuple[int, int], ...]:
        """Body cells, head first."""
        return tuple(self.snake.body)

    @property
    def food_position(self) -> tuple[int, int] | None:
        return self.food.position if self.food is not None else None

    @property
    def heading(self) -> Direction:
        """The direction the next tick will move in."""
        return self._pending_direction or self.snake.direction

    def snapshot(self) -> TickResult:
        """Return the current state without advancing."""
        return self._result(ate_food=False)

    def get_state(self) -> dict:
        """Return the full, serializable session state."""
        return {
            "tick": self.ticks,
            "phase": self._phase.value,
            "score": self._score,
            "best_score": self._best_score,
            "heading": self.heading.name.lower(),
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
            "food": self.food.to_dict() if self.food is not None else None,
        }

    # --- internals -------------------------------------------------------

    def _reset(self) -> None:
        self.snake = Snake(self.config.start_body, self.config.direction)
        self.food: Food | None = self.food_placer.spawn(
            self.snake.occupied_cells(),
        )
        self._score = 0
        self.ticks = 0
        self._pending_direction: Direction | None = None

    def _finish(self, phase: Phase, cause: Collision) -> None:
        self._phase = phase
        logger.info(
            "Game ended (%s, %s) at tick %d with score %d.",
            phase.value, cause.value, self.ticks, self._score,
        )
        if self._score > self._best_score:
            self._best_score = self._score
            self.store.save(self._score)
            logger.info("New best score: %d.", self._score)

    def _result(
        self, ate_food: bool, collision: Collision = Collision.CLEAR,
    ) -> TickResult:
        return TickResult(
            phase=self._phase,
            score=self._score,
            ate_food=ate_food,
            snake_cells=self.snake_body,
            food_cell=self.food_position,
            collision=collision,
        )
