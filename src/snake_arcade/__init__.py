"""Snake Arcade, a single-player snake simulation core."""

from snake_arcade.collision import Collision, classify
from snake_arcade.config import GameConfig, SpeedTier
from snake_arcade.driver import FixedStepClock, run_session
from snake_arcade.food import BoardFullError, Food, FoodKind, FoodPlacer
from snake_arcade.grid import Grid
from snake_arcade.session import GameSession, Phase, TickResult
from snake_arcade.snake import Direction, Snake
from snake_arcade.storage import (
    BestScoreStore,
    JsonBestScoreStore,
    MemoryBestScoreStore,
)

__all__ = [
    "BestScoreStore",
    "BoardFullError",
    "Collision",
    "Direction",
    "FixedStepClock",
    "Food",
    "FoodKind",
    "FoodPlacer",
    "GameConfig",
    "GameSession",
    "Grid",
    "JsonBestScoreStore",
    "MemoryBestScoreStore",
    "Phase",
    "Snake",
    "SpeedTier",
    "TickResult",
    "classify",
    "run_session",
]
