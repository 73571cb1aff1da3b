"""Best-score persistence collaborators."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

_BEST_SCORE_KEY = "best_score"


class BestScoreStore(Protocol):
    """Anything that can read and write a single best-score integer."""

    def load(self) -> int:
        """Return the stored best score, or 0 if none is stored."""
        ...

    def save(self, score: int) -> None:
        """Persist *score* as the new best."""
        ...


class MemoryBestScoreStore:
    """Process-local store; records every save for inspection."""

    def __init__(self, initial: int = 0) -> None:
        if initial < 0:
            raise ValueError("Best score must be >= 0.")
        self.value = initial
        self.saves: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, score: int) -> None:
        if score < 0:
            raise ValueError("Best score must be >= 0.")
        self.value = score
        self.saves.append(score)


class JsonBestScoreStore:
    """Stores the best score in a small JSON document on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> int:
        if not self.path.exists():
            return 0
        try:
            raw = json.loads(self.path.read_text())
            score = int(raw[_BEST_SCORE_KEY])
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
            raise ValueError(
                f"Malformed best-score file {self.path}: {exc}"
            ) from exc
        if score < 0:
            raise ValueError(f"Negative best score in {self.path}.")
        return score

    def save(self, score: int) -> None:
        if score < 0:
            raise ValueError("Best score must be >= 0.")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({_BEST_SCORE_KEY: score}, indent=2))
        logger.info("Best score %d saved to %s", score, self.path)

    def clear(self) -> None:
        """Remove the stored best score, if any."""
        self.path.unlink(missing_ok=True)
