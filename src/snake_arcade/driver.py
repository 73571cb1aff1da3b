"""External timing for a session: fixed-step clock and asyncio tick loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from snake_arcade.session import GameSession, Phase, TickResult

logger = logging.getLogger(__name__)


class FixedStepClock:
    """Converts elapsed frame time into whole game steps.

    Feeding the clock the time since the last frame yields the number of
    logical steps due; the leftover fraction carries to the next frame.
    """

    def __init__(self, interval_ms: float) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive.")
        self.interval_ms = interval_ms
        self._accumulated = 0.0

    def feed(self, elapsed_ms: float) -> int:
        """Add *elapsed_ms* and return how many steps are now due."""
        if elapsed_ms < 0:
            raise ValueError("elapsed_ms must be >= 0.")
        self._accumulated += elapsed_ms
        steps = int(self._accumulated // self.interval_ms)
        self._accumulated -= steps * self.interval_ms
        return steps

    def reset(self) -> None:
        self._accumulated = 0.0


async def run_session(
    session: GameSession,
    interval_ms: float | None = None,
    *,
    on_tick: Callable[[TickResult], None] | None = None,
    max_ticks: int | None = None,
) -> TickResult:
    """Tick *session* every *interval_ms* until the game ends.

    The session must already be started. While paused the loop keeps
    sleeping without advancing. Stops early after *max_ticks* calls to
    :meth:`GameSession.tick` if given. Returns the last result.
    """
    interval = (
        interval_ms if interval_ms is not None
        else session.config.tick_interval_ms
    ) / 1000.0
    result = session.snapshot()
    if session.phase is Phase.IDLE:
        logger.warning("Tick loop requested for a session that was never started.")
        return result
    calls = 0
    while not session.phase.terminal:
        if max_ticks is not None and calls >= max_ticks:
            break
        await asyncio.sleep(interval)
        result = session.tick()
        calls += 1
        if on_tick is not None:
            on_tick(result)
    logger.debug(
        "Tick loop stopped in phase %s after %d calls.",
        session.phase.value, calls,
    )
    return result
