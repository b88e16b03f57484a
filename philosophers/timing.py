"""Wall-clock helpers in milliseconds."""

from __future__ import annotations

import time

LONG_THINK_MS = 200
SHORT_THINK_MS = 1
_THINK_THRESHOLD_MS = 500


def current_time() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def elapsed_ms(start: int) -> int:
    """Return the milliseconds passed since ``start``."""
    return current_time() - start


def thinking_time(time_to_die: int, time_to_eat: int, since_last_meal: int) -> int:
    """Pick how long a philosopher thinks given its remaining margin."""
    margin = time_to_die - since_last_meal - time_to_eat
    half = margin // 2 if margin >= 0 else -((-margin) // 2)
    return LONG_THINK_MS if half > _THINK_THRESHOLD_MS else SHORT_THINK_MS