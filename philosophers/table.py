"""The dining table: philosophers, forks and the shared end flag."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import TextIO

from .display import State, format_status
from .parsing import Settings, validate_settings
from .timing import current_time, elapsed_ms
from .timing import thinking_time as _thinking_time

_POLL_SECONDS = 0.0001


def assign_forks(philosopher_id: int, count: int) -> tuple[int, int | None]:
    """Return the fork indices a philosopher takes first and second.

    Odd philosophers reach for their right fork first so that neighbours
    do not all grab the same side. A lone philosopher has only one fork.
    """
    if count <= 1:
        return (philosopher_id, None)
    right = (philosopher_id + 1) % count
    if philosopher_id % 2 != 0:
        return (right, philosopher_id)
    return (philosopher_id, right)


@dataclass(eq=False)
class Philosopher:
    """One diner; meal data is guarded by ``meal_lock``."""

    id: int
    table: Table = field(repr=False)
    forks: tuple[int, int | None] = (0, None)
    meals_done: int = 0
    last_meal: int = 0
    meal_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def record_meal_time(self, time: int) -> None:
        """Store when the philosopher last started eating."""
        with self.meal_lock:
            self.last_meal = time

    def add_meal(self) -> None:
        """Count one more finished meal."""
        with self.meal_lock:
            self.meals_done += 1

    def thinking_time(self) -> int:
        """Milliseconds to think before reaching for the forks again."""
        settings = self.table.settings
        with self.meal_lock:
            since = current_time() - self.last_meal
        return _thinking_time(settings.time_to_die, settings.time_to_eat, since)


class Table:
    """Shared state of one dinner."""

    def __init__(self, settings: Settings, output: TextIO | None = None) -> None:
        self.settings = settings
        self.output = output
        self.start = current_time()
        self.forks = [threading.Lock() for _ in range(settings.nbr_philo)]
        self.philosophers = [
            Philosopher(i, self, assign_forks(i, settings.nbr_philo))
            for i in range(settings.nbr_philo)
        ]
        self.end_lock = threading.Lock()
        self.log_lock = threading.Lock()
        self._finished = False

    def finished(self) -> bool:
        """Return True once the dinner has ended."""
        with self.end_lock:
            return self._finished

    def set_finished(self, value: bool) -> None:
        """Set whether the dinner has ended."""
        with self.end_lock:
            self._finished = value

    def log(self, philosopher: Philosopher, state: State) -> str | None:
        """Print a status line unless the dinner is over; return the line."""
        if self.finished():
            return None
        with self.log_lock:
            line = format_status(elapsed_ms(self.start), philosopher.id + 1, state)
            print(line, file=self.output if self.output is not None else sys.stdout)
        return line

    def sleep(self, duration: int) -> None:
        """Wait ``duration`` milliseconds, returning early if the dinner ends."""
        wake_up = current_time() + duration
        while current_time() < wake_up:
            if self.finished():
                break
            time.sleep(_POLL_SECONDS)


def build_table(settings: Settings) -> Table:
    """Validate the settings and lay the table for them."""
    validate_settings(settings)
    return Table(settings)