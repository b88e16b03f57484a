"""Philosopher threads and the monitor that ends the dinner."""

from __future__ import annotations

import threading
import time

from .display import State
from .parsing import UNLIMITED_MEALS
from .table import Philosopher, Table
from .timing import current_time

_MONITOR_POLL_SECONDS = 0.00036


def _eat(philosopher: Philosopher) -> None:
    table = philosopher.table
    first, second = philosopher.forks
    with table.forks[first]:
        table.log(philosopher, State.LEFT_FORK)
        with table.forks[second]:
            table.log(philosopher, State.RIGHT_FORK)
            table.log(philosopher, State.EATING)
            philosopher.record_meal_time(current_time())
            table.sleep(table.settings.time_to_eat)
            if not table.finished():
                philosopher.add_meal()


def _think(philosopher: Philosopher, announce: bool) -> None:
    duration = philosopher.thinking_time()
    if announce:
        philosopher.table.log(philosopher, State.THINKING)
    philosopher.table.sleep(duration)


def _sleep(philosopher: Philosopher) -> None:
    table = philosopher.table
    table.log(philosopher, State.SLEEPING)
    table.sleep(table.settings.time_to_sleep)


def _dine_alone(philosopher: Philosopher) -> None:
    table = philosopher.table
    table.log(philosopher, State.LEFT_FORK)
    table.sleep(table.settings.time_to_die)
    table.log(philosopher, State.DEAD)


def run_philosopher(philosopher: Philosopher) -> None:
    """Eat, sleep and think until the dinner ends."""
    table = philosopher.table
    if table.settings.time_must_eat == 0:
        return
    philosopher.record_meal_time(table.start)
    if table.settings.nbr_philo == 1:
        _dine_alone(philosopher)
        return
    if philosopher.id % 2 != 0:
        _think(philosopher, announce=False)
    while not table.finished():
        _eat(philosopher)
        _sleep(philosopher)
        _think(philosopher, announce=True)


def check_end(table: Table) -> bool:
    """Report a starved philosopher or a satisfied table; True ends the dinner."""
    must_eat = table.settings.time_must_eat
    everyone_fed = True
    for philosopher in table.philosophers:
        with philosopher.meal_lock:
            if current_time() - philosopher.last_meal >= table.settings.time_to_die:
                table.log(philosopher, State.DEAD)
                table.set_finished(True)
                return True
            if must_eat != UNLIMITED_MEALS and philosopher.meals_done < must_eat:
                everyone_fed = False
    if must_eat != UNLIMITED_MEALS and everyone_fed:
        table.set_finished(True)
        return True
    return False


def monitor(table: Table) -> None:
    """Watch the table until someone dies or everyone has eaten enough."""
    if table.settings.time_must_eat == 0:
        return
    table.set_finished(False)
    while not check_end(table):
        time.sleep(_MONITOR_POLL_SECONDS)


def run_simulation(table: Table) -> Table:
    """Run one dinner to its end and return the table."""
    # Set the first meal time up front so the monitor never sees a stale value.
    for philosopher in table.philosophers:
        philosopher.record_meal_time(table.start)
    threads = [
        threading.Thread(target=run_philosopher, args=(philosopher,), daemon=True)
        for philosopher in table.philosophers
    ]
    if table.settings.nbr_philo > 1:
        threads.append(threading.Thread(target=monitor, args=(table,), daemon=True))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return table