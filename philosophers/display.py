"""Philosopher states and the log lines that report them."""

from __future__ import annotations

from enum import Enum, auto


class State(Enum):
    """Things a philosopher can report."""

    EATING = auto()
    SLEEPING = auto()
    THINKING = auto()
    DEAD = auto()
    LEFT_FORK = auto()
    RIGHT_FORK = auto()
    END_DINING = auto()


_MESSAGES = {
    State.EATING: "is eating",
    State.LEFT_FORK: "has taken a fork",
    State.RIGHT_FORK: "has taken a fork",
    State.SLEEPING: "is sleeping",
    State.THINKING: "is thinking",
    State.DEAD: "died",
}


def status_message(state: State) -> str:
    """Return the text printed for ``state``; empty for states not reported."""
    return _MESSAGES.get(state, "")


def format_status(timestamp: int, philosopher_id: int, state: State) -> str:
    """Build one log line: time, displayed philosopher number, message."""
    return f"{timestamp} {philosopher_id} {status_message(state)}"