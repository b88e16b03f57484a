import pytest

from philosophers.display import State, format_status, status_message


@pytest.mark.parametrize(
    "state, expected",
    [
        (State.EATING, "is eating"),
        (State.LEFT_FORK, "has taken a fork"),
        (State.RIGHT_FORK, "has taken a fork"),
        (State.SLEEPING, "is sleeping"),
        (State.THINKING, "is thinking"),
        (State.DEAD, "died"),
        (State.END_DINING, ""),
    ],
)
def test_status_message(state, expected):
    assert status_message(state) == expected


def test_both_forks_share_message():
    assert status_message(State.LEFT_FORK) == status_message(State.RIGHT_FORK)


def test_format_status_eating():
    assert format_status(12, 3, State.EATING) == "12 3 is eating"


def test_format_status_dead():
    assert format_status(410, 1, State.DEAD) == "410 1 died"


def test_format_status_starts_with_timestamp():
    line = format_status(0, 5, State.THINKING)
    assert line.split(" ", 2) == ["0", "5", "is thinking"]