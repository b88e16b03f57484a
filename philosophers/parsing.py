"""Command-line argument checks and simulation settings."""

from __future__ import annotations

from dataclasses import dataclass

MAX_PHILOSOPHERS = 200
MIN_DURATION_MS = 60
UNLIMITED_MEALS = -1

_SPACES = " \t\n\r\v\f"
_DIGITS = "0123456789"
_WORD = 1 << 64


class ArgumentError(ValueError):
    """Raised when the program arguments or settings are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one dinner, times in milliseconds."""

    nbr_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    time_must_eat: int = UNLIMITED_MEALS


def parse_number(text: str) -> int:
    """Read a leading signed decimal number, ignoring leading blanks.

    Parsing stops at the first non-digit. The result wraps like a
    64-bit signed integer, so out-of-range input can come back negative.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = (value * 10 + ord(char) - ord("0")) % _WORD
    value = (value * sign) % _WORD
    return value - _WORD if value >= _WORD // 2 else value


def is_only_digits(text: str) -> bool:
    """Return True when every character of ``text`` is an ASCII digit."""
    return all(char in _DIGITS for char in text)


def check_args(args: list[str]) -> list[int]:
    """Check the raw arguments (program name excluded) and return their values."""
    if len(args) not in (4, 5):
        raise ArgumentError("Error: check arguments!")
    values = []
    for arg in args:
        if not is_only_digits(arg):
            raise ArgumentError(f"Invalid input in [{arg}]. Only digit accepted.")
        value = parse_number(arg)
        if value < 0:
            raise ArgumentError(f"Invalid input in [{value}]. Negative or so long.")
        values.append(value)
    return values


def parse_settings(args: list[str]) -> Settings:
    """Build validated settings from the arguments (program name excluded)."""
    if len(args) not in (4, 5):
        raise ArgumentError("Error: check arguments!")
    numbers = [parse_number(arg) for arg in args]
    settings = Settings(*numbers[:4])
    if len(numbers) == 5:
        settings = Settings(*numbers)
    return validate_settings(settings)


def validate_settings(settings: Settings) -> Settings:
    """Raise ArgumentError unless the settings describe a playable dinner."""
    if settings.nbr_philo > MAX_PHILOSOPHERS or settings.nbr_philo == 0:
        raise ArgumentError("Error: invalid input")
    if min(settings.time_to_die, settings.time_to_eat, settings.time_to_sleep) < MIN_DURATION_MS:
        raise ArgumentError("Error: wrong input, NOTE: IT MUST BE GREATER THAN 60")
    return settings