"""Command-line argument validation and parsing for the dining table."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

INT_MAX = 2147483647
MAX_PHILOSOPHERS = 200
MAX_DIGITS = 10

USAGE = (
    "Wrong Arguments\n"
    "Expected : ./philo nb_philo ttdie tteat ttsleep (max_meals)"
)

_SPACE = " \t\n\v\f\r"
_DIGIT_RUN = re.compile(r"[0-9]+")


class ArgumentError(ValueError):
    """Raised when the command-line arguments cannot be used."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation; times are in milliseconds."""

    count: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    max_meals: int = -1

    def __post_init__(self) -> None:
        if (
            self.count < 0
            or self.count > MAX_PHILOSOPHERS
            or self.time_to_die < 0
            or self.time_to_eat < 0
            or self.time_to_sleep < 0
        ):
            raise ArgumentError(
                f"Arguments must be > 0 and <= {MAX_PHILOSOPHERS} philosophers"
            )

    @property
    def meals_limited(self) -> bool:
        """True when the simulation stops once everyone has eaten enough."""
        return self.max_meals > 0


def valid_input(text: str) -> str:
    """Check that *text* is a non-negative integer and return its digits.

    Surrounding whitespace and a leading '+' are accepted.
    """
    rest = text.lstrip(_SPACE)
    if rest.startswith("+"):
        rest = rest[1:]
    elif rest.startswith("-"):
        raise ArgumentError("The number must be positive")
    match = _DIGIT_RUN.match(rest)
    if match is None:
        raise ArgumentError("Only digit characters are accepted")
    digits = match.group()
    tail = rest[len(digits):]
    # One ASCII character directly after the digits is swallowed by the scan.
    if tail and ":" <= tail[0] <= "\x7f":
        tail = tail[1:]
    if tail.lstrip(_SPACE):
        raise ArgumentError("Only digit characters are accepted")
    if len(digits) > MAX_DIGITS:
        raise ArgumentError("The number is bigger than INT_MAX")
    return digits


def parse_long(text: str) -> int:
    """Parse *text* as a non-negative integer no larger than INT_MAX."""
    value = int(valid_input(text))
    if value > INT_MAX:
        raise ArgumentError("The number is not an integer")
    return value


def check_args(argv: Sequence[str]) -> None:
    """Validate the arguments that follow the program name."""
    if len(argv) not in (4, 5):
        raise ArgumentError(USAGE)
    for arg in argv:
        if not arg:
            raise ArgumentError("Empty argument")
        valid_input(arg)


def parse_settings(argv: Sequence[str]) -> Settings:
    """Validate the arguments that follow the program name and build Settings."""
    check_args(argv)
    count, die, eat, sleep, *meals = (parse_long(arg) for arg in argv)
    return Settings(
        count=count,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        max_meals=meals[0] if meals else -1,
    )