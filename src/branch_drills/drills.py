"""Conditional drills, each written once as if/else and once as a conditional expression.

Both variants of a drill must return the same message for the same value.
"""

import logging
from typing import Any, Callable, Iterable, List, NamedTuple

from .core import (
    is_eligible_to_vote,
    is_even,
    is_logged_in,
    is_negative,
    is_strong_password,
)

logger = logging.getLogger(__name__)


class UnknownDrillError(KeyError):
    """Raised when a drill name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"unknown drill: {self.name!r}"


def age_branching(age: int) -> str:
    if is_eligible_to_vote(age):
        message = "You are eligible to vote"
    else:
        message = "You are not eligible to vote"
    return message


def age_conditional(age: int) -> str:
    return "You are eligible to vote" if is_eligible_to_vote(age) else "You are not eligible to vote"


def number_branching(number: int) -> str:
    if is_negative(number):
        message = "Negative"
    else:
        message = "Positive"
    return message


def number_conditional(number: int) -> str:
    return "Negative" if is_negative(number) else "Positive"


def password_branching(password: str) -> str:
    if is_strong_password(password):
        message = "Strong password"
    else:
        message = "Password too short"
    return message


def password_conditional(password: str) -> str:
    return "Strong password" if is_strong_password(password) else "Password too short"


def even_odd_branching(num: int) -> str:
    if is_even(num):
        message = "Even"
    else:
        message = "Odd"
    return message


def even_odd_conditional(num: int) -> str:
    return "Even" if is_even(num) else "Odd"


def login_branching(is_logged_in_flag: bool) -> str:
    if is_logged_in(is_logged_in_flag):
        message = "Welcome back"
    else:
        message = "Please log in"
    return message


def login_conditional(is_logged_in_flag: bool) -> str:
    return "Welcome back" if is_logged_in(is_logged_in_flag) else "Please log in"


class Drill(NamedTuple):
    name: str
    title: str
    value: Any
    branching: Callable[[Any], str]
    conditional: Callable[[Any], str]


DRILLS = (
    Drill("age", "Age Check", 20, age_branching, age_conditional),
    Drill("number", "Number Sign", -5, number_branching, number_conditional),
    Drill("password", "Password Length", "myPassword123", password_branching, password_conditional),
    Drill("even-odd", "Even or Odd", 10, even_odd_branching, even_odd_conditional),
    Drill("login", "Login Status", True, login_branching, login_conditional),
)


def get_drill(name: str) -> Drill:
    """Look up a registered drill by name."""
    for drill in DRILLS:
        if drill.name == name:
            return drill
    raise UnknownDrillError(name)


def run_drills(
    drills: Iterable[Drill] = DRILLS,
    write: Callable[[str], Any] = print,
) -> List[str]:
    """Write both variants of every drill, adjacent, and return the lines written."""
    lines = []
    for drill in drills:
        for style, solve in (("branching", drill.branching), ("conditional", drill.conditional)):
            message = solve(drill.value)
            logger.debug("%s (%s) [%s]: %r -> %s", drill.name, style, drill.title, drill.value, message)
            write(message)
            lines.append(message)
    return lines
