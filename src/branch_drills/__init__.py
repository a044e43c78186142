"""Conditional-logic drills: five predicates, each solved with if/else and a conditional expression."""

from .core import (
    MIN_PASSWORD_LENGTH,
    VOTING_AGE,
    is_eligible_to_vote,
    is_even,
    is_logged_in,
    is_negative,
    is_strong_password,
)
from .drills import DRILLS, Drill, UnknownDrillError, get_drill, run_drills

__all__ = [
    "DRILLS",
    "Drill",
    "MIN_PASSWORD_LENGTH",
    "UnknownDrillError",
    "VOTING_AGE",
    "get_drill",
    "is_eligible_to_vote",
    "is_even",
    "is_logged_in",
    "is_negative",
    "is_strong_password",
    "run_drills",
]
