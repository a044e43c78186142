"""Core predicate helpers."""

VOTING_AGE = 18
MIN_PASSWORD_LENGTH = 8


def is_eligible_to_vote(age: int) -> bool:
    """Return True when age is strictly above the voting age."""
    return age > VOTING_AGE


def is_negative(number: int) -> bool:
    """Return True when number is below zero. Zero counts as positive."""
    return number < 0


def is_strong_password(password: str) -> bool:
    """Return True when password has at least MIN_PASSWORD_LENGTH characters."""
    return len(password) >= MIN_PASSWORD_LENGTH


def is_even(num: int) -> bool:
    return num % 2 == 0


def is_logged_in(flag: bool) -> bool:
    return bool(flag)
