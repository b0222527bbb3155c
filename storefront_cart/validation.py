"""Validation helpers for command handler precondition checks."""

from decimal import Decimal

from .errors import CommandRejectedError


def require_id(value, error_msg: str) -> None:
    """Require an identifier that is not None, an empty string or a boolean.

    True and False would otherwise share a line item with 1 and 0.
    """
    if value is None or value == "" or isinstance(value, bool):
        raise CommandRejectedError(error_msg)


def require_non_negative(value: Decimal, error_msg: str) -> None:
    """Require that a value is zero or greater."""
    if value < 0:
        raise CommandRejectedError(error_msg)


def require_int(value, error_msg: str) -> None:
    """Require a plain integer; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise CommandRejectedError(error_msg)
