"""
Input validation utilities.

Validation runs before a request is built so that requests the exchange is
guaranteed to reject are never signed or sent.
"""

from .constants import MOVEMENTS_MAX_LIMIT, ValidationError


def validate_non_empty_string(value: str, name: str) -> None:
    """Validate that a string is not empty."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} cannot be empty")


def validate_limit(limit: int, max_limit: int = MOVEMENTS_MAX_LIMIT) -> None:
    """
    Validate a history page size against the exchange ceiling.

    Args:
        limit: Requested number of records
        max_limit: Largest value the endpoint accepts

    Raises:
        ValidationError: If limit exceeds max_limit
    """
    if limit > max_limit:
        raise ValidationError(f"Max request limit: {max_limit}, got: {limit}")


def validate_timestamp(value: int, name: str) -> None:
    """Validate a millisecond timestamp filter."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer millisecond timestamp, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must not be negative, got {value}")
