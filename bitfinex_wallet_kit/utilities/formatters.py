"""
Formatting utilities for displaying amounts, timestamps and wire values.
"""

from datetime import datetime

from ..domain.amount import Amount
from .constants import AMOUNT_PRECISION


def format_wire_amount(amount: Amount | float | int | str) -> str:
    """Format an amount for a request body as a full-precision decimal string."""
    return Amount.from_value(amount).format_api()


def format_amount(amount: float | str) -> str:
    """Format amount for display."""
    try:
        amount_float = float(amount)
        return f"{amount_float:.{AMOUNT_PRECISION}f}"
    except (ValueError, TypeError):
        return str(amount)


def format_timestamp(timestamp: int | float | None) -> str:
    """Format timestamp to readable date."""
    if not timestamp:
        return "Unknown"

    try:
        # Convert from milliseconds to seconds if needed
        if timestamp > 1e12:
            timestamp = timestamp / 1000

        return datetime.fromtimestamp(timestamp).strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, OSError, OverflowError):
        return "Invalid Date"
