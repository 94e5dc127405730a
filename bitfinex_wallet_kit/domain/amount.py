"""
Amount value object for wallet operations.

Amounts travel to Bitfinex as plain decimal strings so that the value the
caller typed is the value the exchange receives.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ..utilities.constants import ValidationError


@dataclass(frozen=True)
class Amount:
    """
    Immutable positive amount with exact wire formatting.

    Floats are converted through their shortest repr, so 0.00000001 becomes
    Decimal("1E-8") and is sent as "0.00000001" rather than "1e-08".
    """

    value: Decimal

    def __post_init__(self):
        """Validate amount after initialization."""
        if not isinstance(self.value, Decimal):
            raise ValidationError(f"Amount value must be a Decimal, got: {type(self.value)}")
        if not self.value.is_finite():
            raise ValidationError(f"Amount must be finite, got: {self.value}")
        if self.value <= 0:
            raise ValidationError(f"Amount must be positive, got: {self.value}")

    @classmethod
    def from_value(cls, amount: "Amount | Decimal | float | int | str") -> "Amount":
        """Create Amount from any supported numeric representation."""
        if isinstance(amount, Amount):
            return amount
        if isinstance(amount, Decimal):
            return cls(amount)
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid amount: {amount!r}")
        if isinstance(amount, float):
            value = Decimal(repr(amount))
            if value.is_finite() and amount.is_integer():
                value = value.to_integral_value()
            return cls(value)
        if isinstance(amount, int):
            return cls(Decimal(amount))
        if isinstance(amount, str):
            return cls.from_string(amount)
        raise ValidationError(f"Invalid amount type: {type(amount)}")

    @classmethod
    def from_string(cls, amount: str) -> "Amount":
        """Create Amount from string value."""
        try:
            decimal_amount = Decimal(amount.strip())
        except (InvalidOperation, AttributeError) as e:
            raise ValidationError(f"Invalid amount format: {amount!r}") from e
        return cls(decimal_amount)

    def format_api(self) -> str:
        """Format amount for API submission, never in exponent notation."""
        return format(self.value, "f")

    def __str__(self) -> str:
        """String representation."""
        return self.format_api()
