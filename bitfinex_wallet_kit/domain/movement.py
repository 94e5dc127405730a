"""
Movement (deposit / withdrawal history) records.

Bitfinex returns movements as fixed 22-slot arrays. Only the slots listed in
MOVEMENT_FIELDS carry data; the rest are placeholders and are ignored.
"""

from dataclasses import dataclass

MOVEMENT_FIELD_COUNT = 22

MOVEMENT_FIELDS: dict[str, int] = {
    "id": 0,
    "currency": 1,
    "currency_name": 2,
    "mts_started": 5,
    "mts_updated": 6,
    "status": 9,
    "amount": 12,
    "fees": 13,
    "destination_address": 16,
    "transaction_id": 20,
    "withdraw_transaction_note": 21,
}


@dataclass(frozen=True)
class MovementRecord:
    """One deposit or withdrawal entry."""

    id: int
    currency: str
    currency_name: str
    mts_started: int
    mts_updated: int
    status: str
    amount: float
    fees: float
    destination_address: str
    transaction_id: str
    withdraw_transaction_note: str

    @property
    def is_deposit(self) -> bool:
        """Deposits have a positive amount, withdrawals a negative one."""
        return self.amount > 0
