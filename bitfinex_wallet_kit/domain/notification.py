"""
Notification records returned by write endpoints.

Bitfinex acknowledges every write (transfer, deposit address, withdrawal) with
a notification array. The notify-info slot echoes the operation; for the three
wallet operations it is decoded into a typed record.
"""

from dataclasses import dataclass
from typing import Any

NOTIFICATION_FIELDS: dict[str, int] = {
    "mts": 0,
    "type": 1,
    "message_id": 2,
    "notify_info": 4,
    "code": 5,
    "status": 6,
    "text": 7,
}

NOTIFICATION_MIN_FIELDS = NOTIFICATION_FIELDS["text"] + 1

TRANSFER_FIELDS: dict[str, int] = {
    "mts_updated": 0,
    "wallet_from": 1,
    "wallet_to": 2,
    "currency": 4,
    "currency_to": 5,
    "amount": 7,
}

DEPOSIT_ADDRESS_FIELDS: dict[str, int] = {
    "method": 1,
    "currency_code": 2,
    "address": 4,
    "pool_address": 5,
}

WITHDRAWAL_FIELDS: dict[str, int] = {
    "withdrawal_id": 0,
    "method": 2,
    "payment_id": 3,
    "wallet": 4,
    "amount": 5,
    "withdrawal_fee": 8,
}


@dataclass(frozen=True)
class TransferInfo:
    """Echo of a transfer between wallets."""

    mts_updated: int
    wallet_from: str
    wallet_to: str
    currency: str
    currency_to: str
    amount: float


@dataclass(frozen=True)
class DepositAddressInfo:
    """Deposit address returned for a wallet and method."""

    method: str
    currency_code: str
    address: str
    pool_address: str


@dataclass(frozen=True)
class WithdrawalInfo:
    """Echo of a submitted withdrawal request."""

    withdrawal_id: int
    method: str
    payment_id: str
    wallet: str
    amount: float
    withdrawal_fee: float


@dataclass(frozen=True)
class Notification:
    """Acknowledgement of a write operation."""

    mts: int
    type: str
    message_id: int
    notify_info: Any
    code: int
    status: str
    text: str

    @property
    def is_success(self) -> bool:
        """True when Bitfinex reported SUCCESS for the operation."""
        return self.status == "SUCCESS"
