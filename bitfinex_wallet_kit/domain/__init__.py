"""
Domain records for the Bitfinex wallet surface.

All records are immutable and are created fresh from each API response.
"""

from .amount import Amount
from .movement import MOVEMENT_FIELD_COUNT, MOVEMENT_FIELDS, MovementRecord
from .notification import DepositAddressInfo, Notification, TransferInfo, WithdrawalInfo
from .wallet import Wallet, WalletSnapshot

__all__ = [
    "MOVEMENT_FIELDS",
    "MOVEMENT_FIELD_COUNT",
    "Amount",
    "DepositAddressInfo",
    "MovementRecord",
    "Notification",
    "TransferInfo",
    "Wallet",
    "WalletSnapshot",
    "WithdrawalInfo",
]
