"""
Bitfinex Wallet Kit - typed client for the Bitfinex v2 authenticated wallet API.

This package provides:
- Signed, permission-scoped request construction
- Decoding of positional array responses into immutable records
- Wallet balances, transfers, deposit addresses, withdrawals and movement history
- A small CLI for the same operations
"""

__version__ = "1.0.0"
__description__ = "Typed client for the Bitfinex v2 authenticated wallet API"

from .config import WalletKitConfig, load_config
from .core import AuthenticatedRequest, BitfinexRequestFactory, RequestsExecutor
from .domain import (
    Amount,
    DepositAddressInfo,
    MovementRecord,
    Notification,
    TransferInfo,
    Wallet,
    WalletSnapshot,
    WithdrawalInfo,
)
from .services import MovementQuery, WalletService
from .utilities.auth import create_wallet_service
from .utilities.constants import (
    APIError,
    DecodeError,
    Permission,
    RequestConstructionError,
    TransportError,
    ValidationError,
    WalletKitError,
)

__all__ = [
    "APIError",
    "Amount",
    "AuthenticatedRequest",
    "BitfinexRequestFactory",
    "DecodeError",
    "DepositAddressInfo",
    "MovementQuery",
    "MovementRecord",
    "Notification",
    "Permission",
    "RequestConstructionError",
    "RequestsExecutor",
    "TransferInfo",
    "TransportError",
    "ValidationError",
    "Wallet",
    "WalletKitConfig",
    "WalletKitError",
    "WalletService",
    "WalletSnapshot",
    "WithdrawalInfo",
    "create_wallet_service",
    "load_config",
]
