"""
Constants, enums and exception types shared across the wallet kit.

Keeps wire-level names (endpoints, header names, notification types) and the
exception hierarchy in one place so the request builder, the executor and the
decoder agree on them.
"""

from enum import Enum

from bfxapi import REST_HOST  # type: ignore

# Connection defaults
DEFAULT_REST_HOST = REST_HOST
DEFAULT_TIMEOUT = 30.0

# Bitfinex signs the path as seen by the API gateway, not the public host path
SIGNATURE_PATH_PREFIX = "/api/v2/"

# Authentication headers
HEADER_NONCE = "bfx-nonce"
HEADER_API_KEY = "bfx-apikey"
HEADER_SIGNATURE = "bfx-signature"

# Endpoints (relative to auth/{permission}/)
ENDPOINT_WALLETS = "wallets"
ENDPOINT_TRANSFER = "transfer"
ENDPOINT_DEPOSIT_ADDRESS = "deposit/address"
ENDPOINT_WITHDRAW = "withdraw"
ENDPOINT_MOVEMENTS = "movements/hist"
ENDPOINT_CURRENCY_MOVEMENTS = "movements/{currency}/hist"

# Movement history
MOVEMENTS_MAX_LIMIT = 1000

# Deposit address operation flags
DEPOSIT_ADDRESS_EXISTING = 0
DEPOSIT_ADDRESS_RENEW = 1

# Notification types carrying wallet payloads
NOTIFICATION_TRANSFER = "acc_tf"
NOTIFICATION_DEPOSIT_ADDRESS = "acc_dep"
NOTIFICATION_WITHDRAWAL = "acc_wd-req"

# Display
AMOUNT_PRECISION = 8

# Console
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️"
EMOJI_INFO = "ℹ️"


class Permission(Enum):
    """Permission scope of an authenticated endpoint."""

    READ = "r"
    WRITE = "w"


class WalletKitError(Exception):
    """Base exception for all wallet kit errors."""


class RequestConstructionError(WalletKitError):
    """Raised when an authenticated request cannot be built (e.g. missing credentials)."""


class ValidationError(WalletKitError, ValueError):
    """Raised when caller input is rejected locally, before any network call."""


class TransportError(WalletKitError):
    """Raised when the request could not be completed at the network layer."""


class APIError(TransportError):
    """Raised when Bitfinex answers with an error payload."""

    def __init__(self, code: int, text: str, status_code: int | None = None):
        self.code = code
        self.text = text
        self.status_code = status_code
        super().__init__(f"Bitfinex API error {code}: {text}")


class DecodeError(WalletKitError, ValueError):
    """Raised when a successful response does not have the expected shape."""
