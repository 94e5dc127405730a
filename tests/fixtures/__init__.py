"""
Test fixtures package for the wallet kit.

Provides raw Bitfinex payloads shared across unit, integration and property
tests.
"""

from .api_responses import (
    API_ERROR_PAYLOAD,
    API_NONCE_ERROR_PAYLOAD,
    DEPOSIT_ADDRESS_NOTIFICATION,
    MOVEMENT_ALL_NULL,
    MOVEMENT_SCENARIO,
    MOVEMENT_WITHDRAWAL,
    MOVEMENTS_RESPONSE,
    TRANSFER_NOTIFICATION,
    WALLET_EMPTY_EXCHANGE_ETH,
    WALLET_EXCHANGE_BTC,
    WALLET_FUNDING_UST,
    WALLET_MARGIN_USD,
    WALLETS_RESPONSE,
    WITHDRAWAL_ERROR_NOTIFICATION,
    WITHDRAWAL_NOTIFICATION,
)

__all__ = [
    "API_ERROR_PAYLOAD",
    "API_NONCE_ERROR_PAYLOAD",
    "DEPOSIT_ADDRESS_NOTIFICATION",
    "MOVEMENTS_RESPONSE",
    "MOVEMENT_ALL_NULL",
    "MOVEMENT_SCENARIO",
    "MOVEMENT_WITHDRAWAL",
    "TRANSFER_NOTIFICATION",
    "WALLETS_RESPONSE",
    "WALLET_EMPTY_EXCHANGE_ETH",
    "WALLET_EXCHANGE_BTC",
    "WALLET_FUNDING_UST",
    "WALLET_MARGIN_USD",
    "WITHDRAWAL_ERROR_NOTIFICATION",
    "WITHDRAWAL_NOTIFICATION",
]
