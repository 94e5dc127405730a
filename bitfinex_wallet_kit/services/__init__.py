"""
Service layer exposing the wallet operations.
"""

from .wallet_service import MovementQuery, WalletService

__all__ = ["MovementQuery", "WalletService"]
