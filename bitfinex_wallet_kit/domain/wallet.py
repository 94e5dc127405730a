"""
Wallet records decoded from the auth/r/wallets endpoint.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

# Wire positions of wallet fields
WALLET_FIELDS: dict[str, int] = {
    "wallet_type": 0,
    "currency": 1,
    "balance": 2,
    "unsettled_interest": 3,
    "available_balance": 4,
    "last_change": 5,
    "trade_details": 6,
}

# Slots up to and including available_balance are mandatory
WALLET_MIN_FIELDS = WALLET_FIELDS["available_balance"] + 1


@dataclass(frozen=True)
class Wallet:
    """Balance of one currency in one wallet (exchange, margin or funding)."""

    wallet_type: str
    currency: str
    balance: float
    unsettled_interest: float
    available_balance: float
    last_change: str = ""
    trade_details: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class WalletSnapshot:
    """
    Point-in-time view of every wallet on the account.

    Wallets keep the order in which Bitfinex returned them.
    """

    wallets: tuple[Wallet, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Wallet]:
        return iter(self.wallets)

    def __len__(self) -> int:
        return len(self.wallets)

    def get(self, wallet_type: str, currency: str) -> Wallet | None:
        """Find the wallet for a wallet type and currency, if present."""
        for wallet in self.wallets:
            if wallet.wallet_type == wallet_type and wallet.currency == currency:
                return wallet
        return None

    def non_zero(self) -> list[Wallet]:
        """Wallets with a non-zero total or available balance."""
        return [w for w in self.wallets if w.balance != 0 or w.available_balance != 0]
