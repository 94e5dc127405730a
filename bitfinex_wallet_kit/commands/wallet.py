"""
Wallet command - Show wallet balances.
"""

from rich.markup import escape
from rich.table import Table

from ..domain.wallet import WalletSnapshot
from ..services.wallet_service import WalletService
from ..utilities.console import console, print_info
from ..utilities.formatters import format_amount


def build_wallet_table(snapshot: WalletSnapshot, show_all: bool = False) -> Table:
    """Render wallets as a table, hiding empty balances unless show_all."""
    table = Table(title="💰 Wallet Balances")
    table.add_column("Type")
    table.add_column("Currency")
    table.add_column("Balance", justify="right")
    table.add_column("Available", justify="right")
    table.add_column("Unsettled Interest", justify="right")

    wallets = snapshot.wallets if show_all else snapshot.non_zero()
    for wallet in wallets:
        table.add_row(
            escape(wallet.wallet_type),
            escape(wallet.currency),
            format_amount(wallet.balance),
            format_amount(wallet.available_balance),
            format_amount(wallet.unsettled_interest),
        )
    return table


def wallet_command(service: WalletService, show_all: bool = False) -> WalletSnapshot:
    """Get and display wallet balances"""
    snapshot = service.get_wallets()

    if not snapshot.wallets:
        print_info("No wallets found")
        return snapshot

    console.print(build_wallet_table(snapshot, show_all=show_all))
    return snapshot
