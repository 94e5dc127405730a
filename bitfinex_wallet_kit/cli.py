"""
Command-line interface for the Bitfinex wallet kit.

Argument parsing is kept in CLIArgumentParser; main() routes the parsed
command to its command module and turns wallet kit errors into exit codes.
"""

import argparse
import logging
from collections.abc import Callable

from .commands import (
    deposit_address_command,
    movements_command,
    transfer_command,
    wallet_command,
    withdraw_command,
)
from .services.wallet_service import WalletService
from .utilities.auth import create_wallet_service
from .utilities.console import print_error
from .utilities.constants import MOVEMENTS_MAX_LIMIT, WalletKitError

logger = logging.getLogger(__name__)


class CLIArgumentParser:
    """Argument parser for the wallet CLI subcommands."""

    def __init__(self):
        """Initialize the argument parser."""
        self.parser = argparse.ArgumentParser(
            prog="bitfinex-wallet",
            description="Bitfinex wallet CLI: balances, transfers, deposits, withdrawals",
        )
        self.parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )
        self.subparsers = self.parser.add_subparsers(dest="command", help="Available commands")
        self._setup_read_commands()
        self._setup_write_commands()

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def _setup_read_commands(self) -> None:
        """Set up read-only command parsers (wallet, movements)."""
        parser_wallet = self.subparsers.add_parser("wallet", help="Show wallet balances")
        parser_wallet.add_argument(
            "--all", dest="show_all", action="store_true", help="Include empty wallets"
        )

        parser_movements = self.subparsers.add_parser(
            "movements", help="Show deposit and withdrawal history"
        )
        parser_movements.add_argument("--currency", help="Only show this currency (e.g. BTC)")
        parser_movements.add_argument("--start", type=int, help="Start time in milliseconds")
        parser_movements.add_argument("--end", type=int, help="End time in milliseconds")
        parser_movements.add_argument(
            "--limit", type=int, help=f"Maximum number of records (<= {MOVEMENTS_MAX_LIMIT})"
        )

    def _setup_write_commands(self) -> None:
        """Set up state-changing command parsers (deposit-address, transfer, withdraw)."""
        parser_deposit = self.subparsers.add_parser(
            "deposit-address", help="Show or create a deposit address"
        )
        parser_deposit.add_argument("wallet", help="Wallet type (exchange, margin, funding)")
        parser_deposit.add_argument("method", help="Deposit method (e.g. bitcoin, ethereum)")
        parser_deposit.add_argument(
            "--new", action="store_true", help="Generate a new address instead of the current one"
        )

        parser_transfer = self.subparsers.add_parser(
            "transfer", help="Transfer funds between wallets"
        )
        parser_transfer.add_argument("from_wallet", help="Source wallet type")
        parser_transfer.add_argument("to_wallet", help="Destination wallet type")
        parser_transfer.add_argument("currency", help="Currency to transfer")
        parser_transfer.add_argument("amount", help="Amount to transfer")
        parser_transfer.add_argument(
            "--currency-to", help="Currency to receive (defaults to currency)"
        )
        parser_transfer.add_argument(
            "-y", "--yes", action="store_true", help="Skip confirmation prompt"
        )

        parser_withdraw = self.subparsers.add_parser(
            "withdraw", help="Withdraw funds to an external address"
        )
        parser_withdraw.add_argument("wallet", help="Wallet to withdraw from")
        parser_withdraw.add_argument("method", help="Withdrawal method (e.g. bitcoin)")
        parser_withdraw.add_argument("amount", help="Amount to withdraw")
        parser_withdraw.add_argument("address", help="Destination address")
        parser_withdraw.add_argument("--payment-id", help="Payment ID / memo / tag")
        parser_withdraw.add_argument(
            "-y", "--yes", action="store_true", help="Skip confirmation prompt"
        )


def route_command(args: argparse.Namespace, service: WalletService):
    """Dispatch parsed arguments to the matching command."""
    routes: dict[str, Callable[[], object]] = {
        "wallet": lambda: wallet_command(service, show_all=args.show_all),
        "movements": lambda: movements_command(
            service, currency=args.currency, start=args.start, end=args.end, limit=args.limit
        ),
        "deposit-address": lambda: deposit_address_command(
            service, args.wallet, args.method, new=args.new
        ),
        "transfer": lambda: transfer_command(
            service,
            args.from_wallet,
            args.to_wallet,
            args.currency,
            args.amount,
            currency_to=args.currency_to,
            yes=args.yes,
        ),
        "withdraw": lambda: withdraw_command(
            service,
            args.wallet,
            args.method,
            args.amount,
            args.address,
            payment_id=args.payment_id,
            yes=args.yes,
        ),
    }
    return routes[args.command]()


def main(argv: list[str] | None = None, service: WalletService | None = None) -> int:
    """
    CLI entry point.

    Args:
        argv: Arguments to parse (defaults to sys.argv)
        service: Pre-built service; created from the environment when None

    Returns:
        Process exit code
    """
    parser = CLIArgumentParser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.parser.print_help()
        return 0

    try:
        service = service or create_wallet_service()
        route_command(args, service)
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
        return 130
    except WalletKitError as e:
        logger.debug("Command failed", exc_info=True)
        print_error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
