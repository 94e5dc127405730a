"""
Commands package for the wallet CLI.

Each command lives in its own module and takes the WalletService it operates
on, so commands can be driven with a stub service in tests.
"""

from .deposit_address import deposit_address_command
from .movements import movements_command
from .transfer import transfer_command
from .wallet import wallet_command
from .withdraw import withdraw_command

__all__ = [
    "deposit_address_command",
    "movements_command",
    "transfer_command",
    "wallet_command",
    "withdraw_command",
]
