"""
Deposit address command - Show or create a deposit address.
"""

from ..domain.notification import Notification
from ..services.wallet_service import WalletService
from ..utilities.display_helpers import display_notification


def deposit_address_command(
    service: WalletService, wallet: str, method: str, new: bool = False
) -> Notification:
    """Get the deposit address for a wallet, or create a new one"""
    if new:
        notification = service.create_deposit_address(wallet, method)
    else:
        notification = service.get_deposit_address(wallet, method)

    display_notification(notification)
    return notification
