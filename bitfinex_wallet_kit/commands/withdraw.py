"""
Withdraw command - Withdraw funds to an external address.
"""

from ..domain.amount import Amount
from ..domain.notification import Notification
from ..services.wallet_service import WalletService
from ..utilities.console import confirm_action, print_info, print_warning
from ..utilities.display_helpers import display_notification


def withdraw_command(
    service: WalletService,
    wallet: str,
    method: str,
    amount: str,
    address: str,
    payment_id: str | None = None,
    yes: bool = False,
) -> Notification | None:
    """Withdraw funds after confirmation"""
    parsed_amount = Amount.from_string(amount)

    print_warning(f"Withdraw {parsed_amount} from {wallet} via {method} to {address}")
    if payment_id:
        print_info(f"Payment ID: {payment_id}")
    if not yes and not confirm_action("Withdrawals cannot be reversed. Proceed?"):
        print_info("Withdrawal cancelled")
        return None

    notification = service.withdraw(wallet, method, parsed_amount, address, payment_id=payment_id)
    display_notification(notification)
    return notification
