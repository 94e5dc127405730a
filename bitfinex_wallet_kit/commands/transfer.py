"""
Transfer command - Move funds between wallets.
"""

from ..domain.amount import Amount
from ..domain.notification import Notification
from ..services.wallet_service import WalletService
from ..utilities.console import confirm_action, print_info
from ..utilities.display_helpers import display_notification


def transfer_command(
    service: WalletService,
    from_wallet: str,
    to_wallet: str,
    currency: str,
    amount: str,
    currency_to: str | None = None,
    yes: bool = False,
) -> Notification | None:
    """Transfer funds between wallets after confirmation"""
    currency_to = currency_to or currency
    parsed_amount = Amount.from_string(amount)

    print_info(
        f"Transfer {parsed_amount} {currency} from {from_wallet} to {to_wallet}"
        + (f" as {currency_to}" if currency_to != currency else "")
    )
    if not yes and not confirm_action("Proceed with transfer?"):
        print_info("Transfer cancelled")
        return None

    notification = service.transfer(from_wallet, to_wallet, currency, currency_to, parsed_amount)
    display_notification(notification)
    return notification
