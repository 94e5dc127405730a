"""
Display helpers shared by the write commands.
"""

from ..domain.notification import (
    DepositAddressInfo,
    Notification,
    TransferInfo,
    WithdrawalInfo,
)
from .console import console, print_error, print_success
from .formatters import format_amount


def describe_notify_info(info: object) -> str | None:
    """One-line description of a decoded notify-info record."""
    if isinstance(info, TransferInfo):
        return (
            f"{format_amount(info.amount)} {info.currency} "
            f"{info.wallet_from} → {info.wallet_to} ({info.currency_to})"
        )
    if isinstance(info, DepositAddressInfo):
        pool = f" (pool {info.pool_address})" if info.pool_address else ""
        return f"{info.currency_code} via {info.method}: {info.address}{pool}"
    if isinstance(info, WithdrawalInfo):
        return (
            f"withdrawal #{info.withdrawal_id}: {format_amount(info.amount)} from {info.wallet} "
            f"via {info.method}, fee {format_amount(info.withdrawal_fee)}"
        )
    return None


def display_notification(notification: Notification) -> None:
    """Print the outcome of a write operation."""
    text = notification.text or notification.status or "no status"
    if notification.is_success:
        print_success(text)
    else:
        print_error(f"{notification.status}: {text}")

    description = describe_notify_info(notification.notify_info)
    if description:
        console.print(f"   {description}", markup=False)
