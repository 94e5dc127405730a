"""
Movements command - Show deposit and withdrawal history.
"""

from rich.markup import escape
from rich.table import Table

from ..domain.movement import MovementRecord
from ..services.wallet_service import WalletService
from ..utilities.console import console, print_info
from ..utilities.formatters import format_amount, format_timestamp


def build_movements_table(movements: list[MovementRecord]) -> Table:
    """Render movements as a table in the order received."""
    table = Table(title="📜 Movements")
    table.add_column("ID", justify="right")
    table.add_column("Currency")
    table.add_column("Started")
    table.add_column("Updated")
    table.add_column("Status")
    table.add_column("Amount", justify="right")
    table.add_column("Fees", justify="right")
    table.add_column("Address")
    table.add_column("Transaction")

    for movement in movements:
        table.add_row(
            str(movement.id),
            escape(movement.currency),
            format_timestamp(movement.mts_started),
            format_timestamp(movement.mts_updated),
            escape(movement.status),
            format_amount(movement.amount),
            format_amount(movement.fees),
            escape(movement.destination_address),
            escape(movement.transaction_id),
        )
    return table


def movements_command(
    service: WalletService,
    currency: str | None = None,
    start: int | None = None,
    end: int | None = None,
    limit: int | None = None,
) -> list[MovementRecord]:
    """Get and display movement history"""
    movements = service.get_movements(start=start, end=end, limit=limit, currency=currency)

    if not movements:
        print_info("No movements found")
        return movements

    console.print(build_movements_table(movements))
    return movements
