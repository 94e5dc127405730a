"""
Wallet service for the Bitfinex authenticated wallet endpoints.

Every operation is one self-contained blocking call: build a signed request,
hand it to the executor, decode the raw response. The service keeps no state
between calls beyond its two collaborators.
"""

import logging
from dataclasses import dataclass
from typing import Any

from ..core.decoder import decode_movements, decode_notification, decode_wallet_snapshot
from ..core.request_builder import compose_body
from ..core.types import RequestFactory, SynchronousExecutor
from ..domain.amount import Amount
from ..domain.movement import MovementRecord
from ..domain.notification import Notification
from ..domain.wallet import WalletSnapshot
from ..utilities.constants import (
    DEPOSIT_ADDRESS_EXISTING,
    DEPOSIT_ADDRESS_RENEW,
    ENDPOINT_CURRENCY_MOVEMENTS,
    ENDPOINT_DEPOSIT_ADDRESS,
    ENDPOINT_MOVEMENTS,
    ENDPOINT_TRANSFER,
    ENDPOINT_WALLETS,
    ENDPOINT_WITHDRAW,
    MOVEMENTS_MAX_LIMIT,
    Permission,
    ValidationError,
)
from ..utilities.formatters import format_wire_amount
from ..utilities.validators import validate_limit, validate_non_empty_string, validate_timestamp

logger = logging.getLogger(__name__)

AmountLike = Amount | float | int | str


@dataclass(frozen=True)
class MovementQuery:
    """
    Filters for the movement history endpoint.

    All filters are optional and independent. The limit is checked against
    the exchange ceiling when the query is created, so an over-limit query
    never turns into a request.
    """

    start: int | None = None
    end: int | None = None
    limit: int | None = None
    currency: str | None = None

    def __post_init__(self):
        """Validate filters after initialization."""
        if self.start is not None:
            validate_timestamp(self.start, "start")
        if self.end is not None:
            validate_timestamp(self.end, "end")
        if self.limit is not None:
            if isinstance(self.limit, bool) or not isinstance(self.limit, int):
                raise ValidationError(f"limit must be an integer, got {self.limit!r}")
            validate_limit(self.limit, MOVEMENTS_MAX_LIMIT)
        if self.currency is not None:
            validate_non_empty_string(self.currency, "currency")

    @property
    def endpoint(self) -> str:
        """Movement endpoint, narrowed to one currency when requested."""
        if self.currency:
            return ENDPOINT_CURRENCY_MOVEMENTS.format(currency=self.currency.strip().upper())
        return ENDPOINT_MOVEMENTS

    def to_body(self) -> dict[str, Any]:
        """Request body holding only the filters that were set."""
        return compose_body({}, start=self.start, end=self.end, limit=self.limit)


class WalletService:
    """
    Typed access to wallets, transfers, deposit addresses, withdrawals and
    movement history.
    """

    def __init__(self, request_factory: RequestFactory, executor: SynchronousExecutor) -> None:
        """
        Initialize wallet service.

        Args:
            request_factory: Builds signed, permission-scoped requests
            executor: Sends requests and returns raw decoded JSON
        """
        self.request_factory = request_factory
        self.executor = executor

    def get_wallets(self) -> WalletSnapshot:
        """
        Retrieve all wallets of the account.

        Returns:
            WalletSnapshot with one entry per wallet/currency pair

        Raises:
            RequestConstructionError: If the request cannot be signed
            TransportError: If the call fails at the network layer
            DecodeError: If the response is not a wallet snapshot
        """
        request = self.request_factory.new_request(Permission.READ, ENDPOINT_WALLETS)
        raw = self.executor.execute(request)
        return decode_wallet_snapshot(raw)

    def transfer(
        self,
        from_wallet: str,
        to_wallet: str,
        currency: str,
        currency_to: str,
        amount: AmountLike,
    ) -> Notification:
        """
        Transfer funds between two wallets of the account.

        Args:
            from_wallet: Source wallet type (exchange, margin, funding)
            to_wallet: Destination wallet type
            currency: Currency to move
            currency_to: Currency to receive (differs from currency for conversions)
            amount: Amount to move, sent as a full-precision decimal string

        Returns:
            Notification acknowledging the transfer
        """
        validate_non_empty_string(from_wallet, "from_wallet")
        validate_non_empty_string(to_wallet, "to_wallet")
        validate_non_empty_string(currency, "currency")
        validate_non_empty_string(currency_to, "currency_to")

        body = {
            "from": from_wallet,
            "to": to_wallet,
            "currency": currency,
            "currency_to": currency_to,
            "amount": format_wire_amount(amount),
        }
        logger.info(f"Transferring {body['amount']} {currency} from {from_wallet} to {to_wallet}")
        return self._write(ENDPOINT_TRANSFER, body)

    def get_deposit_address(self, wallet: str, method: str) -> Notification:
        """Retrieve the current deposit address for a wallet and method."""
        return self._deposit_address(wallet, method, DEPOSIT_ADDRESS_EXISTING)

    def create_deposit_address(self, wallet: str, method: str) -> Notification:
        """Generate a new deposit address. Previous addresses remain valid."""
        return self._deposit_address(wallet, method, DEPOSIT_ADDRESS_RENEW)

    def _deposit_address(self, wallet: str, method: str, renew: int) -> Notification:
        validate_non_empty_string(wallet, "wallet")
        validate_non_empty_string(method, "method")

        body = {"wallet": wallet, "method": method, "op_renew": renew}
        return self._write(ENDPOINT_DEPOSIT_ADDRESS, body)

    def withdraw(
        self,
        wallet: str,
        method: str,
        amount: AmountLike,
        address: str,
        payment_id: str | None = None,
    ) -> Notification:
        """
        Withdraw funds from a wallet to an external address.

        Args:
            wallet: Wallet to withdraw from
            method: Withdrawal method (e.g. bitcoin, ethereum, tetheruse)
            amount: Amount to withdraw, sent as a full-precision decimal string
            address: Destination address
            payment_id: Optional tag/memo; omitted from the body when None

        Returns:
            Notification acknowledging the withdrawal request
        """
        validate_non_empty_string(wallet, "wallet")
        validate_non_empty_string(method, "method")
        validate_non_empty_string(address, "address")

        body = compose_body(
            {
                "wallet": wallet,
                "method": method,
                "amount": format_wire_amount(amount),
                "address": address,
            },
            payment_id=payment_id,
        )
        logger.info(f"Requesting withdrawal of {body['amount']} from {wallet} via {method}")
        return self._write(ENDPOINT_WITHDRAW, body)

    def get_movements(
        self,
        start: int | None = None,
        end: int | None = None,
        limit: int | None = None,
        currency: str | None = None,
    ) -> list[MovementRecord]:
        """
        Retrieve deposit and withdrawal history.

        Args:
            start: Millisecond timestamp to start from
            end: Millisecond timestamp to end at
            limit: Number of records, at most 1000
            currency: Restrict history to one currency

        Returns:
            Movements in the order returned by Bitfinex

        Raises:
            ValidationError: If limit exceeds 1000 (raised before any request is built)
        """
        return self.query_movements(
            MovementQuery(start=start, end=end, limit=limit, currency=currency)
        )

    def query_movements(self, query: MovementQuery) -> list[MovementRecord]:
        """Retrieve movement history for a prepared query."""
        request = self.request_factory.new_request_with_body(
            Permission.READ, query.endpoint, query.to_body()
        )
        raw = self.executor.execute(request)
        return decode_movements(raw)

    def _write(self, endpoint: str, body: dict[str, Any]) -> Notification:
        request = self.request_factory.new_request_with_body(Permission.WRITE, endpoint, body)
        raw = self.executor.execute(request)
        return decode_notification(raw)
