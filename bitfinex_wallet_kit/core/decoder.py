"""
Response decoding for Bitfinex positional array payloads.

Bitfinex encodes records as plain arrays addressed by index. Decoding is
strict about shape (is it an array, does it have enough slots) and lenient
about individual fields (a null or mistyped slot becomes the zero/empty
value). Field positions come from the index tables in the domain modules.

The decoder only sees success payloads; error payloads are classified by the
executor before they get here.
"""

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from ..domain.movement import MOVEMENT_FIELD_COUNT, MOVEMENT_FIELDS, MovementRecord
from ..domain.notification import (
    DEPOSIT_ADDRESS_FIELDS,
    NOTIFICATION_FIELDS,
    NOTIFICATION_MIN_FIELDS,
    TRANSFER_FIELDS,
    WITHDRAWAL_FIELDS,
    DepositAddressInfo,
    Notification,
    TransferInfo,
    WithdrawalInfo,
)
from ..domain.wallet import WALLET_FIELDS, WALLET_MIN_FIELDS, Wallet, WalletSnapshot
from ..utilities.constants import (
    NOTIFICATION_DEPOSIT_ADDRESS,
    NOTIFICATION_TRANSFER,
    NOTIFICATION_WITHDRAWAL,
    DecodeError,
)
from ..utilities.converters import (
    dict_or_none,
    field_at,
    float_or_zero,
    int_or_zero,
    str_or_empty,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Converter = Callable[[Any], Any]


def _frozen_mapping_or_none(value: Any) -> Mapping[str, Any] | None:
    mapping = dict_or_none(value)
    return MappingProxyType(mapping) if mapping is not None else None


WALLET_CONVERTERS: dict[str, Converter] = {
    "wallet_type": str_or_empty,
    "currency": str_or_empty,
    "balance": float_or_zero,
    "unsettled_interest": float_or_zero,
    "available_balance": float_or_zero,
    "last_change": str_or_empty,
    "trade_details": _frozen_mapping_or_none,
}

MOVEMENT_CONVERTERS: dict[str, Converter] = {
    "id": int_or_zero,
    "currency": str_or_empty,
    "currency_name": str_or_empty,
    "mts_started": int_or_zero,
    "mts_updated": int_or_zero,
    "status": str_or_empty,
    "amount": float_or_zero,
    "fees": float_or_zero,
    "destination_address": str_or_empty,
    "transaction_id": str_or_empty,
    "withdraw_transaction_note": str_or_empty,
}

TRANSFER_CONVERTERS: dict[str, Converter] = {
    "mts_updated": int_or_zero,
    "wallet_from": str_or_empty,
    "wallet_to": str_or_empty,
    "currency": str_or_empty,
    "currency_to": str_or_empty,
    "amount": float_or_zero,
}

DEPOSIT_ADDRESS_CONVERTERS: dict[str, Converter] = {
    "method": str_or_empty,
    "currency_code": str_or_empty,
    "address": str_or_empty,
    "pool_address": str_or_empty,
}

WITHDRAWAL_CONVERTERS: dict[str, Converter] = {
    "withdrawal_id": int_or_zero,
    "method": str_or_empty,
    "payment_id": str_or_empty,
    "wallet": str_or_empty,
    "amount": float_or_zero,
    "withdrawal_fee": float_or_zero,
}

# notification type -> (record class, field table, converters)
NOTIFY_INFO_DECODERS: dict[str, tuple[type, dict[str, int], dict[str, Converter]]] = {
    NOTIFICATION_TRANSFER: (TransferInfo, TRANSFER_FIELDS, TRANSFER_CONVERTERS),
    NOTIFICATION_DEPOSIT_ADDRESS: (
        DepositAddressInfo,
        DEPOSIT_ADDRESS_FIELDS,
        DEPOSIT_ADDRESS_CONVERTERS,
    ),
    NOTIFICATION_WITHDRAWAL: (WithdrawalInfo, WITHDRAWAL_FIELDS, WITHDRAWAL_CONVERTERS),
}


def is_array(value: Any) -> bool:
    """True for decoded JSON arrays."""
    return isinstance(value, list | tuple)


def _require_array(raw: Any, what: str) -> None:
    if not is_array(raw):
        raise DecodeError(f"Expected array for {what}, got {type(raw).__name__}: {raw!r}")


def decode_record(
    raw: Any,
    record_type: Callable[..., T],
    fields: Mapping[str, int],
    converters: Mapping[str, Converter],
) -> T:
    """
    Map a positional array onto a record using an index table.

    Args:
        raw: Positional array from the API
        record_type: Record class to construct
        fields: Field name -> array index
        converters: Field name -> total converter

    Returns:
        The constructed record. Missing slots yield zero/empty values.
    """
    values = {name: converters[name](field_at(raw, index)) for name, index in fields.items()}
    return record_type(**values)


def decode_wallet(raw: Any) -> Wallet:
    """Decode a single wallet array."""
    _require_array(raw, "wallet")
    if len(raw) < WALLET_MIN_FIELDS:
        raise DecodeError(
            f"Data slice too short for wallet: expected at least {WALLET_MIN_FIELDS} "
            f"fields, got {len(raw)}: {raw!r}"
        )
    return decode_record(raw, Wallet, WALLET_FIELDS, WALLET_CONVERTERS)


def decode_wallet_snapshot(raw: Any) -> WalletSnapshot:
    """
    Decode the auth/r/wallets response into a WalletSnapshot.

    Any element that is not an array aborts the whole decode; no partial
    snapshot is returned.

    Raises:
        DecodeError: If the payload or any wallet has the wrong shape
    """
    _require_array(raw, "wallet snapshot")

    wallets = []
    for position, item in enumerate(raw):
        if not is_array(item):
            raise DecodeError(
                f"Not a wallet snapshot: element {position} is "
                f"{type(item).__name__}, expected array"
            )
        wallets.append(decode_wallet(item))

    logger.debug(f"Decoded wallet snapshot with {len(wallets)} wallets")
    return WalletSnapshot(wallets=tuple(wallets))


def decode_notify_info(notification_type: str, raw: Any) -> Any:
    """
    Decode the notify-info slot for known wallet notification types.

    Unknown types and non-array payloads are returned unchanged.
    """
    decoder = NOTIFY_INFO_DECODERS.get(notification_type)
    if decoder is None or not is_array(raw):
        return raw
    record_type, fields, converters = decoder
    return decode_record(raw, record_type, fields, converters)


def decode_notification(raw: Any) -> Notification:
    """
    Decode a write-endpoint acknowledgement.

    Raises:
        DecodeError: If the payload is not an array of at least 8 fields
    """
    _require_array(raw, "notification")
    if len(raw) < NOTIFICATION_MIN_FIELDS:
        raise DecodeError(
            f"Data slice too short for notification: expected at least "
            f"{NOTIFICATION_MIN_FIELDS} fields, got {len(raw)}: {raw!r}"
        )

    notification_type = str_or_empty(raw[NOTIFICATION_FIELDS["type"]])
    notification = Notification(
        mts=int_or_zero(raw[NOTIFICATION_FIELDS["mts"]]),
        type=notification_type,
        message_id=int_or_zero(raw[NOTIFICATION_FIELDS["message_id"]]),
        notify_info=decode_notify_info(
            notification_type, raw[NOTIFICATION_FIELDS["notify_info"]]
        ),
        code=int_or_zero(raw[NOTIFICATION_FIELDS["code"]]),
        status=str_or_empty(raw[NOTIFICATION_FIELDS["status"]]),
        text=str_or_empty(raw[NOTIFICATION_FIELDS["text"]]),
    )
    logger.debug(f"Decoded {notification.type or 'untyped'} notification: {notification.status}")
    return notification


def decode_movement(raw: Any) -> MovementRecord:
    """
    Decode one 22-slot movement array.

    Raises:
        DecodeError: If raw is not an array of exactly 22 fields
    """
    _require_array(raw, "movement")
    if len(raw) != MOVEMENT_FIELD_COUNT:
        raise DecodeError(
            f"Movement must have exactly {MOVEMENT_FIELD_COUNT} fields, got {len(raw)}: {raw!r}"
        )
    return decode_record(raw, MovementRecord, MOVEMENT_FIELDS, MOVEMENT_CONVERTERS)


def decode_movements(raw: Any) -> list[MovementRecord]:
    """
    Decode a movement history response.

    Records keep the order the server returned them in. A wrongly sized
    movement fails the whole batch. An element that is not an array ends
    decoding and the movements decoded before it are returned.

    Raises:
        DecodeError: If raw is not an array or a movement has != 22 fields
    """
    _require_array(raw, "movements")

    movements: list[MovementRecord] = []
    for position, item in enumerate(raw):
        if not is_array(item):
            logger.warning(
                f"Stopped decoding movements at element {position} "
                f"({type(item).__name__}); returning {len(movements)} of {len(raw)}"
            )
            break
        movements.append(decode_movement(item))

    logger.debug(f"Decoded {len(movements)} movements")
    return movements
