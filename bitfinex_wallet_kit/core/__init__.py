"""
Core request construction, execution and response decoding.
"""

from .decoder import decode_movements, decode_notification, decode_wallet_snapshot
from .executor import RequestsExecutor, create_executor
from .request_builder import (
    AuthenticatedRequest,
    BitfinexRequestFactory,
    compose_body,
    create_request_factory,
)
from .types import RequestFactory, SynchronousExecutor

__all__ = [
    "AuthenticatedRequest",
    "BitfinexRequestFactory",
    "RequestFactory",
    "RequestsExecutor",
    "SynchronousExecutor",
    "compose_body",
    "create_executor",
    "create_request_factory",
    "decode_movements",
    "decode_notification",
    "decode_wallet_snapshot",
]
