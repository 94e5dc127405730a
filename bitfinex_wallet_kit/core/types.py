"""
Shared protocol types for structural typing across services and clients.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from ..utilities.constants import Permission

if TYPE_CHECKING:
    from .request_builder import AuthenticatedRequest


@runtime_checkable
class RequestFactory(Protocol):
    """Builds signed, permission-scoped requests.

    Implementations raise RequestConstructionError when a request cannot be
    signed, e.g. because credentials are missing.
    """

    def new_request(self, permission: Permission, endpoint: str) -> AuthenticatedRequest: ...

    def new_request_with_body(
        self, permission: Permission, endpoint: str, body: Mapping[str, Any]
    ) -> AuthenticatedRequest: ...


@runtime_checkable
class SynchronousExecutor(Protocol):
    """Performs the network round-trip for a built request.

    Returns the decoded JSON value of a successful response. Transport and
    exchange errors are raised as TransportError / APIError and never reach
    the decoder.
    """

    def execute(self, request: AuthenticatedRequest) -> Any: ...
