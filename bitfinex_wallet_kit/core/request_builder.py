"""
Authenticated request construction for the Bitfinex v2 REST API.

A request is scoped to a permission level at construction time: read queries
go to auth/r/..., state-changing operations to auth/w/.... The builder never
infers the level from the endpoint; callers choose it.
"""

import hashlib
import hmac
import json
import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from ..domain.amount import Amount
from ..utilities.constants import (
    DEFAULT_REST_HOST,
    HEADER_API_KEY,
    HEADER_NONCE,
    HEADER_SIGNATURE,
    SIGNATURE_PATH_PREFIX,
    Permission,
    RequestConstructionError,
    ValidationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthenticatedRequest:
    """Transport-ready signed request."""

    permission: Permission
    endpoint: str
    url: str
    payload: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> str:
        """Path relative to the REST host, e.g. auth/r/wallets."""
        return auth_path(self.permission, self.endpoint)


def auth_path(permission: Permission, endpoint: str) -> str:
    """Build the auth path for a permission level and endpoint."""
    return f"auth/{permission.value}/{endpoint.strip('/')}"


def compose_body(required: Mapping[str, Any], **optional: Any) -> dict[str, Any]:
    """
    Build a request body from required fields and optional keyword fields.

    Optional fields whose value is None are left out entirely, so the key
    never reaches the exchange as null or an empty string.
    """
    body = dict(required)
    body.update({key: value for key, value in optional.items() if value is not None})
    return body


def _json_default(value: Any) -> Any:
    if isinstance(value, Amount):
        return value.format_api()
    if isinstance(value, Decimal):
        return format(value, "f")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize_body(body: Mapping[str, Any]) -> str:
    """Serialize a body to the compact JSON text that is signed and sent."""
    return json.dumps(dict(body), separators=(",", ":"), default=_json_default)


def microsecond_nonce() -> str:
    """Default nonce: current time in microseconds."""
    return str(int(time.time() * 1_000_000))


def sign_payload(api_secret: str, path: str, nonce: str, payload: str) -> str:
    """Return the hex HMAC-SHA384 signature Bitfinex expects for a request."""
    message = f"{SIGNATURE_PATH_PREFIX}{path}{nonce}{payload}"
    return hmac.new(api_secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha384).hexdigest()


class BitfinexRequestFactory:
    """
    Request factory that signs with an API key/secret pair.

    The factory holds credentials only; it keeps no per-request state and can
    be shared between threads.
    """

    def __init__(
        self,
        api_key: str | None,
        api_secret: str | None,
        rest_host: str = DEFAULT_REST_HOST,
        nonce_factory: Callable[[], str] = microsecond_nonce,
    ) -> None:
        """
        Initialize request factory.

        Args:
            api_key: Bitfinex API key
            api_secret: Bitfinex API secret
            rest_host: REST base URL (e.g. https://api.bitfinex.com/v2)
            nonce_factory: Callable returning a current-time nonce string
        """
        self.api_key = api_key
        self._api_secret = api_secret
        self.rest_host = rest_host.rstrip("/")
        self._nonce_factory = nonce_factory

    def __repr__(self) -> str:
        return f"BitfinexRequestFactory(rest_host={self.rest_host!r})"

    def new_request(self, permission: Permission, endpoint: str) -> AuthenticatedRequest:
        """Build a request without body, used for plain read queries."""
        return self._build(permission, endpoint, {})

    def new_request_with_body(
        self, permission: Permission, endpoint: str, body: Mapping[str, Any]
    ) -> AuthenticatedRequest:
        """Build a request carrying a JSON body."""
        return self._build(permission, endpoint, body)

    def _build(
        self, permission: Permission, endpoint: str, body: Mapping[str, Any]
    ) -> AuthenticatedRequest:
        if not isinstance(permission, Permission):
            raise ValidationError(
                f"Invalid permission: {permission!r}. Must be Permission.READ or Permission.WRITE"
            )
        if not endpoint or not endpoint.strip("/"):
            raise ValidationError("Endpoint cannot be empty")
        if not self.api_key or not self._api_secret:
            raise RequestConstructionError(
                "Missing API credentials: set BFX_API_KEY and BFX_API_SECRET"
            )

        path = auth_path(permission, endpoint)
        try:
            payload = serialize_body(body)
        except (TypeError, ValueError) as e:
            raise RequestConstructionError(f"Cannot serialize body for {path}: {e}") from e

        nonce = self._nonce_factory()
        headers = {
            "Content-Type": "application/json",
            HEADER_NONCE: nonce,
            HEADER_API_KEY: self.api_key,
            HEADER_SIGNATURE: sign_payload(self._api_secret, path, nonce, payload),
        }

        logger.debug(f"Built {permission.name} request for {path} with fields {sorted(body)}")
        return AuthenticatedRequest(
            permission=permission,
            endpoint=endpoint,
            url=f"{self.rest_host}/{path}",
            payload=payload,
            headers=MappingProxyType(headers),
            body=MappingProxyType(dict(body)),
        )


def create_request_factory(
    api_key: str | None, api_secret: str | None, rest_host: str = DEFAULT_REST_HOST
) -> BitfinexRequestFactory:
    """
    Factory function to create a signing request factory.

    Args:
        api_key: Bitfinex API key
        api_secret: Bitfinex API secret
        rest_host: REST base URL

    Returns:
        BitfinexRequestFactory instance
    """
    return BitfinexRequestFactory(api_key, api_secret, rest_host=rest_host)
