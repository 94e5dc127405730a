"""
Blocking request executor built on requests.

Performs the network round-trip for an AuthenticatedRequest and classifies
failures so that only success-shaped payloads reach the decoder.
"""

import logging
from typing import Any

import requests

from ..utilities.constants import DEFAULT_TIMEOUT, APIError, TransportError
from .request_builder import AuthenticatedRequest

logger = logging.getLogger(__name__)

ERROR_MARKER = "error"


def extract_api_error(data: Any, status_code: int | None = None) -> APIError | None:
    """
    Recognise a Bitfinex error payload.

    Bitfinex reports errors as ["error", CODE, "TEXT"], and occasionally as an
    object with an "error" or "message" key.

    Returns:
        APIError describing the payload, or None if it is not an error payload
    """
    if isinstance(data, list) and data and data[0] == ERROR_MARKER:
        code = data[1] if len(data) > 1 and isinstance(data[1], int) else 0
        text = str(data[2]) if len(data) > 2 and data[2] is not None else ""
        return APIError(code, text, status_code)

    if isinstance(data, dict) and (ERROR_MARKER in data or "message" in data):
        text = data.get("message") or data.get(ERROR_MARKER) or ""
        code = data.get("code", 0)
        return APIError(code if isinstance(code, int) else 0, str(text), status_code)

    return None


class RequestsExecutor:
    """Executes signed requests with one blocking HTTP POST per call."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.timeout = timeout

    def execute(self, request: AuthenticatedRequest) -> Any:
        """
        Send the request and return the decoded JSON body.

        Raises:
            APIError: If Bitfinex answered with an error payload
            TransportError: On network failure, non-JSON body or unexpected status
        """
        logger.debug(f"POST {request.url}")
        try:
            response = requests.post(
                request.url,
                data=request.payload,
                headers=dict(request.headers),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"POST {request.path} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                f"Non-JSON response from {request.path} "
                f"(HTTP {response.status_code}): {response.text[:200]}"
            ) from e

        api_error = extract_api_error(data, response.status_code)
        if api_error is not None:
            raise api_error

        if response.status_code != 200:
            raise TransportError(
                f"Unexpected HTTP {response.status_code} from {request.path}: {data!r}"
            )

        return data


def create_executor(timeout: float = DEFAULT_TIMEOUT) -> RequestsExecutor:
    """Factory function to create the default executor."""
    return RequestsExecutor(timeout=timeout)
