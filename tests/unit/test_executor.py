"""
Unit tests for the requests-based executor and error classification.
"""

from unittest.mock import patch

import pytest
import requests

from bitfinex_wallet_kit.core.executor import RequestsExecutor, extract_api_error
from bitfinex_wallet_kit.utilities.constants import APIError, Permission, TransportError

from ..fixtures.api_responses import API_ERROR_PAYLOAD, WALLETS_RESPONSE
from ..mocks.client_mocks import create_http_response

POST_TARGET = "bitfinex_wallet_kit.core.executor.requests.post"


@pytest.fixture
def wallets_request(request_factory):
    return request_factory.new_request(Permission.READ, "wallets")


class TestExtractAPIError:
    """Test cases for error payload recognition."""

    def test_array_error_payload(self):
        error = extract_api_error(API_ERROR_PAYLOAD, 500)
        assert isinstance(error, APIError)
        assert error.code == 10020
        assert error.text == "limit: invalid"
        assert error.status_code == 500

    def test_object_error_payload(self):
        error = extract_api_error({"error": "ERR_RATE_LIMIT"}, 429)
        assert error.code == 0
        assert error.text == "ERR_RATE_LIMIT"

    def test_truncated_error_payload(self):
        error = extract_api_error(["error"])
        assert error.code == 0
        assert error.text == ""

    @pytest.mark.parametrize("payload", [WALLETS_RESPONSE, [], [["error"]], "error", None])
    def test_success_payloads_are_not_errors(self, payload):
        assert extract_api_error(payload) is None


class TestRequestsExecutor:
    """Test cases for RequestsExecutor.execute."""

    def test_posts_signed_payload(self, wallets_request):
        executor = RequestsExecutor(timeout=5)
        with patch(POST_TARGET, return_value=create_http_response(WALLETS_RESPONSE)) as post:
            result = executor.execute(wallets_request)

        assert result == WALLETS_RESPONSE
        post.assert_called_once_with(
            wallets_request.url,
            data=wallets_request.payload,
            headers=dict(wallets_request.headers),
            timeout=5,
        )

    def test_error_payload_raises_api_error(self, wallets_request):
        response = create_http_response(API_ERROR_PAYLOAD, status_code=500)
        with patch(POST_TARGET, return_value=response):
            with pytest.raises(APIError, match="10020"):
                RequestsExecutor().execute(wallets_request)

    def test_api_error_is_transport_error(self, wallets_request):
        response = create_http_response(API_ERROR_PAYLOAD, status_code=500)
        with patch(POST_TARGET, return_value=response):
            with pytest.raises(TransportError):
                RequestsExecutor().execute(wallets_request)

    def test_unexpected_status_raises_transport_error(self, wallets_request):
        response = create_http_response([], status_code=502)
        with patch(POST_TARGET, return_value=response):
            with pytest.raises(TransportError, match="HTTP 502"):
                RequestsExecutor().execute(wallets_request)

    def test_non_json_body_raises_transport_error(self, wallets_request):
        response = create_http_response(status_code=503, text="<html>Service Unavailable</html>")
        with patch(POST_TARGET, return_value=response):
            with pytest.raises(TransportError, match="Non-JSON"):
                RequestsExecutor().execute(wallets_request)

    def test_network_failure_raises_transport_error(self, wallets_request):
        with patch(POST_TARGET, side_effect=requests.ConnectionError("connection refused")):
            with pytest.raises(TransportError, match="connection refused") as exc_info:
                RequestsExecutor().execute(wallets_request)
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)
