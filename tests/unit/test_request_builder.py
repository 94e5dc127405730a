"""
Unit tests for authenticated request construction.
"""

import hashlib
import hmac
import json
from decimal import Decimal
from unittest.mock import patch

import pytest

from bitfinex_wallet_kit.core.request_builder import (
    BitfinexRequestFactory,
    auth_path,
    compose_body,
    microsecond_nonce,
    serialize_body,
    sign_payload,
)
from bitfinex_wallet_kit.domain.amount import Amount
from bitfinex_wallet_kit.utilities.constants import (
    Permission,
    RequestConstructionError,
    ValidationError,
)

from ..mocks.client_mocks import TEST_API_KEY, TEST_API_SECRET, TEST_REST_HOST


def expected_signature(path: str, nonce: str, payload: str) -> str:
    message = f"/api/v2/{path}{nonce}{payload}"
    return hmac.new(TEST_API_SECRET.encode(), message.encode(), hashlib.sha384).hexdigest()


class TestPermissionScoping:
    """Test cases for permission-scoped paths."""

    def test_read_path(self):
        assert auth_path(Permission.READ, "wallets") == "auth/r/wallets"

    def test_write_path(self):
        assert auth_path(Permission.WRITE, "deposit/address") == "auth/w/deposit/address"

    def test_request_path_and_url(self, request_factory):
        request = request_factory.new_request(Permission.READ, "wallets")
        assert request.path == "auth/r/wallets"
        assert request.url == f"{TEST_REST_HOST}/auth/r/wallets"
        assert request.permission is Permission.READ

    def test_invalid_permission_rejected(self, request_factory):
        with pytest.raises(ValidationError, match="Invalid permission"):
            request_factory.new_request("r", "wallets")

    def test_empty_endpoint_rejected(self, request_factory):
        with pytest.raises(ValidationError):
            request_factory.new_request(Permission.READ, "")


class TestSigning:
    """Test cases for request signing."""

    def test_request_without_body_signs_empty_object(self, request_factory, nonce):
        request = request_factory.new_request(Permission.READ, "wallets")

        assert request.payload == "{}"
        assert dict(request.body) == {}
        assert request.headers["bfx-nonce"] == str(nonce.value)
        assert request.headers["bfx-apikey"] == TEST_API_KEY
        assert request.headers["bfx-signature"] == expected_signature(
            "auth/r/wallets", str(nonce.value), "{}"
        )
        assert request.headers["Content-Type"] == "application/json"

    def test_body_is_signed_exactly_as_sent(self, request_factory, nonce):
        body = {"wallet": "exchange", "method": "bitcoin", "op_renew": 0}
        request = request_factory.new_request_with_body(
            Permission.WRITE, "deposit/address", body
        )

        assert json.loads(request.payload) == body
        assert request.headers["bfx-signature"] == expected_signature(
            "auth/w/deposit/address", str(nonce.value), request.payload
        )

    def test_nonce_increases_between_requests(self, request_factory):
        first = request_factory.new_request(Permission.READ, "wallets")
        second = request_factory.new_request(Permission.READ, "wallets")
        assert int(second.headers["bfx-nonce"]) > int(first.headers["bfx-nonce"])

    def test_default_nonce_is_current_time_in_microseconds(self):
        with patch("bitfinex_wallet_kit.core.request_builder.time.time", return_value=1700000000.25):
            assert microsecond_nonce() == "1700000000250000"

    def test_sign_payload_matches_hmac_sha384(self):
        signature = sign_payload(TEST_API_SECRET, "auth/r/wallets", "1", "{}")
        assert signature == expected_signature("auth/r/wallets", "1", "{}")
        assert len(signature) == 96

    def test_request_is_immutable(self, request_factory):
        request = request_factory.new_request_with_body(Permission.WRITE, "withdraw", {"a": "1"})
        with pytest.raises(TypeError):
            request.body["a"] = "2"
        with pytest.raises(TypeError):
            request.headers["bfx-nonce"] = "0"

    def test_secret_not_in_repr(self, request_factory):
        assert TEST_API_SECRET not in repr(request_factory)


class TestCredentials:
    """Test cases for credential failures."""

    @pytest.mark.parametrize(
        "api_key,api_secret", [(None, "secret"), ("key", None), ("", ""), (None, None)]
    )
    def test_missing_credentials_raise_construction_error(self, api_key, api_secret):
        factory = BitfinexRequestFactory(api_key, api_secret)
        with pytest.raises(RequestConstructionError, match="Missing API credentials"):
            factory.new_request(Permission.READ, "wallets")

    def test_unserializable_body_is_construction_error(self, request_factory):
        with pytest.raises(RequestConstructionError):
            request_factory.new_request_with_body(Permission.WRITE, "transfer", {"x": object()})


class TestBodyComposition:
    """Test cases for optional fields and amount serialization."""

    def test_none_optionals_are_omitted(self):
        body = compose_body({"wallet": "exchange"}, payment_id=None, start=None)
        assert body == {"wallet": "exchange"}
        assert "payment_id" not in body

    def test_present_optionals_are_kept_verbatim(self):
        body = compose_body({"wallet": "exchange"}, payment_id="memo-42", limit=0)
        assert body == {"wallet": "exchange", "payment_id": "memo-42", "limit": 0}

    def test_compose_body_does_not_mutate_required(self):
        required = {"wallet": "exchange"}
        compose_body(required, payment_id="x")
        assert required == {"wallet": "exchange"}

    def test_decimal_and_amount_serialize_as_plain_strings(self):
        payload = serialize_body(
            {"a": Decimal("1E-8"), "b": Amount.from_value(0.00000001), "c": "0.5"}
        )
        assert payload == '{"a":"0.00000001","b":"0.00000001","c":"0.5"}'
