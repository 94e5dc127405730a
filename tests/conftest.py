"""
Pytest configuration and shared fixtures for wallet kit tests.
"""

import pytest

from bitfinex_wallet_kit.services.wallet_service import WalletService

from .mocks.client_mocks import CountingNonce, RecordingExecutor, create_test_factory


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (real factory and executor)"
    )
    config.addinivalue_line("markers", "property: mark test as property-based test")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)
        elif "property" in path:
            item.add_marker(pytest.mark.property)


@pytest.fixture
def nonce() -> CountingNonce:
    """Deterministic nonce source."""
    return CountingNonce()


@pytest.fixture
def request_factory(nonce):
    """Signing request factory with test credentials."""
    return create_test_factory(nonce)


@pytest.fixture
def executor() -> RecordingExecutor:
    """Executor double with an empty response queue."""
    return RecordingExecutor()


@pytest.fixture
def wallet_service(request_factory, executor) -> WalletService:
    """Wallet service wired to the test factory and recording executor."""
    return WalletService(request_factory, executor)
