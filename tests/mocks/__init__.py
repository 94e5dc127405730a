"""
Mock utilities package for wallet kit tests.
"""

from .client_mocks import (
    TEST_API_KEY,
    TEST_API_SECRET,
    TEST_REST_HOST,
    CountingNonce,
    RecordingExecutor,
    create_http_response,
    create_test_factory,
)

__all__ = [
    "TEST_API_KEY",
    "TEST_API_SECRET",
    "TEST_REST_HOST",
    "CountingNonce",
    "RecordingExecutor",
    "create_http_response",
    "create_test_factory",
]
