"""Pytest configuration and shared fixtures for recurly-client-core tests."""

import os

import pytest

from recurly_client_core import RecurlyClient
from recurly_client_core.auth import CredentialResolver
from recurly_client_core.testing import RecordingTransport, responses_in_order


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Recurly and test environment variables before each test.

    This keeps the API key, debug flag and page size from leaking between tests.
    """
    test_prefixes = ("TEST_", "RECURLY_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
async def make_client():
    """Build an opened client answering requests with the given responses in order.

    Returns (client, transport). Every client built is closed after the test.
    """
    clients: list[RecurlyClient] = []

    async def factory(*responses, api_key="default-key"):
        transport = RecordingTransport(responses_in_order(*responses))
        resolver = CredentialResolver(api_key, load_dotenv=False)
        client = RecurlyClient(resolver=resolver, transport=transport)
        await client.open()
        clients.append(client)
        return client, transport

    yield factory

    for client in clients:
        await client.close()
