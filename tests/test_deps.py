# ABOUTME: Tests for the shared HTTP client factory and dependency container.
# ABOUTME: Verifies the client timeout comes from configuration and the container accepts the client.

import httpx
import pytest

from src import config
from src.deps import DashboardDeps, create_http_client


class TestCreateHttpClient:
    @pytest.mark.asyncio
    async def test_uses_configured_timeout(self):
        """The client's timeout comes from HTTP_TIMEOUT.

        Implementation: Creates a client and inspects its timeout.
        Passing implies: A hung upstream call becomes a transport failure.
        """
        async with create_http_client() as client:
            assert client.timeout == httpx.Timeout(config.HTTP_TIMEOUT)

    @pytest.mark.asyncio
    async def test_deps_hold_client(self):
        """DashboardDeps accepts a real httpx.AsyncClient.

        Implementation: Wraps a created client in DashboardDeps.
        Passing implies: Arbitrary types are allowed on the container.
        """
        async with create_http_client() as client:
            deps = DashboardDeps(http_client=client)
            assert deps.http_client is client
