#!/usr/bin/env python3
"""
Evolution API Client Tests
"""

import json

import httpx
import pytest

from evolution_mcp.client import EvolutionClient
from evolution_mcp.config import load_settings
from evolution_mcp.errors import EvolutionAPIError


class TestEvolutionClient:
    """Request shape and response handling"""

    @pytest.mark.asyncio
    async def test_fetch_instances_returns_json(self, client, gateway):
        gateway.json_body = [{"name": "main"}]

        assert await client.fetch_instances() == [{"name": "main"}]

    @pytest.mark.asyncio
    async def test_send_text_request(self, client, gateway):
        await client.send_text("main", "5511999999999", "hello", delay=3)

        request = gateway.requests[0]
        assert request.url.path == "/message/sendText/main"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"number": "5511999999999", "text": "hello", "delay": 3}

    @pytest.mark.asyncio
    async def test_non_success_raises_api_error(self, client, gateway):
        gateway.status_code = 404
        gateway.text_body = '{"message": "instance not found"}'

        with pytest.raises(EvolutionAPIError) as exc_info:
            await client.send_text("ghost", "5511999999999", "hello")

        error = exc_info.value
        assert error.status_code == 404
        assert error.reason_phrase == "Not Found"
        assert error.body == '{"message": "instance not found"}'
        assert str(error) == 'Evolution API error: 404 Not Found\n{"message": "instance not found"}'

    @pytest.mark.asyncio
    async def test_single_attempt_only(self, client, gateway):
        gateway.status_code = 503
        gateway.text_body = "unavailable"

        with pytest.raises(EvolutionAPIError):
            await client.fetch_instances()

        assert len(gateway.requests) == 1

    @pytest.mark.asyncio
    async def test_context_manager_closes_http_client(self, gateway):
        client = EvolutionClient("https://gateway.test", "t", transport=httpx.MockTransport(gateway.handler))

        async with client:
            pass

        assert client.http_client.is_closed

    @pytest.mark.asyncio
    async def test_from_settings(self, clean_env):
        settings = load_settings(
            EVOLUTION_API_TOKEN="secret",
            EVOLUTION_API_BASE_URL="https://example.test/",
        )

        client = EvolutionClient.from_settings(settings)
        try:
            assert client.base_url == "https://example.test"
            assert client.http_client.headers["apikey"] == "secret"
            assert client.http_client.timeout.read is None
            assert client.http_client.follow_redirects is True
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_transport_used_by_own_http_client(self, gateway):
        client = EvolutionClient("https://gateway.test/", "secret", transport=httpx.MockTransport(gateway.handler))
        try:
            await client.fetch_instances()
        finally:
            await client.aclose()

        request = gateway.requests[0]
        assert str(request.url) == "https://gateway.test/instance/fetchInstances"
        assert request.headers["apikey"] == "secret"
        assert request.headers["user-agent"].startswith("evolution-mcp/")

    @pytest.mark.asyncio
    async def test_follows_redirects(self, client, gateway):
        gateway.redirects["/instance/fetchInstances"] = "https://gateway.test/v2/instance/fetchInstances"
        gateway.json_body = [{"name": "main"}]

        assert await client.fetch_instances() == [{"name": "main"}]
        assert [r.url.path for r in gateway.requests] == [
            "/instance/fetchInstances",
            "/v2/instance/fetchInstances",
        ]
