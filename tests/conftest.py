"""
Shared fixtures for the Evolution API MCP server tests
The gateway is replaced by an httpx.MockTransport that records every request
"""

import httpx
import pytest
import pytest_asyncio

from evolution_mcp.client import EvolutionClient

TEST_BASE_URL = "https://gateway.test"
TEST_TOKEN = "test-token"


class FakeGateway:
    """Records requests and answers with a configurable response"""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.json_body = {}
        self.text_body = None
        self.error = None
        self.redirects = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if request.url.path in self.redirects:
            return httpx.Response(301, headers={"location": self.redirects[request.url.path]})
        if self.text_body is not None:
            return httpx.Response(self.status_code, text=self.text_body)
        return httpx.Response(self.status_code, json=self.json_body)


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest_asyncio.fixture
async def client(gateway):
    evolution_client = EvolutionClient(
        base_url=TEST_BASE_URL,
        api_token=TEST_TOKEN,
        transport=httpx.MockTransport(gateway.handler),
    )
    yield evolution_client
    await evolution_client.aclose()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No token in the environment and no stray .env file"""
    monkeypatch.chdir(tmp_path)
    for var in ("EVOLUTION_API_TOKEN", "EVOLUTION_API_BASE_URL", "EVOLUTION_API_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
