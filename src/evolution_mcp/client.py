#!/usr/bin/env python3
"""
Evolution API HTTP client
Thin async wrapper around httpx for the two gateway endpoints the tools use
"""

import logging
from typing import Any, Dict, Optional

import httpx

from . import __version__
from .errors import handle_api_errors

logger = logging.getLogger(__name__)


class EvolutionClient:
    """
    Async client for the Evolution API gateway

    One instance is shared by all tool calls for the lifetime of the server,
    which gives connection reuse through the underlying httpx pool. No retries
    are attempted: each method issues exactly one request.
    """

    def __init__(
        self,
        base_url: str,
        api_token: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Content-Type": "application/json",
            "apikey": api_token,
            "User-Agent": f"evolution-mcp/{__version__}",
        }

        # Gateway redirects are followed to the final response
        self.http_client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings) -> "EvolutionClient":
        """Create a client from loaded Settings"""
        return cls(
            base_url=settings.EVOLUTION_API_BASE_URL,
            api_token=settings.EVOLUTION_API_TOKEN,
            timeout=settings.EVOLUTION_API_TIMEOUT,
        )

    async def fetch_instances(self) -> Any:
        """GET /instance/fetchInstances"""
        logger.debug("Fetching instances")
        return await handle_api_errors(self.http_client.get("/instance/fetchInstances"))

    async def send_text(self, instance: str, number: str, text: str, delay: Any = 1) -> Any:
        """POST /message/sendText/{instance}"""
        payload: Dict[str, Any] = {
            "number": number,
            "text": text,
            "delay": delay,
        }
        logger.debug(f"Sending text via instance {instance}")
        return await handle_api_errors(
            self.http_client.post(f"/message/sendText/{instance}", json=payload)
        )

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "EvolutionClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
