#!/usr/bin/env python3
"""
Error Handling for the Evolution API MCP Server
Exception taxonomy, HTTP response checking and the tool result envelopes

Every tool invocation ends in exactly one CallToolResult carrying exactly one
text block. Success results hold the gateway's JSON pretty-printed; failures
are flagged with isError and a human-readable message.
"""

import json
import logging
from typing import Any, Coroutine

import httpx
import mcp.types as types

logger = logging.getLogger(__name__)


class EvolutionMCPError(Exception):
    """Base exception for Evolution API MCP server errors"""


class ConfigurationError(EvolutionMCPError):
    """Required configuration is missing or invalid (startup-fatal)"""


class ArgumentsMissingError(EvolutionMCPError):
    """A tool that needs arguments was called without an argument bag"""

    def __init__(self, message: str = "No arguments provided"):
        super().__init__(message)


class MissingRequiredArgumentError(EvolutionMCPError):
    """One or more required tool arguments are missing or empty"""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Missing required arguments for {tool_name}")


class EvolutionAPIError(EvolutionMCPError):
    """The gateway answered with a non-2xx status"""

    def __init__(self, status_code: int, reason_phrase: str, body: str):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body
        super().__init__(f"Evolution API error: {status_code} {reason_phrase}\n{body}")


async def handle_api_errors(api_call_coroutine: Coroutine[Any, Any, httpx.Response]) -> Any:
    """
    Await a gateway request and return its decoded JSON body

    Args:
        api_call_coroutine: The httpx.AsyncClient request coroutine

    Returns:
        The JSON value returned by the gateway, untouched

    Raises:
        EvolutionAPIError: For any non-2xx response
        httpx.RequestError: For network failures (propagated unchanged)
        ValueError: If a 2xx body is not valid JSON
    """
    response = await api_call_coroutine

    if not response.is_success:
        logger.warning(
            f"Evolution API returned {response.status_code} for "
            f"{response.request.method} {response.request.url.path}"
        )
        raise EvolutionAPIError(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            body=response.text,
        )

    return response.json()


def _text_result(text: str, is_error: bool) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def create_success_result(data: Any) -> types.CallToolResult:
    """
    Wrap a gateway result into a success envelope

    Key order is preserved as received and non-ASCII text is kept readable.
    """
    return _text_result(json.dumps(data, indent=2, ensure_ascii=False), is_error=False)


def create_error_result(error: BaseException) -> types.CallToolResult:
    """Wrap any exception into an error envelope: 'Error: <message>'"""
    return _text_result(f"Error: {error}", is_error=True)


def create_unknown_tool_result(name: str) -> types.CallToolResult:
    """Error envelope for tool names that are not registered"""
    return _text_result(f"Unknown tool: {name}", is_error=True)
