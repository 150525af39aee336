#!/usr/bin/env python3
"""
Tool Dispatcher
Routes a named tool call to its module and normalizes the outcome

Invariant: every call returns exactly one CallToolResult with exactly one text
block, whatever happens underneath. Unknown tool names are answered directly
with an error-flagged result; every other failure is raised inside the try
block and converted by the single top-level handler.
"""

import logging
from typing import Any, Dict, Optional

import mcp.types as types

from . import tools
from .client import EvolutionClient
from .errors import (
    ArgumentsMissingError,
    EvolutionMCPError,
    create_error_result,
    create_success_result,
    create_unknown_tool_result,
)

logger = logging.getLogger(__name__)


async def call_tool(
    name: str,
    arguments: Optional[Dict[str, Any]],
    client: EvolutionClient,
) -> types.CallToolResult:
    """
    Execute a tool call and wrap the result

    Args:
        name: Tool name as sent by the host
        arguments: Argument bag, or None when the host sent none
        client: Shared gateway client

    Returns:
        Success or error envelope; never raises
    """
    logger.info(f"🔧 Executing tool: {name}")

    try:
        if name not in tools.TOOL_MODULES:
            logger.warning(f"Unknown tool requested: {name}")
            return create_unknown_tool_result(name)

        if arguments is None and tools.requires_arguments(name):
            raise ArgumentsMissingError()

        module = tools.get_tool_module(name)
        result = await module.execute(arguments, client)
        return create_success_result(result)

    except EvolutionMCPError as e:
        logger.warning(f"Tool {name} failed: {e}")
        return create_error_result(e)
    except Exception as e:
        logger.error(f"Tool execution failed for {name}: {e}", exc_info=True)
        return create_error_result(e)
