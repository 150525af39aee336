#!/usr/bin/env python3
"""
Fetch Instances MCP Tool
Lists every WhatsApp instance known to the Evolution API gateway
"""

from typing import Any, Dict, Optional

from ..client import EvolutionClient

TOOL_CONFIG = {
    "name": "fetchInstances",
    "description": "Lists all WhatsApp instances",
    "inputSchema": {
        "type": "object",
        "properties": {},
        "required": []
    }
}


async def execute(arguments: Optional[Dict[str, Any]], client: EvolutionClient) -> Any:
    """
    Return the gateway's instance list as-is

    Arguments are ignored; the tool takes no parameters.
    """
    return await client.fetch_instances()
