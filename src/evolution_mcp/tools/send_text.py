#!/usr/bin/env python3
"""
Send Text MCP Tool
Sends a plain text WhatsApp message through a named gateway instance
"""

from typing import Any, Dict, Optional
import logging

from ..client import EvolutionClient
from ..errors import MissingRequiredArgumentError

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 1

TOOL_CONFIG = {
    "name": "sendText",
    "description": "Send a text message to a WhatsApp number",
    "inputSchema": {
        "type": "object",
        "properties": {
            "instance": {
                "type": "string",
                "description": "Instance name to use"
            },
            "number": {
                "type": "string",
                "description": "Phone number to send message to (with country code, no special chars)"
            },
            "text": {
                "type": "string",
                "description": "Text message to send"
            },
            "delay": {
                "type": "number",
                "description": "Delay in seconds before sending",
                "default": DEFAULT_DELAY
            }
        },
        "required": ["instance", "number", "text"]
    }
}


async def execute(arguments: Optional[Dict[str, Any]], client: EvolutionClient) -> Any:
    """
    Send a text message

    Args:
        arguments: Dict with 'instance', 'number', 'text' and optional 'delay'
        client: Shared gateway client

    Returns:
        The gateway's JSON response

    Raises:
        MissingRequiredArgumentError: If instance, number or text is missing
            or empty. Nothing is sent in that case.
    """
    arguments = arguments or {}
    instance = arguments.get("instance")
    number = arguments.get("number")
    text = arguments.get("text")

    if not instance or not number or not text:
        raise MissingRequiredArgumentError(TOOL_CONFIG["name"])

    delay = arguments.get("delay", DEFAULT_DELAY)

    logger.debug(f"📤 Sending text via instance {instance}")
    return await client.send_text(instance, number, text, delay)
