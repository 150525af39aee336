"""
Evolution API MCP Tools
Each tool is a standalone module with a standardized interface
"""

# Tool interface requirements:
# 1. TOOL_CONFIG dict with name, description, inputSchema
# 2. async execute(arguments, client) function

from types import ModuleType
from typing import Dict, List

import mcp.types as types

from . import fetch_instances, send_text

# Fixed registry, in listing order
TOOL_MODULES: Dict[str, ModuleType] = {
    module.TOOL_CONFIG["name"]: module
    for module in (fetch_instances, send_text)
}


def list_tools() -> List[types.Tool]:
    """Tool descriptors served on tools/list"""
    return [
        types.Tool(
            name=module.TOOL_CONFIG["name"],
            description=module.TOOL_CONFIG["description"],
            inputSchema=module.TOOL_CONFIG["inputSchema"]
        )
        for module in TOOL_MODULES.values()
    ]


def get_tool_module(name: str) -> ModuleType:
    """Look up a tool module by name; raises KeyError for unknown tools"""
    return TOOL_MODULES[name]


def requires_arguments(name: str) -> bool:
    """True when the tool declares at least one required argument"""
    return bool(TOOL_MODULES[name].TOOL_CONFIG["inputSchema"].get("required"))


__all__ = ["TOOL_MODULES", "list_tools", "get_tool_module", "requires_arguments"]
