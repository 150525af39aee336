"""
Evolution API MCP Server
Exposes WhatsApp instance listing and text sending as MCP tools over stdio
"""

__version__ = "0.1.0"
