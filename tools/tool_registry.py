#!/usr/bin/env python3
"""
Tool registry for the FunRec MCP server.
Centralizes tool, widget, and metadata registration.
"""

from mcp.server.fastmcp import FastMCP

from tools.activities import register_activity_tools
from tools.service_info import register_service_info
from tools.widgets import register_widgets


def register_all_tools(app: FastMCP):
    """Register all FunRec tools and resources with the FastMCP app."""
    register_activity_tools(app)  # Coordinate lookup and form search
    register_widgets(app)  # Recreation widget
    register_service_info(app)  # Metadata and example queries
