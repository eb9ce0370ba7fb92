#!/usr/bin/env python3
"""
Widget resources for FunRec.
Provides the pinnable recreation widget backed by the search tool.
"""

from mcp.server.fastmcp import FastMCP

from utils.responses import build_recreation_widget

RECREATION_WIDGET_ID = "funRec"
RECREATION_WIDGET_URI = f"ui://widgets/{RECREATION_WIDGET_ID}"


def register_widgets(app: FastMCP):
    """Register widget resources with the FastMCP app."""

    @app.resource(
        RECREATION_WIDGET_URI,
        name="Recreation Activities",
        description="Shows a form for finding recreational activities (label: Recreation, icon: map)",
        mime_type="application/json",
    )
    def recreation_widget() -> dict:
        return build_recreation_widget().model_dump()
