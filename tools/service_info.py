#!/usr/bin/env python3
"""
Service metadata for FunRec.
Advertises the service description, tool pricing, and example queries.
"""

from mcp.server.fastmcp import FastMCP

from models import ExampleQueryGroup, ServiceMetadata, ToolDescriptor
from tools.activities import ACTIVITIES_TOOL_ID
from tools.widgets import RECREATION_WIDGET_ID
from utils.responses import SEARCH_TOOL_ID

SERVICE_METADATA_URI = "funrec://service/metadata"

EXAMPLE_LOCATIONS = ["Carson", "Cerritos", "Long Beach"]


def example_query(location):
    return f"What fun activities around {location}?"


def get_service_metadata():
    """Build the metadata advertised to clients."""
    return ServiceMetadata(
        title="FunRec Service",
        description="A service for recommending fun activities around a location",
        version="1.0.0",
        author="Mark and Renzo",
        tags=["Activities", "fun", "recreation"],
        logo="https://img.icons8.com/?size=100&id=2qSx1JG5SSGn&format=png&color=000000",
        example_queries=[
            ExampleQueryGroup(
                category="Activities",
                queries=[example_query(loc) for loc in EXAMPLE_LOCATIONS],
            )
        ],
        tools=[
            ToolDescriptor(
                id=ACTIVITIES_TOOL_ID,
                name="Get FunRec",
                description="Fetches fun activities around the area",
            ),
            ToolDescriptor(
                id=SEARCH_TOOL_ID,
                name="Search Activities",
                description="Searches fun activities for a city, neighborhood or address",
            ),
        ],
        widgets=[RECREATION_WIDGET_ID],
    )


def register_service_info(app: FastMCP):
    """Register the metadata resource and example query prompt."""

    @app.resource(
        SERVICE_METADATA_URI,
        name="FunRec Service",
        description="Service description, pricing, and example queries",
        mime_type="application/json",
    )
    def service_metadata() -> dict:
        return get_service_metadata().model_dump()

    @app.prompt(
        name="fun_activities_query",
        description="Ask for fun activities around a location",
    )
    def fun_activities_query(location: str) -> str:
        return example_query(location)
