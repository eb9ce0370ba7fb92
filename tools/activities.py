#!/usr/bin/env python3
"""
Activity tools for FunRec.
Looks up tourism and leisure places and returns them with a UI description.
"""

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from config import PlacesConfigError
from models import ActivitiesInput, ActivitiesResult, SearchInput, SearchResult
from utils.place_mapper import map_features
from utils.places_client import (
    PlacesLookupError,
    fetch_places_by_text,
    fetch_places_near,
)
from utils.responses import (
    SEARCH_TOOL_ID,
    build_activities_result,
    build_error_result,
    build_search_result,
)

logger = logging.getLogger("mcp.tools")

ACTIVITIES_TOOL_ID = "get-FunRec"


async def get_fun_activities(location_name, latitude, longitude):
    """Places around the given coordinates, shown on a map."""
    query = ActivitiesInput(
        location_name=location_name, latitude=latitude, longitude=longitude
    )
    logger.info(
        f"Requested activities at {query.location_name} ({query.latitude},{query.longitude})"
    )
    features = await fetch_places_near(query.latitude, query.longitude)
    records = map_features(features)
    return build_activities_result(
        query.location_name, query.latitude, query.longitude, records
    )


async def search_activities(location):
    """Places matching a free-text location, shown as a table."""
    query = SearchInput(location=location)
    logger.info(f"Searching activities for '{query.location}'")
    try:
        features = await fetch_places_by_text(query.location)
    except (PlacesLookupError, PlacesConfigError) as e:
        logger.error(f"Activity search for '{query.location}' failed: {e}")
        return build_error_result()
    return build_search_result(query.location, map_features(features))


def register_activity_tools(app: FastMCP):
    """Register the activity tools with the FastMCP app."""

    @app.tool(
        name=ACTIVITIES_TOOL_ID,
        description="Fetches fun activities around the area",
    )
    async def get_fun_rec(
        location_name: Annotated[str, Field(description="Location name")],
        latitude: Annotated[
            float, Field(ge=-90, le=90, description="Latitude coordinate")
        ],
        longitude: Annotated[
            float, Field(ge=-180, le=180, description="Longitude coordinate")
        ],
    ) -> ActivitiesResult:
        """Get FunRec: list of places with fun activities near a location."""
        result = await get_fun_activities(location_name, latitude, longitude)
        return ActivitiesResult.model_validate(result.model_dump())

    @app.tool(
        name=SEARCH_TOOL_ID,
        description="Searches fun activities for a city, neighborhood or address",
    )
    async def search_activities_tool(
        location: Annotated[str, Field(description="Location to search")],
    ) -> SearchResult:
        """Search Activities: form submission from the recreation widget."""
        result = await search_activities(location)
        return SearchResult.model_validate(result.model_dump())
