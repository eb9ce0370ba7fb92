#!/usr/bin/env python3
"""
Response builders for FunRec tools.
Turns place records into summary text, structured data and a UI tree.
"""

from config import Config
from models import ActivitiesOutput, SearchOutput, ToolResult
from utils.ui import (
    Alert,
    Card,
    Form,
    FormField,
    MapMarker,
    MapView,
    Table,
    TableColumn,
)

SEARCH_TOOL_ID = "search-activities"

RESULT_COLUMNS = (
    TableColumn(key="name", header="Name"),
    TableColumn(key="category", header="Category"),
    TableColumn(key="address", header="Address"),
)


def format_place_list(records):
    """One '- name' line per record."""
    return "\n".join(f"- {r.name}" for r in records)


def build_activities_result(location_name, latitude, longitude, records):
    """Card with a map of every place around the requested coordinates."""
    markers = tuple(
        MapMarker(
            latitude=r.latitude,
            longitude=r.longitude,
            title=r.name,
            description=f"Explore {r.name}",
            text=r.name,
        )
        for r in records
    )
    card = Card(
        title=f"Fun Activities in {location_name}",
        content=f"Discover exciting activities in {location_name} today!",
        render_mode="page",
        children=(
            MapView(
                latitude=latitude,
                longitude=longitude,
                zoom=Config.MAP_ZOOM,
                style=Config.MAP_STYLE,
                markers=markers,
            ),
        ),
    )
    return ToolResult(
        text=f"Here's a list of FUN activities in {location_name}:\n"
        + format_place_list(records),
        data=ActivitiesOutput(places=records).model_dump(),
        ui=card.to_dict(),
    )


def build_search_result(location, records):
    """Results of the form-submission search; falls back to the empty variant."""
    if not records:
        return build_empty_search_result(location)

    data = SearchOutput(results=records).model_dump()
    rows = data["results"]
    card = Card(
        title="Search Results",
        children=(
            Alert(
                variant="info",
                title="Search Complete",
                message=f"Found {len(records)} matching results",
            ),
            Table(columns=RESULT_COLUMNS, rows=tuple(rows)),
        ),
    )
    return ToolResult(
        text=f"Found {len(records)} activities near {location}:\n"
        + format_place_list(records),
        data=data,
        ui=card.to_dict(),
    )


def build_empty_search_result(location):
    alert = Alert(
        variant="warning",
        title="No activities found",
        message=f"No activities found near {location}. Try a nearby city.",
    )
    return ToolResult(
        text=f"No activities found near {location}",
        data={"results": []},
        ui=alert.to_dict(),
    )


def build_error_result(message="Unable to load activities. Please try again later."):
    alert = Alert(variant="error", title="Error", message=message)
    return ToolResult(text="Failed to load activities", data=None, ui=alert.to_dict())


def build_recreation_widget():
    """Pinned widget: a location form that submits to the search tool."""
    card = Card(
        title="Recreation Activities",
        children=(
            Alert(variant="info", message="Explore fun activities near you!"),
            Form(
                title="Find activities",
                fields=(
                    FormField(
                        name="location",
                        label="Location",
                        placeholder="e.g. Long Beach, CA",
                    ),
                ),
                submit_tool=SEARCH_TOOL_ID,
                submit_label="Search",
            ),
        ),
    )
    return ToolResult(
        text="Recreation search ready", data={"results": []}, ui=card.to_dict()
    )
