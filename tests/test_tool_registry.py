import asyncio
import json

import httpx
from fastmcp import Client
from mcp.server.fastmcp import FastMCP

from tools.service_info import SERVICE_METADATA_URI, get_service_metadata
from tools.tool_registry import register_all_tools
from tools.widgets import RECREATION_WIDGET_URI


def _app():
    app = FastMCP("funrec-test")
    register_all_tools(app)
    return app


def test_tools_are_registered():
    tools = asyncio.run(_app().list_tools())

    by_name = {t.name: t for t in tools}
    assert set(by_name) == {"get-FunRec", "search-activities"}
    schema = by_name["get-FunRec"].inputSchema
    assert set(schema["required"]) == {"location_name", "latitude", "longitude"}
    assert by_name["search-activities"].inputSchema["required"] == ["location"]


def test_resources_and_prompts_are_registered():
    app = _app()

    uris = {str(r.uri) for r in asyncio.run(app.list_resources())}
    prompts = {p.name for p in asyncio.run(app.list_prompts())}

    assert {SERVICE_METADATA_URI, RECREATION_WIDGET_URI} <= uris
    assert "fun_activities_query" in prompts


def test_service_metadata_is_free_and_has_examples():
    metadata = get_service_metadata()

    assert metadata.version == "1.0.0"
    assert all(t.pricing.price_per_use == 0 for t in metadata.tools)
    assert all(t.pricing.currency == "USD" for t in metadata.tools)
    assert metadata.example_queries[0].queries[0] == "What fun activities around Carson?"
    assert metadata.widgets == ["funRec"]


def test_tools_advertise_output_schemas():
    tools = {t.name: t for t in asyncio.run(_app().list_tools())}

    assert "places" in json.dumps(tools["get-FunRec"].outputSchema)
    assert "results" in json.dumps(tools["search-activities"].outputSchema)


def test_coordinate_bounds_are_in_input_schema():
    tools = {t.name: t for t in asyncio.run(_app().list_tools())}

    props = tools["get-FunRec"].inputSchema["properties"]
    assert (props["latitude"]["minimum"], props["latitude"]["maximum"]) == (-90, 90)
    assert (props["longitude"]["minimum"], props["longitude"]["maximum"]) == (-180, 180)


async def _call(app, name, args):
    async with Client(app) as client:
        return await client.call_tool(name, args)


def test_get_fun_rec_over_mcp(mock_places, feature_collection):
    mock_places(lambda request: httpx.Response(200, json=feature_collection))

    result = asyncio.run(
        _call(_app(), "get-FunRec", {"location_name": "Long Beach", "latitude": 33.77, "longitude": -118.19})
    )

    places = result.structured_content["data"]["places"]
    assert [p["name"] for p in places] == ["Aquarium of the Pacific", "unknown"]
    assert result.structured_content["ui"]["type"] == "card"


def test_search_activities_over_mcp(mock_places, feature_collection):
    mock_places(lambda request: httpx.Response(200, json=feature_collection))

    result = asyncio.run(_call(_app(), "search-activities", {"location": "Long Beach"}))

    assert len(result.structured_content["data"]["results"]) == 2
    assert result.structured_content["ui"]["title"] == "Search Results"


def test_search_activities_over_mcp_error_variant(mock_places):
    mock_places(lambda request: httpx.Response(503))

    result = asyncio.run(_call(_app(), "search-activities", {"location": "Carson"}))

    assert result.structured_content["data"] is None
    assert result.structured_content["ui"]["variant"] == "error"
