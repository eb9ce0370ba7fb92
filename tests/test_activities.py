import asyncio

import httpx
import pytest
from pydantic import ValidationError

from config import Config
from tools.activities import get_fun_activities, search_activities
from utils.places_client import PlacesLookupError


def test_get_fun_activities_maps_every_feature(mock_places, feature_collection):
    requests = mock_places(lambda request: httpx.Response(200, json=feature_collection))

    result = asyncio.run(get_fun_activities("Long Beach", 33.77, -118.19))

    places = result.data["places"]
    assert len(places) == len(feature_collection["features"])
    assert places[0]["name"] == "Aquarium of the Pacific"
    assert places[0]["category"] == "tourism, leisure"
    assert places[1] == {
        "name": "unknown",
        "category": "",
        "address": "123 Main St",
        "latitude": 6,
        "longitude": 5,
    }
    assert result.ui["children"][0]["latitude"] == 33.77
    assert requests[0].url.params["lat"] == "33.77"


def test_get_fun_activities_propagates_lookup_failure(mock_places):
    mock_places(lambda request: httpx.Response(500))

    with pytest.raises(PlacesLookupError, match="failed"):
        asyncio.run(get_fun_activities("Carson", 33.83, -118.28))


def test_get_fun_activities_rejects_out_of_range_latitude(mock_places):
    requests = mock_places(lambda request: httpx.Response(200, json={"features": []}))

    with pytest.raises(ValidationError):
        asyncio.run(get_fun_activities("Carson", 123.0, -118.28))
    assert requests == []


def test_search_activities_returns_table(mock_places, feature_collection):
    requests = mock_places(lambda request: httpx.Response(200, json=feature_collection))

    result = asyncio.run(search_activities("  Long Beach "))

    assert requests[0].url.params["text"] == "Long Beach"
    assert len(result.data["results"]) == 2
    assert result.ui["title"] == "Search Results"


def test_search_activities_empty_is_warning(mock_places):
    mock_places(lambda request: httpx.Response(200, json={"features": []}))

    result = asyncio.run(search_activities("Atlantis"))

    assert result.data == {"results": []}
    assert result.ui["variant"] == "warning"
    assert "No activities found" in result.text


def test_search_activities_failure_is_error_variant(mock_places):
    def _fail(request):
        raise httpx.ConnectError("unreachable", request=request)

    mock_places(_fail)

    result = asyncio.run(search_activities("Carson"))

    assert result.data is None
    assert result.ui["type"] == "alert"
    assert result.ui["variant"] == "error"


def test_search_activities_rejects_blank_location(mock_places):
    with pytest.raises(ValidationError):
        asyncio.run(search_activities("   "))


def test_search_activities_malformed_feature_is_error_variant(mock_places):
    mock_places(lambda request: httpx.Response(200, json={"features": [None]}))

    result = asyncio.run(search_activities("Carson"))

    assert result.data is None
    assert result.ui["variant"] == "error"


def test_search_activities_without_key_is_error_variant(monkeypatch, mock_places):
    requests = mock_places(lambda request: httpx.Response(200, json={"features": []}))
    monkeypatch.setattr(Config, "GEOAPIFY_API_KEY", None)

    result = asyncio.run(search_activities("Carson"))

    assert result.data is None
    assert result.ui["variant"] == "error"
    assert requests == []
