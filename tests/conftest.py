import httpx
import pytest

from config import Config
from utils import http_client


@pytest.fixture
def geoapify_key(monkeypatch):
    monkeypatch.setattr(Config, "GEOAPIFY_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def mock_places(monkeypatch, geoapify_key):
    """Route the shared HTTP client through a handler; returns the captured requests."""
    requests = []

    def _install(handler):
        def _recording(request):
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_recording))
        monkeypatch.setattr(http_client, "_http_client", client)
        return requests

    return _install


@pytest.fixture
def feature_collection():
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {
                    "name": "Aquarium of the Pacific",
                    "categories": ["tourism", "leisure"],
                    "formatted": "100 Aquarium Way, Long Beach, CA",
                },
                "geometry": {"type": "Point", "coordinates": [-118.197, 33.762]},
            },
            {
                "type": "Feature",
                "properties": {
                    "categories": [],
                    "formatted": "123 Main St",
                },
                "geometry": {"type": "Point", "coordinates": [5, 6]},
            },
        ],
    }
