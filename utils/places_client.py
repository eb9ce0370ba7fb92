#!/usr/bin/env python3
"""
Places lookup client for FunRec.
Queries the Geoapify Places API by coordinates or free text and parses the
GeoJSON feature collection into PlaceFeature objects.
"""

import asyncio
import logging

import httpx
from pydantic import ValidationError

from config import Config
from models import PlaceFeature
from utils.http_client import fetch_json

logger = logging.getLogger("mcp.tools")


class PlacesLookupError(Exception):
    """The places API could not be reached or returned an unusable answer."""


def build_places_params(latitude=None, longitude=None, text=None):
    """Build query parameters for either a coordinate or a text lookup."""
    by_coords = latitude is not None and longitude is not None
    if by_coords == (text is not None):
        raise ValueError("pass either latitude/longitude or text, not both")

    params = {
        "categories": Config.PLACES_CATEGORIES,
        "limit": Config.PLACES_LIMIT,
        "apiKey": Config.get_geoapify_api_key(),
    }
    if by_coords:
        params["lat"] = latitude
        params["lon"] = longitude
    else:
        params["text"] = text
    return params


def parse_feature_collection(payload):
    """Turn a GeoJSON feature collection into a list of PlaceFeature."""
    if not isinstance(payload, dict) or not isinstance(payload.get("features"), list):
        raise PlacesLookupError("places response has no feature list")

    features = []
    for i, item in enumerate(payload["features"]):
        if not isinstance(item, dict):
            raise PlacesLookupError(f"feature {i} is malformed")
        props = item.get("properties") or {}
        geometry = item.get("geometry") or {}
        if not isinstance(props, dict) or not isinstance(geometry, dict):
            raise PlacesLookupError(f"feature {i} is malformed")
        try:
            features.append(
                PlaceFeature(
                    name=props.get("name"),
                    categories=props.get("categories") or [],
                    formatted_address=props.get("formatted") or "",
                    coordinates=geometry.get("coordinates"),
                )
            )
        except ValidationError as e:
            raise PlacesLookupError(f"feature {i} is malformed: {e}") from e
    return features


async def _lookup(params, description):
    try:
        payload = await fetch_json(Config.PLACES_URL, params=params)
    except asyncio.TimeoutError as e:
        logger.warning(f"Places lookup for {description} timed out")
        raise PlacesLookupError(f"places lookup for {description} timed out") from e
    except httpx.HTTPError as e:
        logger.warning(f"Places lookup for {description} failed: {e}")
        raise PlacesLookupError(f"places lookup for {description} failed: {e}") from e
    except ValueError as e:
        raise PlacesLookupError(f"places response for {description} is not JSON") from e

    features = parse_feature_collection(payload)
    logger.info(f"Places lookup for {description} returned {len(features)} features")
    return features


async def fetch_places_near(latitude, longitude):
    """Fetch tourism/leisure places around a coordinate pair."""
    params = build_places_params(latitude=latitude, longitude=longitude)
    return await _lookup(params, f"({latitude},{longitude})")


async def fetch_places_by_text(query):
    """Fetch tourism/leisure places matching a free-text location."""
    params = build_places_params(text=query)
    return await _lookup(params, f"'{query}'")
