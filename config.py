#!/usr/bin/env python3
"""
Configuration module for the FunRec MCP server.
Centralizes API keys, lookup settings, and environment variables.
"""

import os


class PlacesConfigError(RuntimeError):
    """Raised when the places API cannot be called because of missing settings."""


class Config:
    """Configuration class for FunRec settings."""

    # API Keys (no defaults, must come from the environment)
    GEOAPIFY_API_KEY = os.getenv("GEOAPIFY_API_KEY")
    SERVICE_API_KEY = os.getenv("SERVICE_API_KEY")

    # Places API Settings
    PLACES_URL = "https://api.geoapify.com/v2/places"
    PLACES_CATEGORIES = "tourism,leisure"
    PLACES_LIMIT = 10

    # HTTP Settings
    HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10.0"))
    HTTP_CONNECT_TIMEOUT = float(os.getenv("HTTP_CONNECT_TIMEOUT", "5.0"))
    PLACES_LOOKUP_TIMEOUT = float(os.getenv("PLACES_LOOKUP_TIMEOUT", "15.0"))
    USER_AGENT = "FunRecMCP/1.0"

    # Server Settings
    SERVER_HOST = os.getenv("SERVER_HOST", "localhost")
    SERVER_PORT = int(os.getenv("PORT", "2022"))
    MCP_SERVER_URL = os.getenv("MCP_SERVER_URL", f"http://{SERVER_HOST}:{SERVER_PORT}")

    # Map Settings
    MAP_STYLE = "mapbox://styles/mapbox/streets-v12"
    MAP_ZOOM = 10

    # File Paths
    LOG_DIR = os.getenv("LOG_DIR", "logs")

    @classmethod
    def get_geoapify_api_key(cls):
        """Get the Geoapify key or fail if it is not configured."""
        if not cls.GEOAPIFY_API_KEY:
            raise PlacesConfigError("GEOAPIFY_API_KEY environment variable not set.")
        return cls.GEOAPIFY_API_KEY

    @classmethod
    def has_geoapify_key(cls):
        """Check if places lookups can be made."""
        return bool(cls.GEOAPIFY_API_KEY)
