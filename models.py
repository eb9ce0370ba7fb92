#!/usr/bin/env python3
"""
Data models for the FunRec MCP server.
Typed shapes for places, tool inputs/outputs, and service metadata.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaceFeature(BaseModel):
    """A single place as returned by the places API."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    formatted_address: str = ""
    coordinates: Tuple[float, float]  # (longitude, latitude)


class PlaceRecord(BaseModel):
    """Flat display record derived from a PlaceFeature."""

    name: str
    category: str
    address: str
    latitude: float
    longitude: float


class ActivitiesInput(BaseModel):
    location_name: str = Field(description="Location name")
    latitude: float = Field(ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(ge=-180, le=180, description="Longitude coordinate")


class ActivitiesOutput(BaseModel):
    """List of places with fun activities."""

    places: List[PlaceRecord]


class SearchInput(BaseModel):
    location: str = Field(description="City, neighborhood or address to search")

    @field_validator("location")
    @classmethod
    def _not_blank(cls, value):
        if not value.strip():
            raise ValueError("location must not be blank")
        return value.strip()


class SearchOutput(BaseModel):
    results: List[PlaceRecord]


class ToolResult(BaseModel):
    """What every tool hands back: summary text, structured data and a UI tree."""

    text: str
    data: Optional[Dict] = None
    ui: Dict


class ActivitiesResult(ToolResult):
    data: ActivitiesOutput


class SearchResult(ToolResult):
    data: Optional[SearchOutput] = None


class Pricing(BaseModel):
    price_per_use: float = 0
    currency: str = "USD"


class ToolDescriptor(BaseModel):
    id: str
    name: str
    description: str
    pricing: Pricing = Field(default_factory=Pricing)


class ExampleQueryGroup(BaseModel):
    category: str
    queries: List[str]


class ServiceMetadata(BaseModel):
    title: str
    description: str
    version: str
    author: str
    tags: List[str] = Field(default_factory=list)
    logo: Optional[str] = None
    example_queries: List[ExampleQueryGroup] = Field(default_factory=list)
    tools: List[ToolDescriptor] = Field(default_factory=list)
    widgets: List[str] = Field(default_factory=list)
