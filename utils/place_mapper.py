#!/usr/bin/env python3
"""
Place mapping utilities for FunRec.
Flattens places API features into display records.
"""

from models import PlaceRecord

UNKNOWN_NAME = "unknown"


def map_feature(feature):
    """Convert one PlaceFeature into a PlaceRecord."""
    lon, lat = feature.coordinates
    return PlaceRecord(
        name=feature.name if feature.name is not None else UNKNOWN_NAME,
        category=", ".join(feature.categories),
        address=feature.formatted_address,
        latitude=lat,
        longitude=lon,
    )


def map_features(features):
    """Map features to records, one per feature, in the same order."""
    return [map_feature(f) for f in features]
