# shared/geo.py
"""Validation and distance helpers shared by the school endpoints."""

import math
from typing import Any, Iterable, List, Mapping, Optional

EARTH_RADIUS_KM = 6371

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def parse_coordinate(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` if it isn't one.

    Accepts ints, floats and numeric strings. Booleans, blank strings,
    digit-grouping underscores, NaN, infinities and integers too large
    for a float are rejected. Zero is a valid coordinate.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        if "_" in value:
            return None
        value = value.strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def _in_range(number: float, bounds) -> bool:
    low, high = bounds
    return low <= number <= high


def _is_non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_school_input(data: Mapping[str, Any]) -> List[str]:
    errors = []

    if not _is_non_empty_text(data.get("name")):
        errors.append("Name is required and must be a non-empty string")

    if not _is_non_empty_text(data.get("address")):
        errors.append("Address is required and must be a non-empty string")

    latitude = parse_coordinate(data.get("latitude"))
    if latitude is None:
        errors.append("Latitude is required and must be a valid number")
    elif not _in_range(latitude, LATITUDE_RANGE):
        errors.append("Latitude must be between -90 and 90")

    longitude = parse_coordinate(data.get("longitude"))
    if longitude is None:
        errors.append("Longitude is required and must be a valid number")
    elif not _in_range(longitude, LONGITUDE_RANGE):
        errors.append("Longitude must be between -180 and 180")

    return errors


def is_valid_location(latitude: Any, longitude: Any) -> bool:
    lat = parse_coordinate(latitude)
    lon = parse_coordinate(longitude)
    if lat is None or lon is None:
        return False
    return _in_range(lat, LATITUDE_RANGE) and _in_range(lon, LONGITUDE_RANGE)


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in km between two points given in degrees (haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    a = min(a, 1.0)  # rounding can push antipodal points past 1
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def sort_by_distance(schools: Iterable[Mapping[str, Any]], latitude: float, longitude: float) -> List[dict]:
    """Attach a rounded ``distance`` to each school and order nearest first.

    ``sorted`` is stable, so schools at the same distance keep their
    incoming order.
    """
    annotated = [
        {
            **school,
            "distance": round(
                calculate_distance(latitude, longitude, school["latitude"], school["longitude"]), 2
            ),
        }
        for school in schools
    ]
    return sorted(annotated, key=lambda school: school["distance"])
