"""Caller location models."""

from dataclasses import dataclass

from weatherdesk.errors import LocationError


@dataclass(frozen=True)
class Coordinate:
    latitude: str
    longitude: str


@dataclass(frozen=True)
class LocationInfo:
    ip: str
    city: str
    region: str
    country: str
    coordinate: Coordinate


def parse_coordinate(loc: str) -> Coordinate:
    """Split a "lat,lon" string into a Coordinate.

    Raises LocationError unless there are exactly two non-empty components.
    """
    parts = [p.strip() for p in loc.split(",")]
    if len(parts) != 2 or not all(parts):
        raise LocationError(f"Malformed location string: {loc!r}")
    return Coordinate(latitude=parts[0], longitude=parts[1])
