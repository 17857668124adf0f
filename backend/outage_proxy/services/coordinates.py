"""Parsing and service-area checks for caller-supplied coordinates."""

import re
from dataclasses import dataclass

from outage_proxy.services.geometry import is_valid_latitude, is_valid_longitude
from outage_proxy.territory.definitions import BC_SERVICE_AREA

# Plain decimal literal; float() alone would also take "4_9.28", "nan" and "inf"
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


def _parse_float(value: str | None) -> float | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not _DECIMAL_PATTERN.fullmatch(value):
        return None
    return float(value)


def parse_coordinates(lat_str: str | None, lon_str: str | None) -> Coordinates | None:
    """Parse lat/lon query strings. Returns None unless both are valid."""
    lat = _parse_float(lat_str)
    lon = _parse_float(lon_str)

    if not is_valid_latitude(lat) or not is_valid_longitude(lon):
        return None

    return Coordinates(lat=lat, lon=lon)


def is_in_bc_area(lat, lon) -> bool:
    if not is_valid_latitude(lat) or not is_valid_longitude(lon):
        return False
    return BC_SERVICE_AREA.contains(lat, lon)
