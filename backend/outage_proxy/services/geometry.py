"""Coordinate and polygon validation plus point-in-polygon containment.

BC Hydro polygons are flat sequences of (longitude, latitude) pairs:
  [lon1, lat1, lon2, lat2, ...]
They need not be explicitly closed. Containment uses ray casting on the
equirectangular plane, which is accurate enough at regional scale.

None of these functions raise: malformed input returns False so that a bad
upstream record is simply excluded from results.
"""

import math


def _is_finite_number(value) -> bool:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_valid_latitude(value) -> bool:
    return _is_finite_number(value) and -90 <= value <= 90


def is_valid_longitude(value) -> bool:
    return _is_finite_number(value) and -180 <= value <= 180


def is_valid_polygon(polygon) -> bool:
    """Structural check only: even length, at least 3 vertices, all finite numbers.

    Winding order and self-intersection are not checked.
    """
    if not isinstance(polygon, (list, tuple)):
        return False
    if len(polygon) % 2 != 0:
        return False
    if len(polygon) < 6:
        return False
    return all(_is_finite_number(coord) for coord in polygon)


def is_point_in_polygon(lat, lon, polygon) -> bool:
    """Ray-casting parity test for (lat, lon) against a flat lon/lat polygon.

    Points exactly on an edge or vertex get whatever the parity rule yields.
    """
    if not _is_finite_number(lat) or not _is_finite_number(lon):
        return False
    if not is_valid_polygon(polygon):
        return False

    points = [(polygon[k], polygon[k + 1]) for k in range(0, len(polygon), 2)]

    inside = False
    j = len(points) - 1
    for i in range(len(points)):
        xi, yi = points[i]
        xj, yj = points[j]

        # yj != yi whenever the first clause holds, so the division is safe
        if (yi > lat) != (yj > lat) and lon < (xj - xi) * (lat - yi) / (yj - yi) + xi:
            inside = not inside
        j = i

    return inside
