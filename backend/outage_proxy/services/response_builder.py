"""Filter the outage feed down to records containing the caller's coordinate.

Pure: no I/O, no shared state, inputs are never mutated. Provenance
(cache hit or fresh fetch) arrives as a plain flag from outage_fetch.
"""

from outage_proxy.schemas.outage import LookupCoordinates, OutageLookupResponse, OutageSummary
from outage_proxy.services.crew_status import get_crew_status_detail
from outage_proxy.services.geometry import is_point_in_polygon

# Upstream keys copied verbatim into each OutageSummary
_PROJECTED_FIELDS = (
    "id",
    "municipality",
    "area",
    "cause",
    "numCustomersOut",
    "crewStatus",
    "crewStatusDescription",
    "dateOff",
    "dateOn",
    "lastUpdated",
    "regionName",
    "showEtr",
    "crewEtr",
    "latitude",
    "longitude",
)


def _affects(outage, lat: float, lon: float) -> bool:
    if not isinstance(outage, dict):
        return False
    polygon = outage.get("polygon")
    if not polygon:
        return False
    return is_point_in_polygon(lat, lon, polygon)


def _project(outage: dict) -> OutageSummary:
    fields = {key: outage.get(key) for key in _PROJECTED_FIELDS}
    fields["crewStatusDetail"] = get_crew_status_detail(outage.get("crewStatus"))
    return OutageSummary.model_validate(fields)


def build_response(
    cache_hit: bool,
    lat: float,
    lon: float,
    all_outages: list[dict],
) -> OutageLookupResponse:
    affected = [o for o in all_outages if _affects(o, lat, lon)]

    return OutageLookupResponse(
        cached=cache_hit,
        coordinates=LookupCoordinates(latitude=lat, longitude=lon),
        total_outages=len(all_outages),
        affecting_you=len(affected),
        outages=[_project(o) for o in affected],
    )
