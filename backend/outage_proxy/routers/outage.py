import logging

from fastapi import APIRouter, Depends, Query, Response

from outage_proxy.config import Settings, settings
from outage_proxy.exceptions import (
    InvalidCoordinatesError,
    InvalidTestModeError,
    OutsideServiceAreaError,
)
from outage_proxy.responses import PrettyJSONResponse
from outage_proxy.schemas.outage import ErrorResponse, OutageLookupResponse
from outage_proxy.services.coordinates import is_in_bc_area, parse_coordinates
from outage_proxy.services.outage_cache import OutageCache, get_outage_cache
from outage_proxy.services.outage_fetch import get_outages_with_cache
from outage_proxy.services.response_builder import build_response
from outage_proxy.services.test_mode import VALID_TEST_MODES, get_test_mode, get_test_outages
from outage_proxy.territory.definitions import BC_SERVICE_AREA, VANCOUVER_DOWNTOWN

logger = logging.getLogger(__name__)

router = APIRouter(tags=["outages"])


def get_settings() -> Settings:
    return settings


@router.options("/", include_in_schema=False)
async def options_outages(config: Settings = Depends(get_settings)):
    """Bare OPTIONS (no preflight headers) still gets 200 and the CORS headers."""
    origins = config.cors_origin_list
    return Response(
        status_code=200,
        headers={
            "Access-Control-Allow-Origin": "*" if "*" in origins else origins[0],
            "Access-Control-Allow-Methods": "GET, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
        },
    )


def _render(payload: OutageLookupResponse, cache_control: str) -> PrettyJSONResponse:
    return PrettyJSONResponse(
        content=payload.model_dump(mode="json", by_alias=True),
        headers={"Cache-Control": cache_control},
    )


@router.get(
    "/",
    response_model=OutageLookupResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def lookup_outages(
    lat: str | None = Query(None),
    lon: str | None = Query(None),
    test: str | None = Query(None),
    cache: OutageCache = Depends(get_outage_cache),
    config: Settings = Depends(get_settings),
):
    """Outages whose polygon contains (lat, lon)."""
    # Test mode is checked before any coordinate validation
    if test:
        status = get_test_mode(config.test_mode, test)
        if status.enabled and not status.valid:
            raise InvalidTestModeError(
                f"Invalid test mode. Valid options: {', '.join(VALID_TEST_MODES)}"
            )
        if status.mode:
            logger.info("Test mode enabled: %s", status.mode)
            test_lat, test_lon = VANCOUVER_DOWNTOWN
            payload = build_response(False, test_lat, test_lon, get_test_outages(status.mode))
            return _render(payload, "no-cache")

    coords = parse_coordinates(lat, lon)
    if coords is None:
        raise InvalidCoordinatesError(
            "Missing or invalid coordinates. Provide ?lat=XX.XXXX&lon=YY.YYYY query parameters"
        )

    if not is_in_bc_area(coords.lat, coords.lon):
        raise OutsideServiceAreaError(
            f"Coordinates outside BC Hydro service area ({BC_SERVICE_AREA.name})"
        )

    result = await get_outages_with_cache(cache, config)
    payload = build_response(result.cache_hit, coords.lat, coords.lon, result.outages)

    max_age = min(config.client_cache_max_age, result.cache_max_age)
    return _render(payload, f"public, max-age={max_age}")
