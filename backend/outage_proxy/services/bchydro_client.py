"""BC Hydro outage map client.

Fetches the public outage feed (a JSON array of outage objects with
lon/lat polygons). No authentication required. The raw body is returned
so the caller can cache it verbatim. One attempt per call; failures propagate.
"""

import logging

import httpx

from outage_proxy.config import settings
from outage_proxy.exceptions import UpstreamFetchError

logger = logging.getLogger(__name__)


async def fetch_outage_feed(url: str | None = None, user_agent: str | None = None) -> str:
    """GET the outage feed and return the body text. Raises UpstreamFetchError."""
    url = url or settings.bchydro_outage_url
    headers = {"User-Agent": user_agent or settings.upstream_user_agent}

    try:
        async with httpx.AsyncClient(headers=headers) as client:
            resp = await client.get(url)
    except httpx.HTTPError as e:
        logger.warning("BC Hydro fetch failed: %s", e)
        raise UpstreamFetchError(f"BC Hydro API request failed: {e}") from e

    if not resp.is_success:
        logger.warning("BC Hydro API returned %d", resp.status_code)
        raise UpstreamFetchError(
            f"BC Hydro API returned {resp.status_code}",
            status_code=resp.status_code,
        )

    return resp.text
