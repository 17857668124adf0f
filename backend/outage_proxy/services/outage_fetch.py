"""Obtain the full outage dataset: cache first, then BC Hydro, repopulating the cache.

Concurrent misses may each hit upstream and each write the cache; the last
write wins. That is accepted.
"""

import json
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from outage_proxy.config import Settings
from outage_proxy.exceptions import MalformedDataError
from outage_proxy.services import bchydro_client
from outage_proxy.services.outage_cache import OutageCache

logger = logging.getLogger(__name__)

# One slot for the whole service, independent of caller coordinates
OUTAGES_CACHE_KEY = "https://cache.bchydro-proxy.internal/outages"


@dataclass(frozen=True)
class OutageFetchResult:
    outages: list[dict]
    cache_hit: bool
    cache_max_age: int


def _decode(body: str) -> list[dict]:
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedDataError(f"Outage feed is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise MalformedDataError(
            f"Outage feed must be a JSON array, got {type(data).__name__}"
        )
    return data


async def get_outages_with_cache(
    cache: OutageCache,
    settings: Settings,
    fetch: Callable[..., Awaitable[str]] | None = None,
) -> OutageFetchResult:
    fetch = fetch or bchydro_client.fetch_outage_feed
    cache_max_age = settings.cache_max_age

    cached = cache.get(OUTAGES_CACHE_KEY)
    if cached is not None:
        logger.info("Cache hit - using cached data")
        return OutageFetchResult(_decode(cached), cache_hit=True, cache_max_age=cache_max_age)

    logger.info("Fetching from BC Hydro API")
    body = await fetch(settings.bchydro_outage_url, settings.upstream_user_agent)
    outages = _decode(body)

    # Only well-formed bodies are cached
    cache.put(OUTAGES_CACHE_KEY, body, cache_max_age)
    logger.info("Fetched %d outages from BC Hydro, cached for %ds", len(outages), cache_max_age)

    return OutageFetchResult(outages, cache_hit=False, cache_max_age=cache_max_age)
