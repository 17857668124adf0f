from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LookupCoordinates(_CamelModel):
    latitude: float
    longitude: float


class OutageSummary(_CamelModel):
    """Public projection of one upstream outage record.

    Upstream values are echoed as-is, without coercion, so a record with odd
    types still projects. Timestamps are epoch milliseconds in a healthy feed.
    """
    id: Any = None
    municipality: Any = None
    area: Any = None
    cause: Any = None
    num_customers_out: Any = None
    crew_status: Any = None
    crew_status_description: Any = None
    crew_status_detail: str | None = None
    date_off: Any = None
    date_on: Any = None
    last_updated: Any = None
    region_name: Any = None
    show_etr: Any = None
    crew_etr: Any = None
    latitude: Any = None
    longitude: Any = None


class OutageLookupResponse(_CamelModel):
    cached: bool
    coordinates: LookupCoordinates
    total_outages: int = 0
    affecting_you: int = 0
    outages: list[OutageSummary] = []


class ErrorResponse(BaseModel):
    error: str
    outages: list = []
