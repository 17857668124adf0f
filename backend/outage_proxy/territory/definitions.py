from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceArea:
    area_id: str
    name: str
    min_latitude: float
    max_latitude: float
    min_longitude: float
    max_longitude: float

    def contains(self, lat: float, lon: float) -> bool:
        """Inclusive bounding-box membership."""
        return (
            self.min_latitude <= lat <= self.max_latitude
            and self.min_longitude <= lon <= self.max_longitude
        )


# Approximate bounds for British Columbia
BC_SERVICE_AREA = ServiceArea(
    area_id="BC",
    name="British Columbia, Canada",
    min_latitude=48.3,
    max_latitude=60.0,
    min_longitude=-139.0,
    max_longitude=-114.0,
)

# Downtown Vancouver; the fixed caller location used by test mode
VANCOUVER_DOWNTOWN = (49.2827, -123.1207)
