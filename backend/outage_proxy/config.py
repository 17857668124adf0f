from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # BC Hydro outage feed
    bchydro_outage_url: str = Field(default="https://www.bchydro.com/power-outages/app/outages-map-data.json")
    upstream_user_agent: str = Field(default="BCHydroProxy/1.0")

    # Cache lifetime (seconds) for the upstream body; also caps the client directive
    cache_max_age: int = Field(default=300)

    # Upper bound (seconds) on the Cache-Control max-age sent to clients
    client_cache_max_age: int = Field(default=60)

    # Serve fixture data for ?test=outage|no-outage|multiple. Never enable in production.
    test_mode: bool = Field(default=False)

    # CORS
    cors_origins: str = Field(default="*")

    log_level: str = Field(default="INFO")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",")]


settings = Settings()
