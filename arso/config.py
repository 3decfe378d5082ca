"""Configuration settings for the application."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "ARSO Potresi & Vreme API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Upstream documents
    earthquake_url: str = "http://www.arso.gov.si/potresi/obvestila%20o%20potresih/aip/"
    station_index_url: str = (
        "http://meteo.arso.gov.si/uploads/probase/www/observ/surface/text/sl/observation_si/index.html"
    )
    station_host: str = "http://meteo.arso.gov.si/"
    automated_marker: str = "observationAms"

    # Outbound HTTP
    http_timeout: float = 10.0
    max_concurrency: int = 8
    user_agent: str = "arso-api/1.0"

    # Response cache
    cache_ttl_seconds: float = 300.0
    cache_sweep_seconds: float = 60.0

    static_dir: str = "static"
    static_listing: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
