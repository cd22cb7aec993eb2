from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_dashboard.models.preferences import DEFAULT_CITY
from weather_dashboard.models.weather import UnitSystem


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO")

    secret_key: str = Field(min_length=32)

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    session_cookie: str = Field(default="weather_dashboard_prefs", min_length=1, max_length=64)
    session_max_age_seconds: int = Field(
        default=60 * 60 * 24 * 365, ge=60, le=60 * 60 * 24 * 365 * 5
    )

    openweather_api_key: str | None = Field(default=None)
    openweather_base_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather", min_length=8
    )
    weather_timeout_seconds: float = Field(default=10.0, ge=1.0, le=30.0)

    default_city: str = Field(default=DEFAULT_CITY, min_length=1, max_length=128)
    default_unit: UnitSystem = Field(default=UnitSystem.METRIC)

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"

    @property
    def mock_mode(self) -> bool:
        return not self.openweather_api_key


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8000"]
    return settings
