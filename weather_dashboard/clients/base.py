from __future__ import annotations

import random
from typing import Protocol

import httpx

from weather_dashboard.clients.mock import MockWeatherProvider
from weather_dashboard.clients.openweather import OpenWeatherClient
from weather_dashboard.core.config import Settings
from weather_dashboard.models.weather import UnitSystem, WeatherReading


class WeatherProvider(Protocol):
    name: str

    def close(self) -> None: ...

    def fetch_weather(self, city: str, unit: UnitSystem) -> WeatherReading: ...


def build_weather_provider(
    settings: Settings,
    *,
    rng: random.Random | None = None,
    transport: httpx.BaseTransport | None = None,
) -> WeatherProvider:
    if settings.openweather_api_key:
        return OpenWeatherClient(
            api_key=settings.openweather_api_key,
            timeout_seconds=settings.weather_timeout_seconds,
            base_url=settings.openweather_base_url,
            transport=transport,
        )
    return MockWeatherProvider(rng=rng)
