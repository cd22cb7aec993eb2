from __future__ import annotations

import math
from typing import Any

import httpx

from weather_dashboard.clients.errors import CityNotFoundError, WeatherProviderError
from weather_dashboard.models.weather import UnitSystem, WeatherReading

OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"


class OpenWeatherClient:
    name = "openweather"

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str = OPENWEATHER_CURRENT_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def fetch_weather(self, city: str, unit: UnitSystem) -> WeatherReading:
        try:
            resp = self._client.get(
                self._base_url,
                params={"q": city, "units": unit.value, "appid": self._api_key},
            )
        except httpx.HTTPError as e:
            raise WeatherProviderError(f"OpenWeather request failed: {e}") from e

        if resp.status_code == httpx.codes.NOT_FOUND:
            raise CityNotFoundError(city)
        try:
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPStatusError, ValueError) as e:
            raise WeatherProviderError(f"OpenWeather returned an unusable response: {e}") from e

        return self._parse_reading(payload)

    @staticmethod
    def _parse_reading(payload: Any) -> WeatherReading:
        try:
            main: dict[str, Any] = payload["main"]
            # The current-weather API nests wind at the top level; accept the
            # older ``main.wind`` shape as well.
            wind: dict[str, Any] = payload.get("wind") or main.get("wind") or {}
            condition: dict[str, Any] = payload["weather"][0]
            return WeatherReading(
                city_name=str(payload["name"]),
                temperature=_finite_float(main["temp"], "main.temp"),
                humidity_percent=_finite_float(main["humidity"], "main.humidity"),
                wind_speed=_finite_float(wind["speed"], "wind.speed"),
                condition_main=str(condition["main"]),
                condition_description=str(condition["description"]),
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            raise WeatherProviderError("Unexpected OpenWeather response shape") from e


def _finite_float(value: Any, field: str) -> float:
    # float() accepts "NaN", "inf" and overflowing JSON numbers.
    number = float(value)
    if not math.isfinite(number):
        raise WeatherProviderError(f"OpenWeather returned a non-finite {field}: {value!r}")
    return number
