from __future__ import annotations

import random

from weather_dashboard.models.weather import UnitSystem, WeatherReading, celsius_to_fahrenheit

MOCK_HUMIDITY = 50.0
MOCK_WIND_SPEED = 10.0
MOCK_CONDITION_MAIN = "Clouds"
MOCK_CONDITION_DESCRIPTION = "demo weather"


class MockWeatherProvider:
    """Demo data used when no OpenWeather API key is configured.

    Temperatures are whole degrees Celsius drawn from ``[0, 30)`` and
    converted to Fahrenheit for imperial lookups. Never raises.
    """

    name = "mock"

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def close(self) -> None:
        return None

    def fetch_weather(self, city: str, unit: UnitSystem) -> WeatherReading:
        temperature = float(self._rng.randrange(30))
        if unit is UnitSystem.IMPERIAL:
            temperature = celsius_to_fahrenheit(temperature)
        return WeatherReading(
            city_name=city,
            temperature=temperature,
            humidity_percent=MOCK_HUMIDITY,
            wind_speed=MOCK_WIND_SPEED,
            condition_main=MOCK_CONDITION_MAIN,
            condition_description=MOCK_CONDITION_DESCRIPTION,
        )
