from __future__ import annotations

from dataclasses import dataclass, field

from weather_dashboard.clients.errors import CityNotFoundError, WeatherProviderError
from weather_dashboard.models.weather import (
    UnitSystem,
    WeatherReading,
    celsius_to_fahrenheit,
)


@dataclass
class FakeWeatherProvider:
    """Serves fixed readings keyed by lower-cased city name.

    Temperatures are stored in Celsius and converted for imperial calls.
    Unknown cities raise ``CityNotFoundError``; cities listed in
    ``failing`` raise ``WeatherProviderError``.
    """

    name: str = "fake"
    readings: dict[str, tuple[float, str, str]] = field(
        default_factory=lambda: {
            "new york": (18.0, "Clear", "clear sky"),
            "oslo": (-3.0, "Snow", "light snow"),
            "bergen": (9.0, "Rain", "moderate rain"),
            "cairo": (33.0, "Clear", "clear sky"),
            "london": (12.0, "Clouds", "broken clouds"),
        }
    )
    wind_speed: float = 3.5
    failing: set[str] = field(default_factory=set)
    calls: list[tuple[str, UnitSystem]] = field(default_factory=list)

    def close(self) -> None:
        return None

    def fetch_weather(self, city: str, unit: UnitSystem) -> WeatherReading:
        self.calls.append((city, unit))
        key = city.lower()
        if key in self.failing:
            raise WeatherProviderError("connection reset")
        if key not in self.readings:
            raise CityNotFoundError(city)
        temp_c, main, description = self.readings[key]
        temperature = temp_c
        if unit is UnitSystem.IMPERIAL:
            temperature = celsius_to_fahrenheit(temp_c)
        return WeatherReading(
            city_name=city.title(),
            temperature=temperature,
            humidity_percent=64.0,
            wind_speed=self.wind_speed,
            condition_main=main,
            condition_description=description,
        )
