from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"

    def toggled(self) -> UnitSystem:
        if self is UnitSystem.METRIC:
            return UnitSystem.IMPERIAL
        return UnitSystem.METRIC

    @property
    def wind_speed_label(self) -> str:
        return "km/h" if self is UnitSystem.METRIC else "mph"

    @property
    def toggle_label(self) -> str:
        # Names the unit a click on the toggle switches to.
        return "Switch to °F" if self is UnitSystem.METRIC else "Switch to °C"


def celsius_to_fahrenheit(value: float) -> float:
    return value * 9 / 5 + 32


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) * 5 / 9


@dataclass(frozen=True)
class WeatherReading:
    city_name: str
    temperature: float
    humidity_percent: float
    wind_speed: float
    condition_main: str
    condition_description: str

    def temperature_celsius(self, unit: UnitSystem) -> float:
        if unit is UnitSystem.IMPERIAL:
            return fahrenheit_to_celsius(self.temperature)
        return self.temperature
