from __future__ import annotations

from dataclasses import dataclass, replace

from weather_dashboard.models.weather import UnitSystem

DEFAULT_CITY = "New York"


@dataclass(frozen=True)
class Preferences:
    unit: UnitSystem = UnitSystem.METRIC
    last_city: str = DEFAULT_CITY

    def with_unit(self, unit: UnitSystem) -> Preferences:
        return replace(self, unit=unit)

    def with_city(self, city: str) -> Preferences:
        return replace(self, last_city=city)
