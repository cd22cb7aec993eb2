from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from weather_dashboard.models.preferences import Preferences
from weather_dashboard.models.weather import UnitSystem

UNIT_KEY = "weatherUnit"
LAST_CITY_KEY = "lastCity"


def load_preferences(
    store: MutableMapping[str, Any],
    *,
    default_unit: UnitSystem = UnitSystem.METRIC,
    default_city: str | None = None,
) -> Preferences:
    defaults = Preferences(unit=default_unit)
    if default_city:
        defaults = defaults.with_city(default_city)

    unit = defaults.unit
    raw_unit = store.get(UNIT_KEY)
    if isinstance(raw_unit, str):
        try:
            unit = UnitSystem(raw_unit)
        except ValueError:
            unit = defaults.unit

    city = store.get(LAST_CITY_KEY)
    if not isinstance(city, str) or not city.strip():
        city = defaults.last_city

    return Preferences(unit=unit, last_city=city)


def save_preferences(store: MutableMapping[str, Any], preferences: Preferences) -> None:
    store[UNIT_KEY] = preferences.unit.value
    store[LAST_CITY_KEY] = preferences.last_city
