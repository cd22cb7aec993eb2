from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from weather_dashboard.clients.base import WeatherProvider
from weather_dashboard.clients.errors import CityNotFoundError, WeatherProviderError
from weather_dashboard.models.preferences import Preferences
from weather_dashboard.models.theme import Particle, Theme
from weather_dashboard.models.weather import UnitSystem, WeatherReading
from weather_dashboard.services.particles import ParticleLayer
from weather_dashboard.services.preferences import save_preferences
from weather_dashboard.services.theme import classify

logger = logging.getLogger(__name__)

CITY_NOT_FOUND_NOTICE = "City not found!"


def format_temperature(value: float) -> str:
    # Halves round up.
    return f"{math.floor(value + 0.5)}°"


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_date(day: date) -> str:
    return day.strftime("%a %b %d %Y")


@dataclass
class DashboardView:
    """Display surface the controller writes to; rendered by ``weather.html``."""

    texts: dict[str, str] = field(default_factory=dict)
    background_class: str = ""
    icon_class: str = ""
    unit_label: str = ""
    notice: str | None = None
    input_text: str = ""
    particles: ParticleLayer = field(default_factory=ParticleLayer)

    def set_text(self, region: str, value: str) -> None:
        self.texts[region] = value

    def text(self, region: str) -> str:
        return self.texts.get(region, "")

    def apply_theme(self, theme: Theme) -> list[Particle]:
        self.background_class = theme.category.value
        self.icon_class = theme.icon_class
        return self.particles.render(theme.category)

    @property
    def has_reading(self) -> bool:
        return bool(self.texts)


class DashboardController:
    def __init__(
        self,
        *,
        provider: WeatherProvider,
        preferences: Preferences,
        view: DashboardView | None = None,
        store: MutableMapping[str, Any] | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._provider = provider
        self._preferences = preferences
        self._view = view or DashboardView()
        self._store = store
        self._today = today
        self._update_unit_label()

    @property
    def preferences(self) -> Preferences:
        return self._preferences

    @property
    def view(self) -> DashboardView:
        return self._view

    def start(self) -> bool:
        self._update_unit_label()
        return self.lookup(self._preferences.last_city)

    def search(self, text: str) -> bool:
        self._view.input_text = text
        return self.lookup(text)

    def toggle_unit(self, input_text: str = "") -> bool:
        self._preferences = self._preferences.with_unit(self._preferences.unit.toggled())
        self._persist()
        self._update_unit_label()
        self._view.input_text = input_text
        city = input_text if input_text.strip() else self._preferences.last_city
        return self.lookup(city)

    def lookup(self, city: str) -> bool:
        """Fetch and display weather for ``city``; returns True when displayed."""
        city = city.strip()
        if not city:
            return False

        unit = self._preferences.unit
        try:
            reading = self._provider.fetch_weather(city, unit)
        except CityNotFoundError:
            self._view.notice = CITY_NOT_FOUND_NOTICE
            return False
        except WeatherProviderError as e:
            logger.warning("Weather lookup for %r failed: %s", city, e)
            return False

        self._preferences = self._preferences.with_city(city)
        self._persist()
        self._show(reading, unit)
        return True

    def _show(self, reading: WeatherReading, unit: UnitSystem) -> None:
        view = self._view
        view.set_text("city", reading.city_name)
        view.set_text("temp", format_temperature(reading.temperature))
        view.set_text("humidity", f"{format_number(reading.humidity_percent)}%")
        view.set_text("wind", f"{format_number(reading.wind_speed)} {unit.wind_speed_label}")
        view.set_text("description", reading.condition_description)
        view.set_text("date", format_date(self._today()))

        theme = classify(reading.temperature_celsius(unit), reading.condition_main)
        view.apply_theme(theme)

    def _update_unit_label(self) -> None:
        self._view.unit_label = self._preferences.unit.toggle_label

    def _persist(self) -> None:
        if self._store is not None:
            save_preferences(self._store, self._preferences)


def new_view(*, rng: random.Random | None = None) -> DashboardView:
    return DashboardView(particles=ParticleLayer(rng=rng))
