from __future__ import annotations


class WeatherDashboardError(Exception):
    """Base class for errors raised while looking up weather."""


class CityNotFoundError(WeatherDashboardError):
    def __init__(self, city: str) -> None:
        super().__init__(f"City not found: {city!r}")
        self.city = city


class WeatherProviderError(WeatherDashboardError):
    """Network, status or payload failure from the weather source."""
