from __future__ import annotations

import random
from typing import Annotated

from fastapi import Depends, Request

from weather_dashboard.clients.base import WeatherProvider
from weather_dashboard.core.config import Settings
from weather_dashboard.models.preferences import Preferences
from weather_dashboard.services.preferences import load_preferences


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_weather_provider(request: Request) -> WeatherProvider:
    return request.app.state.weather_provider


def get_particle_rng() -> random.Random:
    return random.Random()


def get_preferences(
    request: Request, settings: Annotated[Settings, Depends(get_settings)]
) -> Preferences:
    return load_preferences(
        request.session,
        default_unit=settings.default_unit,
        default_city=settings.default_city,
    )
