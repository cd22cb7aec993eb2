from __future__ import annotations

import random
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from weather_dashboard.api.deps import get_particle_rng, get_weather_provider
from weather_dashboard.clients.base import WeatherProvider
from weather_dashboard.clients.errors import CityNotFoundError, WeatherProviderError
from weather_dashboard.models.weather import UnitSystem
from weather_dashboard.schemas.weather import (
    ParticleOut,
    ThemeOut,
    WeatherLookupResponse,
    WeatherReadingOut,
)
from weather_dashboard.services.particles import render_particles
from weather_dashboard.services.theme import classify

router = APIRouter()


@router.get("/weather", response_model=WeatherLookupResponse)
def current_weather(
    provider: Annotated[WeatherProvider, Depends(get_weather_provider)],
    rng: Annotated[random.Random, Depends(get_particle_rng)],
    city: Annotated[str, Query(max_length=128)],
    units: UnitSystem = UnitSystem.METRIC,
) -> WeatherLookupResponse:
    city = city.strip()
    if not city:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail="City must not be blank",
        )
    try:
        reading = provider.fetch_weather(city, units)
    except CityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="City not found"
        ) from e
    except WeatherProviderError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Weather provider unavailable",
        ) from e

    temp_c = reading.temperature_celsius(units)
    theme = classify(temp_c, reading.condition_main)
    particles = render_particles(theme.category, rng)
    return WeatherLookupResponse(
        unit=units,
        wind_speed_label=units.wind_speed_label,
        temperature_celsius=temp_c,
        reading=WeatherReadingOut.model_validate(reading.__dict__),
        theme=ThemeOut(
            category=theme.category,
            icon=theme.icon,
            icon_class=theme.icon_class,
            particle_count=len(particles),
        ),
        particles=[ParticleOut.model_validate(p.__dict__) for p in particles],
    )


@router.get("/theme", response_model=ThemeOut)
def theme_for(
    rng: Annotated[random.Random, Depends(get_particle_rng)],
    temp_c: Annotated[float, Query()],
    condition: Annotated[str, Query(max_length=64)] = "",
) -> ThemeOut:
    theme = classify(temp_c, condition)
    return ThemeOut(
        category=theme.category,
        icon=theme.icon,
        icon_class=theme.icon_class,
        particle_count=len(render_particles(theme.category, rng)),
    )
