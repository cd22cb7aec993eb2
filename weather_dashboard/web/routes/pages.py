from __future__ import annotations

import random
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import RedirectResponse

from weather_dashboard.api.deps import (
    get_particle_rng,
    get_preferences,
    get_settings,
    get_weather_provider,
)
from weather_dashboard.clients.base import WeatherProvider
from weather_dashboard.core.config import Settings
from weather_dashboard.models.preferences import Preferences
from weather_dashboard.services.dashboard import DashboardController, new_view
from weather_dashboard.web.deps import csrf_protect, ensure_csrf_token
from weather_dashboard.web.templates import templates

router = APIRouter()


def _controller(
    request: Request,
    provider: WeatherProvider,
    preferences: Preferences,
    rng: random.Random,
) -> DashboardController:
    return DashboardController(
        provider=provider,
        preferences=preferences,
        view=new_view(rng=rng),
        store=request.session,
    )


def _render_dashboard(
    *,
    request: Request,
    controller: DashboardController,
    settings: Settings,
):
    csrf_token = ensure_csrf_token(request)
    view = controller.view
    return templates.TemplateResponse(
        request,
        "weather.html",
        {
            "request": request,
            "title": "Weather",
            "csrf_token": csrf_token,
            "view": view,
            "preferences": controller.preferences,
            "mock_mode": settings.mock_mode,
        },
    )


@router.get("/", include_in_schema=False)
def ui_index():
    return RedirectResponse("/ui/weather", status_code=303)


@router.get("/weather", include_in_schema=False)
def weather_page(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    provider: Annotated[WeatherProvider, Depends(get_weather_provider)],
    preferences: Annotated[Preferences, Depends(get_preferences)],
    rng: Annotated[random.Random, Depends(get_particle_rng)],
    city: Annotated[str | None, Query(max_length=128)] = None,
):
    controller = _controller(request, provider, preferences, rng)
    shown = False
    if city is not None:
        shown = controller.search(city)
    if not shown:
        # Keep showing the last city when the search did not produce a reading.
        controller.start()
    return _render_dashboard(request=request, controller=controller, settings=settings)


@router.post(
    "/units",
    include_in_schema=False,
    dependencies=[Depends(csrf_protect)],
)
def toggle_units(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    provider: Annotated[WeatherProvider, Depends(get_weather_provider)],
    preferences: Annotated[Preferences, Depends(get_preferences)],
    rng: Annotated[random.Random, Depends(get_particle_rng)],
    city: Annotated[str, Form(max_length=128)] = "",
):
    controller = _controller(request, provider, preferences, rng)
    shown = controller.toggle_unit(city)
    if not shown and city.strip() and city.strip() != controller.preferences.last_city:
        # The toggle looked up the typed city; fall back to the last city once.
        controller.start()
    return _render_dashboard(request=request, controller=controller, settings=settings)
