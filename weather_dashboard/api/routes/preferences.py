from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from weather_dashboard.api.deps import get_preferences
from weather_dashboard.models.preferences import Preferences
from weather_dashboard.schemas.weather import PreferencesOut
from weather_dashboard.services.preferences import save_preferences

router = APIRouter(prefix="/preferences")


def _preferences_payload(preferences: Preferences) -> PreferencesOut:
    return PreferencesOut(
        unit=preferences.unit,
        last_city=preferences.last_city,
        unit_label=preferences.unit.toggle_label,
    )


@router.get("", response_model=PreferencesOut)
def read_preferences(
    preferences: Annotated[Preferences, Depends(get_preferences)],
) -> PreferencesOut:
    return _preferences_payload(preferences)


@router.put("/unit", response_model=PreferencesOut)
def toggle_unit(
    request: Request,
    preferences: Annotated[Preferences, Depends(get_preferences)],
) -> PreferencesOut:
    updated = preferences.with_unit(preferences.unit.toggled())
    save_preferences(request.session, updated)
    return _preferences_payload(updated)
