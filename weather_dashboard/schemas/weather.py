from __future__ import annotations

from pydantic import BaseModel, Field

from weather_dashboard.models.theme import ThemeCategory
from weather_dashboard.models.weather import UnitSystem


class WeatherReadingOut(BaseModel):
    city_name: str = Field(min_length=1)
    temperature: float
    humidity_percent: float
    wind_speed: float
    condition_main: str
    condition_description: str


class ParticleOut(BaseModel):
    kind: str
    left_vw: float = Field(ge=0, le=100)
    duration_s: float = Field(gt=0)
    size_px: float | None = None


class ThemeOut(BaseModel):
    category: ThemeCategory
    icon: str
    icon_class: str
    particle_count: int = Field(ge=0)


class WeatherLookupResponse(BaseModel):
    unit: UnitSystem
    wind_speed_label: str
    temperature_celsius: float
    reading: WeatherReadingOut
    theme: ThemeOut
    particles: list[ParticleOut] = Field(default_factory=list)


class PreferencesOut(BaseModel):
    unit: UnitSystem
    last_city: str
    unit_label: str
