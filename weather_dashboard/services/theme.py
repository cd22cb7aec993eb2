from __future__ import annotations

from weather_dashboard.models.theme import Theme, ThemeCategory

COLD_MAX_C = 5.0
COOL_MAX_C = 15.0
WARM_MAX_C = 25.0

BAND_ICONS: dict[ThemeCategory, str] = {
    ThemeCategory.COLD: "snowflake",
    ThemeCategory.COOL: "cloud",
    ThemeCategory.WARM: "cloud-sun",
    ThemeCategory.HOT: "sun",
}
RAIN_ICON = "cloud-showers-heavy"


def temperature_band(temp_celsius: float) -> ThemeCategory:
    # Boundary values belong to the lower band. NaN compares false
    # everywhere and lands in HOT.
    if temp_celsius <= COLD_MAX_C:
        return ThemeCategory.COLD
    if temp_celsius <= COOL_MAX_C:
        return ThemeCategory.COOL
    if temp_celsius <= WARM_MAX_C:
        return ThemeCategory.WARM
    return ThemeCategory.HOT


def classify(temp_celsius: float, condition_main: str) -> Theme:
    """Map a Celsius temperature and weather condition to a visual theme.

    Rain in the condition replaces the temperature band entirely.
    """
    band = temperature_band(temp_celsius)
    theme = Theme(category=band, icon=BAND_ICONS[band])
    if "rain" in condition_main.lower():
        theme = Theme(category=ThemeCategory.RAINY, icon=RAIN_ICON)
    return theme
