from __future__ import annotations

import random

from weather_dashboard.models.theme import Particle, ThemeCategory

SNOWFLAKE_COUNT = 50
RAIN_DROP_COUNT = 100


def _snowflake(rng: random.Random) -> Particle:
    left = rng.random() * 100
    size = rng.random() * 5 + 2
    duration = rng.random() * 3 + 2
    return Particle(kind="snowflake", left_vw=left, duration_s=duration, size_px=size)


def _rain_drop(rng: random.Random) -> Particle:
    left = rng.random() * 100
    duration = rng.random() * 0.5 + 0.4
    return Particle(kind="rain-drop", left_vw=left, duration_s=duration)


def render_particles(category: ThemeCategory, rng: random.Random) -> list[Particle]:
    if category is ThemeCategory.COLD:
        return [_snowflake(rng) for _ in range(SNOWFLAKE_COUNT)]
    if category is ThemeCategory.RAINY:
        return [_rain_drop(rng) for _ in range(RAIN_DROP_COUNT)]
    return []


class ParticleLayer:
    """Background container for decorative particles."""

    def __init__(self, *, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._particles: list[Particle] = []

    @property
    def particles(self) -> list[Particle]:
        return list(self._particles)

    def clear(self) -> None:
        self._particles.clear()

    def render(self, category: ThemeCategory) -> list[Particle]:
        self.clear()
        self._particles.extend(render_particles(category, self._rng))
        return self.particles

    def __len__(self) -> int:
        return len(self._particles)
