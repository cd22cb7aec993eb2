from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ThemeCategory(str, Enum):
    COLD = "cold"
    COOL = "cool"
    WARM = "warm"
    HOT = "hot"
    RAINY = "rainy"


@dataclass(frozen=True)
class Theme:
    category: ThemeCategory
    icon: str

    @property
    def icon_class(self) -> str:
        return f"fa-solid fa-{self.icon}"


@dataclass(frozen=True)
class Particle:
    kind: str
    left_vw: float
    duration_s: float
    size_px: float | None = None

    @property
    def style(self) -> str:
        parts = [f"left: {self.left_vw:.3f}vw"]
        if self.size_px is not None:
            parts.append(f"width: {self.size_px:.3f}px")
            parts.append(f"height: {self.size_px:.3f}px")
        parts.append(f"animation-duration: {self.duration_s:.3f}s")
        return "; ".join(parts)
