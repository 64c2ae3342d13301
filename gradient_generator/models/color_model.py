"""Модели цветов: RGB-пиксель (8 бит на канал) и HSL-пиксель.

Принципы:
- SRP: только значения, без формул преобразования (они в `ColorService`).
- Неизменяемость (`frozen=True`): пиксель является значением.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rgb:
    """Пиксель RGB, каждый канал целое 0..255. Альфа не хранится."""
    red: int
    green: int
    blue: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.red, self.green, self.blue


@dataclass(frozen=True)
class Hsl:
    """Пиксель HSL.

    Fields:
        hue: Тон, градусы в [0, 360).
        saturation: Насыщенность в [0, 1].
        lightness: Светлота в [0, 1], ключ сортировки палитры.
    """
    hue: float
    saturation: float
    lightness: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.hue, self.saturation, self.lightness
