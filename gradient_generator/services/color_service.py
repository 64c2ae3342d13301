"""Преобразование цветов RGB <-> HSL.

Одна и та же формула работает в двух формах: поштучно (`Rgb`/`Hsl`) и
векторно над массивами numpy формы (N, 3). Поштучные методы делегируют
векторным, поэтому результаты совпадают бит в бит.
"""
from __future__ import annotations

import numpy as np

from gradient_generator.models.color_model import Hsl, Rgb

# Шум округления float64 после обратного преобразования много меньше 1e-9 канала
_TRUNCATION_EPSILON = 1e-9


class ColorService:
    # ---------- Поштучные преобразования ----------
    def rgb_to_hsl(self, pixel: Rgb) -> Hsl:
        """RGB (0..255) -> HSL (тон в градусах, насыщенность и светлота в [0, 1])."""
        hsl = self.rgb_array_to_hsl(np.array([pixel.as_tuple()], dtype=np.uint8))[0]
        return Hsl(hue=float(hsl[0]), saturation=float(hsl[1]), lightness=float(hsl[2]))

    def hsl_to_rgb(self, pixel: Hsl) -> Rgb:
        """HSL -> RGB. Дробная часть каналов отбрасывается (усечение, не округление)."""
        rgb = self.hsl_array_to_rgb(np.array([pixel.as_tuple()], dtype=np.float64))[0]
        return Rgb(red=int(rgb[0]), green=int(rgb[1]), blue=int(rgb[2]))

    # ---------- Векторные преобразования ----------
    def rgb_array_to_hsl(self, rgb: np.ndarray) -> np.ndarray:
        """
        Массив (N, 3) uint8 -> массив (N, 3) float64 со столбцами (hue, saturation, lightness).
        """
        x = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0
        r, g, b = x[:, 0], x[:, 1], x[:, 2]
        mx = x.max(axis=1)
        mn = x.min(axis=1)
        lightness = (mx + mn) / 2.0
        delta = mx - mn
        chromatic = delta > 0

        # для серых пикселей delta == 0, значения из этих веток отбрасываются ниже
        with np.errstate(divide="ignore", invalid="ignore"):
            saturation = np.where(lightness > 0.5, delta / (2.0 - mx - mn), delta / (mx + mn))
            hue_r = (g - b) / delta + np.where(g < b, 6.0, 0.0)
            hue_g = (b - r) / delta + 2.0
            hue_b = (r - g) / delta + 4.0
            hue = np.where(mx == r, hue_r, np.where(mx == g, hue_g, hue_b)) * 60.0

        hue = np.where(chromatic, hue, 0.0)
        saturation = np.where(chromatic, saturation, 0.0)
        return np.column_stack([hue, saturation, lightness])

    def hsl_array_to_rgb(self, hsl: np.ndarray) -> np.ndarray:
        """
        Массив (N, 3) float64 (hue, saturation, lightness) -> массив (N, 3) uint8.
        Каналы усекаются до целого.
        """
        arr = np.asarray(hsl, dtype=np.float64).reshape(-1, 3)
        h, s, l = arr[:, 0], arr[:, 1], arr[:, 2]

        q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
        p = 2.0 * l - q
        hk = h / 360.0
        channels = [
            self._hue_to_channel(p, q, hk + 1.0 / 3.0),
            self._hue_to_channel(p, q, hk),
            self._hue_to_channel(p, q, hk - 1.0 / 3.0),
        ]
        out = np.column_stack(channels)
        # ахроматические пиксели: все каналы равны светлоте
        out = np.where((s == 0)[:, np.newaxis], l[:, np.newaxis], out)

        truncated = np.floor(out * 255.0 + _TRUNCATION_EPSILON)
        return np.clip(truncated, 0, 255).astype(np.uint8)

    # ---------- Вспомогательные функции ----------
    @staticmethod
    def _hue_to_channel(p: np.ndarray, q: np.ndarray, t: np.ndarray) -> np.ndarray:
        t = np.where(t < 0.0, t + 1.0, t)
        t = np.where(t > 1.0, t - 1.0, t)
        return np.select(
            [t < 1.0 / 6.0, t < 0.5, t < 2.0 / 3.0],
            [p + (q - p) * 6.0 * t, q, p + (q - p) * (2.0 / 3.0 - t) * 6.0],
            default=p,
        )
