"""Построение палитры: все пиксели исходника, упорядоченные по светлоте HSL.

Принципы:
- SRP: только сбор и сортировка пикселей; формулы цвета в `ColorService`.
- Палитра строится заново на каждый вызов и нигде не кэшируется.
"""
from __future__ import annotations

from typing import Optional, Union

import numpy as np
from PIL import Image

from gradient_generator.logging_utils import get_logger
from gradient_generator.models.errors import InvalidSourceError
from gradient_generator.services.color_service import ColorService

log = get_logger("palette")

SourceGrid = Union[Image.Image, np.ndarray]


def validate_source_array(arr: np.ndarray) -> None:
    """Проверяет, что массив (H, W, 3) содержит целые каналы 0..255.

    Числа вне диапазона не усекаются молча: иначе в палитре появятся цвета,
    которых нет в исходнике.
    """
    if arr.ndim != 3 or arr.shape[-1] != 3:
        raise InvalidSourceError(f"Ожидается массив (H, W, 3), получено {arr.shape}")
    if arr.dtype == np.uint8:
        return
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidSourceError(f"Каналы должны быть целыми 0..255, получен тип {arr.dtype}")
    if arr.size and (arr.min() < 0 or arr.max() > 255):
        raise InvalidSourceError(
            f"Каналы вне диапазона 0..255: min={int(arr.min())}, max={int(arr.max())}"
        )


class PaletteService:
    def __init__(self, color_service: Optional[ColorService] = None) -> None:
        self._colors = color_service or ColorService()

    def flatten_source(self, source: SourceGrid) -> np.ndarray:
        """
        Разворачивает сетку пикселей в массив (W*H, 3) uint8 построчно:
        y во внешнем цикле, x во внутреннем. Дубликаты сохраняются.

        Raises:
            InvalidSourceError: массив не формы (H, W, 3), не целочисленный
                или с каналами вне 0..255.
        """
        if isinstance(source, Image.Image):
            rgb = source if source.mode == "RGB" else source.convert("RGB")
            return np.asarray(rgb, dtype=np.uint8).reshape(-1, 3)

        arr = np.asarray(source)
        validate_source_array(arr)
        return arr.astype(np.uint8, copy=False).reshape(-1, 3)

    def sort_by_lightness(self, hsl: np.ndarray) -> np.ndarray:
        """
        Сортирует HSL-массив (N, 3) по возрастанию светлоты.

        Светлота извлекается один раз до сортировки. Сортировка устойчивая:
        пиксели с равной светлотой сохраняют построчный порядок исходника.
        NaN считается больше любого числа и уходит в конец.
        """
        order = np.argsort(hsl[:, 2], kind="stable")
        return hsl[order]

    def build_palette(self, source: SourceGrid) -> np.ndarray:
        """Строит палитру: массив (W*H, 3) uint8 с неубывающей светлотой.

        Args:
            source: Изображение PIL или массив (H, W, 3).

        Returns:
            Палитра той же длины, что и число пикселей исходника. Пустой
            исходник даёт пустую палитру.
        """
        flat = self.flatten_source(source)
        hsl = self._colors.rgb_array_to_hsl(flat)
        log.debug("Converted %d pixels to HSL", len(hsl))

        sorted_hsl = self.sort_by_lightness(hsl)
        palette = self._colors.hsl_array_to_rgb(sorted_hsl)
        log.debug("Palette built: %d entries", len(palette))
        return palette


def build_palette(source: SourceGrid) -> np.ndarray:
    """Модульная обёртка над `PaletteService.build_palette`."""
    return PaletteService().build_palette(source)
