"""Генерация градиента: палитра -> сетка пикселей заданного размера.

Принципы:
- SRP: только перепроецирование палитры на холст; палитру строит `PaletteService`.
- Сервис не хранит состояния между вызовами: каждый вызов выделяет свои
  палитру и выходную сетку, поэтому параллельные вызовы безопасны.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np
from PIL import Image

from gradient_generator.logging_utils import get_logger
from gradient_generator.models.errors import (
    IndexOutOfRangeError,
    InvalidDimensionError,
    NoSourceImageError,
)
from gradient_generator.models.image_model import ImageData
from gradient_generator.services.palette_service import PaletteService, SourceGrid, validate_source_array

log = get_logger("gradient")


def _validate_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidDimensionError(f"{name} должна быть целым числом, получено {value!r}")
    if value <= 0:
        raise InvalidDimensionError(f"{name} должна быть положительной, получено {value}")
    return int(value)


class GradientService:
    def __init__(self, palette_service: Optional[PaletteService] = None) -> None:
        self._palettes = palette_service or PaletteService()

    def row_indices(self, palette_length: int, source_pixel_count: int, result_height: int) -> np.ndarray:
        """
        Индекс палитры для каждой строки: (source_pixel_count // result_height) * y.

        Деление целочисленное и выполняется до умножения, это не
        пропорциональное отображение floor(count * y / height).

        Raises:
            IndexOutOfRangeError: шаг строк равен нулю (результат выше числа
                пикселей исходника) или индекс строки >= длины палитры.
        """
        stride = source_pixel_count // result_height
        if stride == 0:
            raise IndexOutOfRangeError(
                f"Высота результата {result_height} больше числа пикселей исходника "
                f"{source_pixel_count}: строки не покрывают палитру"
            )
        indices = stride * np.arange(result_height, dtype=np.int64)
        last = int(indices[-1])
        if last >= palette_length:
            row = int(np.argmax(indices >= palette_length))
            raise IndexOutOfRangeError(
                f"Строка {row}: индекс {int(indices[row])} вне палитры длиной {palette_length}"
            )
        return indices

    def resample(
        self,
        palette: np.ndarray,
        source_pixel_count: int,
        result_width: int,
        result_height: int,
    ) -> np.ndarray:
        """Раскладывает палитру на сетку (result_height, result_width, 3) uint8.

        Все пиксели строки y получают один и тот же цвет palette[index(y)],
        поэтому результат состоит из горизонтальных полос.

        Raises:
            InvalidDimensionError: ширина или высота не положительное целое.
            IndexOutOfRangeError: см. `row_indices`.
        """
        width = _validate_dimension("Ширина", result_width)
        height = _validate_dimension("Высота", result_height)

        palette = np.asarray(palette, dtype=np.uint8).reshape(-1, 3)
        indices = self.row_indices(len(palette), int(source_pixel_count), height)

        rows = palette[indices]
        grid = np.repeat(rows[:, np.newaxis, :], width, axis=1)
        log.debug("Resampled %d palette entries to %dx%d", len(palette), width, height)
        return grid

    def bands(self, grid: np.ndarray) -> List[Tuple[int, int, Tuple[int, int, int]]]:
        """
        Сжимает полосатую сетку в список полос (первая строка, строка после последней, цвет).
        Соседние строки одного цвета объединяются в одну полосу.
        """
        arr = np.asarray(grid, dtype=np.uint8)
        if arr.ndim != 3 or arr.shape[-1] != 3 or arr.shape[0] == 0 or arr.shape[1] == 0:
            return []
        column = arr[:, 0, :]
        # начала полос: строка 0 и каждая строка, отличная от предыдущей
        changed = np.any(column[1:] != column[:-1], axis=1)
        starts = np.concatenate([[0], np.flatnonzero(changed) + 1])
        stops = np.append(starts[1:], len(column))
        return [
            (int(start), int(stop), tuple(int(c) for c in column[start]))
            for start, stop in zip(starts, stops)
        ]

    def generate_gradient(
        self,
        source_image: SourceGrid | ImageData | None,
        result_width: int,
        result_height: int,
    ) -> np.ndarray:
        """Полный конвейер: исходник -> палитра -> сетка градиента.

        Args:
            source_image: `ImageData`, изображение PIL или массив (H, W, 3).
            result_width: Ширина результата, px.
            result_height: Высота результата, px.

        Returns:
            Массив (result_height, result_width, 3) uint8.

        Raises:
            NoSourceImageError: изображение не загружено или пустое.
            InvalidSourceError: массив не формы (H, W, 3) или каналы вне 0..255.
            InvalidDimensionError: неверные размеры результата.
            IndexOutOfRangeError: размеры результата несовместимы с палитрой.
        """
        if isinstance(source_image, ImageData):
            source_image = source_image.pil_image
        if source_image is None:
            raise NoSourceImageError("Исходное изображение не загружено")

        _validate_dimension("Ширина", result_width)
        _validate_dimension("Высота", result_height)

        if isinstance(source_image, Image.Image):
            src_w, src_h = source_image.size
        else:
            source_image = np.asarray(source_image)
            validate_source_array(source_image)
            src_h, src_w = source_image.shape[:2]
        pixel_count = src_w * src_h
        if pixel_count == 0:
            raise NoSourceImageError(f"Исходное изображение пустое ({src_w}x{src_h})")

        palette = self._palettes.build_palette(source_image)
        grid = self.resample(palette, pixel_count, result_width, result_height)
        log.debug("Gradient generated from %dx%d source", src_w, src_h)
        return grid


def resample(palette: np.ndarray, source_pixel_count: int, result_width: int, result_height: int) -> np.ndarray:
    """Модульная обёртка над `GradientService.resample`."""
    return GradientService().resample(palette, source_pixel_count, result_width, result_height)


def generate_gradient(source_image: SourceGrid | ImageData | None, result_width: int, result_height: int) -> np.ndarray:
    """Модульная обёртка над `GradientService.generate_gradient`."""
    return GradientService().generate_gradient(source_image, result_width, result_height)
