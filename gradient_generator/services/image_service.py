"""Загрузка исходных изображений с диска и сохранение сгенерированных градиентов.

Принципы:
- SRP: класс отвечает только за ввод-вывод и базовое извлечение свойств.
- Кодеки и форматы целиком делегированы Pillow.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image, UnidentifiedImageError

from gradient_generator.logging_utils import get_logger
from gradient_generator.models.image_model import ImageData

log = get_logger("image")


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGB, альфа отброшена),
            размерами, исходным режимом и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as opened:
                source_mode = opened.mode
                pil_image = opened.convert("RGB")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        log.info("Loaded %s (%dx%d, %s)", path, width, height, source_mode)
        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=source_mode,
            size_bytes=size_bytes,
        )

    def grid_to_image(self, grid: np.ndarray) -> Image.Image:
        """Сетка (H, W, 3) uint8 -> изображение PIL в режиме RGB."""
        arr = np.ascontiguousarray(grid, dtype=np.uint8)
        if arr.ndim != 3 or arr.shape[-1] != 3:
            raise ValueError(f"Ожидается сетка (H, W, 3), получено {arr.shape}")
        return Image.fromarray(arr)

    def save_grid(self, grid: np.ndarray, file_path: str | Path) -> Path:
        """Сохраняет сетку пикселей; формат определяется расширением файла.

        Raises:
            ValueError: неизвестное расширение или неверная форма сетки.
        """
        path = Path(file_path)
        image = self.grid_to_image(grid)
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path)
        log.info("Saved %dx%d gradient to %s", image.width, image.height, path)
        return path
