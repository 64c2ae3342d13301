"""Ошибки генерации градиента.

Все ошибки ядра наследуют `GradientError`, чтобы контроллер и CLI могли
перехватывать их одним `except`, не путая с ошибками ввода-вывода.
"""
from __future__ import annotations


class GradientError(Exception):
    """Базовая ошибка конвейера палитра -> градиент."""


class InvalidDimensionError(GradientError, ValueError):
    """Ширина или высота результата не является положительным целым."""


class IndexOutOfRangeError(GradientError, IndexError):
    """Индекс строки вышел за пределы палитры."""


class NoSourceImageError(GradientError):
    """Генерация запрошена без загруженного (или с пустым) исходным изображением."""


class InvalidSourceError(GradientError, ValueError):
    """Сетка исходника не является массивом (H, W, 3) с каналами 0..255."""
