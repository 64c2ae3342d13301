"""Логгер пакета и его настройка для точек входа (GUI и пакетный режим)."""
from __future__ import annotations

import logging
from typing import Optional, Union

LOGGER_NAME = "gradient_generator"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Возвращает дочерний логгер пакета, например `gradient_generator.palette`."""
    if not name:
        return logger
    return logger.getChild(name)


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Настраивает вывод логов пакета в stderr.

    Повторный вызов только меняет уровень, обработчик не дублируется.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Неизвестный уровень логирования: {level}")
        level = resolved

    logger.setLevel(level)
    if not any(getattr(h, "_gradient_generator", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._gradient_generator = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
