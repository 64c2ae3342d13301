"""Точка входа в приложение."""
import sys
from typing import List, Optional

from gradient_generator.config import load_config
from gradient_generator.logging_utils import setup_logging


def main(argv: Optional[List[str]] = None) -> None:
    """Создаёт и запускает главное окно приложения.

    Необязательный аргумент: путь к YAML-конфигу.
    """
    argv = sys.argv[1:] if argv is None else argv
    config = load_config(argv[0] if argv else None)
    setup_logging(config.logging.level)

    # импорт здесь: пакетный режим и тесты не тянут tkinter
    from gradient_generator.app import GradientGeneratorApp

    app = GradientGeneratorApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
