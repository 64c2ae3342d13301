"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
Clean Code:
- Обработчики компактны; генерация: один вызов `GradientService.generate_gradient`
  без состояния между вызовами. Контроллер хранит только выбор пользователя.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from tkinter import TclError, filedialog, messagebox
from typing import Optional, Tuple

import customtkinter as ctk
import numpy as np

from gradient_generator.config import AppConfig
from gradient_generator.logging_utils import get_logger
from gradient_generator.models.color_model import Rgb
from gradient_generator.models.errors import GradientError
from gradient_generator.models.image_model import ImageData
from gradient_generator.services.color_service import ColorService
from gradient_generator.services.gradient_service import GradientService
from gradient_generator.services.image_service import ImageService
from gradient_generator.ui.bottom_bar import BottomBar
from gradient_generator.ui.image_viewer import ImageViewer
from gradient_generator.ui.sidebar import Sidebar

log = get_logger("controller")

_IMAGE_FILETYPES = (
    ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp"),
    ("All files", "*.*"),
)


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Загрузка изображений и сохранение результата через `ImageService`.
    - Запуск генерации через `GradientService` и показ ошибок пользователю.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    config: AppConfig = field(default_factory=AppConfig)

    _image_service: ImageService = field(default_factory=ImageService)
    _gradient_service: GradientService = field(default_factory=GradientService)
    _color_service: ColorService = field(default_factory=ColorService)
    _current_image: Optional[ImageData] = None
    _result_grid: Optional[np.ndarray] = None
    _save_path: Optional[Path] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами.

        Компоненты UI ничего не знают друг о друге, общаются через контроллер.
        """
        self.sidebar.on_open_file = self._handle_open_file
        self.sidebar.on_generate = self._handle_generate
        self.sidebar.on_choose_save_path = self._handle_choose_save_path
        self.sidebar.on_save = self._handle_save

        self.viewer.on_cursor_move = self._handle_cursor_move
        self.bottom.on_view_mode_change = self.viewer.set_view_mode

        generation = self.config.generation
        self.sidebar.set_result_size(generation.default_width, generation.default_height)

    # ---- Handlers ----
    def _handle_open_file(self) -> None:
        try:
            file_path = filedialog.askopenfilename(title="Выберите изображение", filetypes=_IMAGE_FILETYPES)
        except TclError:
            # Silent fail if dialog cannot open
            return
        if not file_path:
            return

        try:
            image_data = self._image_service.load_image(file_path)
        except (FileNotFoundError, ValueError) as exc:
            self._report_error("Не удалось открыть изображение", exc)
            return

        self._current_image = image_data
        self._result_grid = None

        self.viewer.set_source(image_data.pil_image)
        self.sidebar.set_image_info(image_data)
        # размеры результата по умолчанию = размеры исходника
        self.sidebar.set_result_size(image_data.width, image_data.height)
        self._sync_view_mode()
        self.bottom.set_status(f"Загружено: {image_data.path.name}")

    def _handle_generate(self) -> None:
        try:
            width, height = self.sidebar.get_result_size()
            source = self._current_image
            grid = self._gradient_service.generate_gradient(source, width, height)
        except (GradientError, ValueError) as exc:
            self._report_error("Не удалось сгенерировать градиент", exc)
            return

        self._result_grid = grid
        self.viewer.set_gradient(width, height, self._gradient_service.bands(grid))
        self._sync_view_mode()
        self.bottom.set_status(f"Градиент {width} × {height} px готов")

    def _handle_choose_save_path(self) -> None:
        try:
            file_path = filedialog.asksaveasfilename(
                title="Сохранить градиент",
                defaultextension=".png",
                filetypes=_IMAGE_FILETYPES,
            )
        except TclError:
            return
        if not file_path:
            return
        self._save_path = Path(file_path)
        self.sidebar.set_save_path(self._save_path)

    def _handle_save(self) -> None:
        if self._result_grid is None:
            self.bottom.set_status("Сначала сгенерируйте градиент", error=True)
            return
        if self._save_path is None:
            self.bottom.set_status("Сначала выберите путь сохранения", error=True)
            return
        try:
            saved = self._image_service.save_grid(self._result_grid, self._save_path)
        except (OSError, ValueError) as exc:
            self._report_error("Не удалось сохранить файл", exc)
            return
        self.bottom.set_status(f"Сохранено: {saved}")

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgb: Optional[Tuple[int, int, int]]) -> None:
        lightness = None
        if rgb is not None:
            r, g, b = rgb[:3]
            lightness = self._color_service.rgb_to_hsl(Rgb(r, g, b)).lightness
        self.sidebar.update_cursor_info(x, y, rgb, lightness)

    # ---- Helpers ----
    def _sync_view_mode(self) -> None:
        # viewer switches mode itself on new source / new gradient
        self.bottom.set_view_mode(self.viewer.get_view_mode())

    def _report_error(self, title: str, exc: Exception) -> None:
        """Показывает ошибку как есть: строка состояния и диалог."""
        log.warning("%s: %s", title, exc)
        self.bottom.set_status(f"{title}: {exc}", error=True)
        try:
            messagebox.showerror(title, str(exc), parent=self.window)
        except TclError:
            # status line already shows the error
            return
