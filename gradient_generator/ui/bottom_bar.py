"""Нижняя панель: выбор вида (исходник / градиент / рядом) и строка состояния."""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

_ERROR_COLOR = "#D9534F"
# подпись кнопки -> режим `ImageViewer.set_view_mode`
_VIEW_LABELS = {"Исходник": "source", "Градиент": "gradient", "Рядом": "both"}


class BottomBar(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=48, **kwargs)

        self.on_view_mode_change: Optional[Callable[[str], None]] = None

        self.grid_columnconfigure(1, weight=1)

        self._view_buttons = ctk.CTkSegmentedButton(
            self, values=list(_VIEW_LABELS), command=self._on_view_click
        )
        self._view_buttons.set("Исходник")
        self._view_buttons.grid(row=0, column=0, padx=(10, 12), pady=8, sticky="w")

        self._status_value = ctk.StringVar(value="Откройте изображение")
        self._status_label = ctk.CTkLabel(self, textvariable=self._status_value, anchor="w")
        self._default_text_color = self._status_label.cget("text_color")
        self._status_label.grid(row=0, column=1, padx=(0, 10), pady=8, sticky="ew")

    def set_view_mode(self, mode: str) -> None:
        """Синхронизирует кнопки с режимом просмотра без вызова колбэка."""
        for label, value in _VIEW_LABELS.items():
            if value == mode:
                self._view_buttons.set(label)
                return

    def set_status(self, message: str, error: bool = False) -> None:
        """Показывает сообщение в строке состояния; ошибки выделяются цветом."""
        self._status_value.set(message)
        self._status_label.configure(text_color=_ERROR_COLOR if error else self._default_text_color)

    def _on_view_click(self, label: str) -> None:
        if self.on_view_mode_change:
            self.on_view_mode_change(_VIEW_LABELS[label])
