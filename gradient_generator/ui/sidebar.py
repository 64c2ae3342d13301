"""Боковая панель: исходное изображение, размеры результата, генерация и сохранение.

Принципы:
- SRP: управляет только UI параметров, не содержит алгоритмов.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Tuple

import customtkinter as ctk

from gradient_generator.models.image_model import ImageData

_NO_PATH = "Путь не выбран"


def _rgb_to_hex(rgb: Tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: исходник, результат, сохранение, курсор."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_generate: Optional[Callable[[], None]] = None
        self.on_choose_save_path: Optional[Callable[[], None]] = None
        self.on_save: Optional[Callable[[], None]] = None

        bold = ctk.CTkFont(size=16, weight="bold")

        # Source section
        self._source_title = ctk.CTkLabel(self, text="Исходник", font=bold)
        self._source_title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 8), sticky="ew")

        self._path_val = ctk.StringVar(value=_NO_PATH)
        self._size_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")
        self._mode_val = ctk.StringVar(value="—")

        self._info_path = ctk.CTkLabel(self, textvariable=self._path_val, wraplength=250, anchor="w", justify="left")
        self._info_size = ctk.CTkLabel(self, textvariable=self._size_val, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_mode = ctk.CTkLabel(self, textvariable=self._mode_val, anchor="w", justify="left")

        self._info_path.grid(row=2, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_size.grid(row=3, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=4, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_mode.grid(row=5, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Result size section
        self._result_title = ctk.CTkLabel(self, text="Градиент", font=bold)
        self._result_title.grid(row=6, column=0, padx=8, pady=(8, 4), sticky="w")

        size_frame = ctk.CTkFrame(self, fg_color="transparent")
        size_frame.grid(row=7, column=0, padx=8, pady=(0, 4), sticky="ew")
        size_frame.grid_columnconfigure(1, weight=1)

        self._width_val = ctk.StringVar(value="0")
        self._height_val = ctk.StringVar(value="0")
        ctk.CTkLabel(size_frame, text="Ширина (px):").grid(row=0, column=0, padx=(0, 6), pady=2, sticky="w")
        self._width_entry = ctk.CTkEntry(size_frame, textvariable=self._width_val, width=100)
        self._width_entry.grid(row=0, column=1, pady=2, sticky="w")
        ctk.CTkLabel(size_frame, text="Высота (px):").grid(row=1, column=0, padx=(0, 6), pady=2, sticky="w")
        self._height_entry = ctk.CTkEntry(size_frame, textvariable=self._height_val, width=100)
        self._height_entry.grid(row=1, column=1, pady=2, sticky="w")
        self._width_entry.bind("<Return>", self._emit_generate)
        self._height_entry.bind("<Return>", self._emit_generate)

        self._generate_btn = ctk.CTkButton(self, text="Сгенерировать градиент", command=self._emit_generate)
        self._generate_btn.grid(row=8, column=0, padx=8, pady=(4, 10), sticky="ew")

        # Save section
        self._save_title = ctk.CTkLabel(self, text="Сохранение", font=bold)
        self._save_title.grid(row=9, column=0, padx=8, pady=(8, 4), sticky="w")

        self._save_path_btn = ctk.CTkButton(self, text="Выбрать путь сохранения…", command=self._emit_choose_save_path)
        self._save_path_btn.grid(row=10, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._save_path_val = ctk.StringVar(value=_NO_PATH)
        self._save_path_label = ctk.CTkLabel(
            self, textvariable=self._save_path_val, wraplength=250, anchor="w", justify="left"
        )
        self._save_path_label.grid(row=11, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._save_btn = ctk.CTkButton(self, text="Сохранить файл", command=self._emit_save)
        self._save_btn.grid(row=12, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Cursor section
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=bold)
        self._cursor_title.grid(row=13, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgb_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")
        self._cursor_light_val = ctk.StringVar(value="—")

        for row, var in enumerate(
            (self._cursor_xy_val, self._cursor_rgb_val, self._cursor_hex_val, self._cursor_light_val), start=14
        ):
            ctk.CTkLabel(self, textvariable=var, anchor="w", justify="left").grid(
                row=row, column=0, padx=8, pady=(0, 2), sticky="ew"
            )

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_image_info(self, image_data: ImageData) -> None:
        """Отображает метаданные загруженного изображения."""
        self._path_val.set(str(image_data.path))
        self._size_val.set(self._format_size(image_data.size_bytes))
        self._dims_val.set(f"{image_data.width} × {image_data.height} px")
        self._mode_val.set(image_data.mode)

    def set_result_size(self, width: int, height: int) -> None:
        self._width_val.set(str(width))
        self._height_val.set(str(height))

    def get_result_size(self) -> Tuple[int, int]:
        """Возвращает (ширина, высота) из полей ввода.

        Raises:
            ValueError: если поле не является целым числом.
        """
        try:
            width = int(self._width_val.get().strip())
            height = int(self._height_val.get().strip())
        except ValueError as exc:
            raise ValueError("Ширина и высота должны быть целыми числами") from exc
        return width, height

    def set_save_path(self, path: Optional[Path]) -> None:
        self._save_path_val.set(str(path) if path is not None else _NO_PATH)

    def update_cursor_info(
        self,
        x: Optional[int],
        y: Optional[int],
        rgb: Optional[Tuple[int, int, int]],
        lightness: Optional[float] = None,
    ) -> None:
        """Обновляет информацию по курсору (координаты, RGB, HEX, светлота HSL)."""
        if x is None or y is None or rgb is None:
            for var in (self._cursor_xy_val, self._cursor_rgb_val, self._cursor_hex_val, self._cursor_light_val):
                var.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b = rgb[:3]
        self._cursor_rgb_val.set(f"RGB: {r}, {g}, {b}")
        self._cursor_hex_val.set(f"HEX: {_rgb_to_hex((r, g, b))}")
        self._cursor_light_val.set(f"L: {lightness:.3f}" if lightness is not None else "—")

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_generate(self, _event: object | None = None) -> None:
        if self.on_generate:
            self.on_generate()

    def _emit_choose_save_path(self) -> None:
        if self.on_choose_save_path:
            self.on_choose_save_path()

    def _emit_save(self) -> None:
        if self.on_save:
            self.on_save()

    # ---- Helpers ----
    def _format_size(self, size_bytes: Optional[int]) -> str:
        if size_bytes is None:
            return "—"
        thresholds = [("Б", 1024), ("КБ", 1024**2), ("МБ", 1024**3), ("ГБ", 1024**4)]
        for label, limit in thresholds:
            if size_bytes < limit:
                if label == "Б":
                    return f"{size_bytes} {label}"
                value = size_bytes / (limit // 1024)
                return f"{value:.1f} {label}"
        value = size_bytes / (1024**4)
        return f"{value:.1f} ГБ"
