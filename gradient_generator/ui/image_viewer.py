"""Виджет просмотра: исходник, градиент или оба рядом, всегда вписанные в канву.

Принципы:
- SRP: отвечает только за представление исходника и результата.
- Градиент рисуется полосами-прямоугольниками, а не растром: результат
  5000 × 5000 px состоит из нескольких тысяч полос и не требует PhotoImage.
"""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk

Band = Tuple[int, int, Tuple[int, int, int]]

_GAP = 16
VIEW_MODES = ("source", "gradient", "both")


@dataclass(frozen=True)
class _Pane:
    """Размещение одного изображения на канве."""
    kind: str  # "source" | "gradient"
    x: int
    y: int
    scale: float
    width: int
    height: int

    def to_image_xy(self, cx: int, cy: int) -> Optional[Tuple[int, int]]:
        x = int((cx - self.x) / self.scale)
        y = int((cy - self.y) / self.scale)
        if cx < self.x or cy < self.y or not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return x, y


class ImageViewer(ctk.CTkFrame):
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._source: Optional[Image.Image] = None
        self._tk_source: Optional[ImageTk.PhotoImage] = None
        self._bands: List[Band] = []
        self._band_starts: List[int] = []
        self._gradient_size: Tuple[int, int] = (0, 0)
        self._mode: str = "source"
        self._panes: List[_Pane] = []

        self.on_cursor_move: Optional[Callable[[Optional[int], Optional[int], Optional[Tuple[int, int, int]]], None]] = None

        self._canvas.bind("<Configure>", lambda _e: self._render())
        self._canvas.bind("<Motion>", self._on_mouse_move)
        self._canvas.bind("<Leave>", lambda _e: self._emit_cursor(None, None, None))

    # ---- Public API ----
    def set_source(self, image: Image.Image) -> None:
        """Показывает новый исходник; прежний градиент сбрасывается."""
        self._source = image
        self._bands, self._band_starts = [], []
        self._gradient_size = (0, 0)
        self._mode = "source"
        self._render()

    def set_gradient(self, width: int, height: int, bands: List[Band]) -> None:
        """Показывает градиент, заданный размером и списком полос (см. `GradientService.bands`)."""
        self._gradient_size = (width, height)
        self._bands = bands
        self._band_starts = [start for start, _stop, _color in bands]
        if self._mode == "source":
            self._mode = "gradient"
        self._render()

    def set_view_mode(self, mode: str) -> None:
        """'source' | 'gradient' | 'both'."""
        if mode not in VIEW_MODES:
            raise ValueError(f"Неизвестный режим просмотра: {mode}")
        self._mode = mode
        self._render()

    def get_view_mode(self) -> str:
        return self._mode

    # ---- Layout ----
    def _visible_kinds(self) -> List[str]:
        has_source = self._source is not None
        has_gradient = bool(self._bands)
        if self._mode == "both" and has_source and has_gradient:
            return ["source", "gradient"]
        if self._mode in ("gradient", "both") and has_gradient:
            return ["gradient"]
        return ["source"] if has_source else []

    def _size_of(self, kind: str) -> Tuple[int, int]:
        return self._source.size if kind == "source" else self._gradient_size

    def _layout(self) -> List[_Pane]:
        kinds = self._visible_kinds()
        if not kinds:
            return []
        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        slot_w = max(1, (canvas_w - _GAP * (len(kinds) - 1)) // len(kinds))

        panes = []
        for i, kind in enumerate(kinds):
            w, h = self._size_of(kind)
            if w == 0 or h == 0:
                continue
            # только уменьшение: мелкий исходник не растягивается
            scale = min(1.0, slot_w / w, canvas_h / h)
            x = i * (slot_w + _GAP) + (slot_w - int(w * scale)) // 2
            y = (canvas_h - int(h * scale)) // 2
            panes.append(_Pane(kind, x, y, scale, w, h))
        return panes

    # ---- Rendering ----
    def _render(self) -> None:
        self._canvas.delete("all")
        self._panes = self._layout()
        for pane in self._panes:
            if pane.kind == "source":
                self._draw_source(pane)
            else:
                self._draw_gradient(pane)

    def _draw_source(self, pane: _Pane) -> None:
        size = (max(1, int(pane.width * pane.scale)), max(1, int(pane.height * pane.scale)))
        self._tk_source = ImageTk.PhotoImage(self._source.resize(size, Image.Resampling.NEAREST))
        self._canvas.create_image(pane.x, pane.y, image=self._tk_source, anchor="nw")

    def _draw_gradient(self, pane: _Pane) -> None:
        right = pane.x + max(1, int(pane.width * pane.scale))
        for start, stop, (r, g, b) in self._bands:
            top = pane.y + int(start * pane.scale)
            bottom = pane.y + max(int(stop * pane.scale), int(start * pane.scale) + 1)
            color = f"#{r:02X}{g:02X}{b:02X}"
            self._canvas.create_rectangle(pane.x, top, right, bottom, fill=color, outline="")

    # ---- Cursor ----
    def _on_mouse_move(self, event: tk.Event) -> None:
        for pane in self._panes:
            xy = pane.to_image_xy(event.x, event.y)
            if xy is None:
                continue
            x, y = xy
            if pane.kind == "source":
                self._emit_cursor(x, y, self._source.getpixel((x, y)))
            else:
                band = self._bands[bisect_right(self._band_starts, y) - 1]
                self._emit_cursor(x, y, band[2])
            return
        self._emit_cursor(None, None, None)

    def _emit_cursor(self, x: Optional[int], y: Optional[int], rgb: Optional[Tuple[int, int, int]]) -> None:
        if self.on_cursor_move:
            self.on_cursor_move(x, y, rgb)

    def _get_canvas_bg(self) -> str:
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"
