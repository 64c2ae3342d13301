from __future__ import annotations

import customtkinter as ctk

from gradient_generator.config import AppConfig
from gradient_generator.controllers.app_controller import AppController
from gradient_generator.ui.image_viewer import ImageViewer
from gradient_generator.ui.sidebar import Sidebar
from gradient_generator.ui.bottom_bar import BottomBar


class GradientGeneratorApp(ctk.CTk):
    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__()
        config = config or AppConfig()
        ctk.set_appearance_mode(config.ui.appearance_mode)
        ctk.set_default_color_theme(config.ui.color_theme)

        self.title(config.ui.title)
        self.minsize(*config.ui.min_size)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            viewer=self._viewer, sidebar=self._sidebar, bottom=self._bottom, window=self, config=config
        )
        self._controller.bind_events()
