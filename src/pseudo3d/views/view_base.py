from __future__ import annotations
from typing import TYPE_CHECKING
import tkinter as tk
from tkinter import ttk

from pseudo3d.views.view_constants import BACKGROUND_COLOR

if TYPE_CHECKING:
    # Import only for type checking; does not run at runtime
    from pseudo3d.views.view_app import AppView


class BaseView(ttk.Frame):
    def __init__(self, master, app: "AppView"):
        super().__init__(master)
        self.app = app
        self.canvas = tk.Canvas(
            self, background=BACKGROUND_COLOR, highlightthickness=0
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", self._on_resize)
        self.canvas.bind("<Expose>", lambda e: self.redraw())

    def _on_resize(self, event):
        self.redraw()

    def redraw(self):
        raise NotImplementedError
