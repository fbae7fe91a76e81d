from __future__ import annotations
import logging
import math
import tkinter as tk
from tkinter import ttk

from pseudo3d.projection.Variant import Variant
from pseudo3d.projection.ViewState import ViewState
from pseudo3d.projection.projection_constants import (
    DISTANCE_MAX,
    DISTANCE_MIN,
    TWO_PI,
)
from pseudo3d.views.view_3d import View3D
from pseudo3d.views.view_constants import CANVAS_SIZE

logger = logging.getLogger(__name__)


class AppView(tk.Tk):
    def __init__(self, variant: Variant, state: ViewState):
        super().__init__()
        self.title(f"Pseudo 3D: {variant.name}")
        self.geometry(f"{CANVAS_SIZE}x{CANVAS_SIZE + 80}")
        self.minsize(400, 400)
        self.variant = variant
        self.state = state

        style = ttk.Style(self)
        if "clam" in style.theme_names():
            style.theme_use("clam")

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.view = View3D(self, self, variant, state)
        self.view.grid(row=0, column=0, sticky="nsew")

        # Slider values mirror the view state; drag and wheel push back via sync_controls
        self.rotation_var = tk.DoubleVar(value=state.rotation_z)
        self.distance_var = tk.DoubleVar(value=state.distance)
        self.rotation_label_var = tk.StringVar()
        self.distance_label_var = tk.StringVar()

        controls = ttk.Frame(self, padding=8)
        controls.grid(row=1, column=0, sticky="ew")
        controls.columnconfigure(1, weight=1)

        ttk.Label(controls, text="Rotation").grid(row=0, column=0, sticky="w", padx=4)
        ttk.Scale(
            controls,
            from_=0.0,
            to=TWO_PI,
            variable=self.rotation_var,
            command=self._on_rotation,
        ).grid(row=0, column=1, sticky="ew", padx=4)
        ttk.Label(controls, textvariable=self.rotation_label_var, width=10).grid(
            row=0, column=2, sticky="e", padx=4
        )

        if variant.mode.perspective:
            ttk.Label(controls, text="Distance").grid(row=1, column=0, sticky="w", padx=4)
            ttk.Scale(
                controls,
                from_=DISTANCE_MIN,
                to=DISTANCE_MAX,
                variable=self.distance_var,
                command=self._on_distance,
            ).grid(row=1, column=1, sticky="ew", padx=4)
            ttk.Label(controls, textvariable=self.distance_label_var, width=10).grid(
                row=1, column=2, sticky="e", padx=4
            )

        self.sync_controls()

    def _on_rotation(self, value):
        self.state.set_rotation(float(value))
        self._update_labels()
        self.view.redraw()

    def _on_distance(self, value):
        self.state.set_distance(float(value))
        self._update_labels()
        self.view.redraw()

    def sync_controls(self):
        self.rotation_var.set(self.state.rotation_z)
        self.distance_var.set(self.state.distance)
        self._update_labels()

    def _update_labels(self):
        self.rotation_label_var.set(f"{math.degrees(self.state.rotation_z):.1f}°")
        self.distance_label_var.set(f"{self.state.distance:.1f}")


def run(variant: Variant, state: ViewState) -> None:
    logger.info("Opening %s viewer", variant.name)
    app = AppView(variant, state)
    app.mainloop()
