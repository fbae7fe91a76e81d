from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from pseudo3d.projection.Variant import Variant
from pseudo3d.projection.ViewState import ViewState
from pseudo3d.views.frame_builder import FrameBuilder
from pseudo3d.views.view_base import BaseView
from pseudo3d.views.view_constants import (
    AXIS_LABEL_DX,
    AXIS_LABEL_DY,
    AXIS_LABEL_FONT,
    BACKGROUND_COLOR,
)

if TYPE_CHECKING:
    # Import only for type checking; does not run at runtime
    from pseudo3d.views.view_app import AppView

logger = logging.getLogger(__name__)


class View3D(BaseView):
    def __init__(self, master, app: "AppView", variant: Variant, state: ViewState):
        super().__init__(master, app)
        self.variant = variant
        self.state = state
        self.frame_builder = FrameBuilder(variant)

        # Mouse state
        self._rotating = False
        self._last = (0, 0)

        # Bindings
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<MouseWheel>", self._on_wheel)
        self.canvas.bind("<Button-4>", lambda e: self._zoom(1))  # Linux
        self.canvas.bind("<Button-5>", lambda e: self._zoom(-1))  # Linux
        self.canvas.bind_all("r", lambda e: self.reset_view())
        self.canvas.bind_all("R", lambda e: self.reset_view())

    def reset_view(self):
        logger.debug("Resetting %s view", self.variant.name)
        self.state.reset()
        self._state_changed()

    # Events
    def _on_press(self, event):
        self._rotating = True
        self._last = (event.x, event.y)

    def _on_drag(self, event):
        if not self._rotating:
            return
        dx = event.x - self._last[0]
        dy = event.y - self._last[1]
        self.state.drag(dx, dy, self.variant.mode.rotation_axes)
        self._last = (event.x, event.y)
        self._state_changed()

    def _on_release(self, event):
        self._rotating = False

    def _on_wheel(self, event):
        self._zoom(1 if event.delta > 0 else -1)

    def _zoom(self, direction):
        if not self.variant.mode.perspective:
            return
        self.state.zoom(direction)
        self._state_changed()

    def _state_changed(self):
        self.app.sync_controls()
        self.redraw()

    # Drawing
    def redraw(self):
        c = self.canvas
        c.delete("all")
        w = c.winfo_width()
        h = c.winfo_height()
        if w <= 1 or h <= 1:
            return
        c.create_rectangle(0, 0, w, h, fill=BACKGROUND_COLOR, outline="")

        for line in self.frame_builder.build(self.state, w, h):
            c.create_line(
                line.start.x,
                line.start.y,
                line.end.x,
                line.end.y,
                fill=line.color,
                width=line.width,
            )
            if line.label:
                c.create_text(
                    line.end.x + AXIS_LABEL_DX,
                    line.end.y + AXIS_LABEL_DY,
                    text=line.label,
                    fill=line.color,
                    font=AXIS_LABEL_FONT,
                )
