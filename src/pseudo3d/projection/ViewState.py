from __future__ import annotations
from dataclasses import dataclass, field, replace
import math
from typing import TYPE_CHECKING, AbstractSet

from pseudo3d.geometry.Axis import Axis
from pseudo3d.projection.projection_constants import (
    DEFAULT_DISTANCE,
    DEFAULT_ROTATION,
    DISTANCE_MAX,
    DISTANCE_MIN,
    DISTANCE_ZOOM_STEP,
    DRAG_DEGREES_PER_PIXEL,
    TWO_PI,
)

if TYPE_CHECKING:
    from pseudo3d.projection.Variant import Variant


@dataclass
class ViewState:
    """
    Rotation angles (radians) and viewer distance owned by the UI.

    The UI mutates this between frames and hands the projection a snapshot;
    the projection never writes back.
    """
    rotation_z: float = DEFAULT_ROTATION
    distance: float = DEFAULT_DISTANCE
    # Only used by views that rotate about more than the vertical axis
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    # Where reset() puts rotation_x and rotation_y back to
    home_rotation_x: float = field(default=0.0, compare=False)
    home_rotation_y: float = field(default=0.0, compare=False)

    @classmethod
    def for_variant(cls, variant: "Variant") -> ViewState:
        rx = variant.initial_rotation_x % TWO_PI
        ry = variant.initial_rotation_y % TWO_PI
        return cls(rotation_x=rx, rotation_y=ry, home_rotation_x=rx, home_rotation_y=ry)

    def set_rotation(self, angle: float) -> None:
        self.rotation_z = angle % TWO_PI

    def set_rotation_x(self, angle: float) -> None:
        self.rotation_x = angle % TWO_PI

    def set_rotation_y(self, angle: float) -> None:
        self.rotation_y = angle % TWO_PI

    def set_distance(self, distance: float) -> None:
        if not math.isfinite(distance):
            raise ValueError(f"distance must be finite, got {distance!r}")
        self.distance = max(DISTANCE_MIN, min(DISTANCE_MAX, distance))

    def drag(self, dx: float, dy: float, axes: AbstractSet[Axis]) -> None:
        """
        Turn the view by a pointer drag of (dx, dy) pixels.

        Vertical drag turns X. Horizontal drag turns Y when the view rotates
        about Y, otherwise the vertical axis Z.
        """
        if Axis.X in axes:
            self.rotation_x = (self.rotation_x + math.radians(dy * DRAG_DEGREES_PER_PIXEL)) % TWO_PI
        if Axis.Y in axes:
            self.rotation_y = (self.rotation_y + math.radians(dx * DRAG_DEGREES_PER_PIXEL)) % TWO_PI
        elif Axis.Z in axes:
            self.rotation_z = (self.rotation_z + math.radians(dx * DRAG_DEGREES_PER_PIXEL)) % TWO_PI

    def zoom(self, steps: int) -> None:
        # Wheel up moves the viewer closer
        self.set_distance(self.distance - steps * DISTANCE_ZOOM_STEP)

    def reset(self) -> None:
        self.rotation_z = DEFAULT_ROTATION
        self.distance = DEFAULT_DISTANCE
        self.rotation_x = self.home_rotation_x
        self.rotation_y = self.home_rotation_y

    def snapshot(self) -> ViewState:
        return replace(self)
