from __future__ import annotations
import math
from typing import Tuple

import numpy as np

from pseudo3d.geometry.Axis import Axis
from pseudo3d.geometry.Offset import Offset
from pseudo3d.geometry.Point3D import Point3D
from pseudo3d.projection.ProjectionMode import CANONICAL_MODE, ProjectionMode
from pseudo3d.projection.projection_constants import ISOMETRIC_COS, ISOMETRIC_SIN


class ProjectionEngine:
    """
    Maps world points to 2D screen offsets.

    Pipeline: rotation (X, then Y, then Z), fixed-angle isometric projection,
    perspective ratio from the viewer distance, then linear scale with the
    y axis flipped (screen y grows downward).

    The engine holds only its immutable mode, so a single instance can be
    shared freely between threads.
    """

    def __init__(self, mode: ProjectionMode = CANONICAL_MODE):
        self.mode = mode

    def project(
        self,
        p: Point3D,
        rotation_z: float,
        distance: float,
        rotation_x: float = 0.0,
        rotation_y: float = 0.0,
    ) -> Offset:
        x, y, z = self._rotate(p.x, p.y, p.z, rotation_x, rotation_y, rotation_z)
        x_proj, y_proj = self._flatten(x, y, z)

        radio = self.perspective_ratio(y_proj, distance)
        scale = self.mode.scale

        return Offset(x_proj * scale * radio, -(y_proj * scale * radio))

    def perspective_ratio(self, y_proj: float, distance: float) -> float:
        """
        distance / (distance - y_proj), or 1.0 when perspective is off or
        distance is exactly zero.

        A zero denominator gives signed infinity, the same value IEEE division
        by +0.0 produces, unless the mode clamps the ratio.
        """
        if not self.mode.perspective or distance == 0:
            return 1.0

        denom = distance - y_proj
        if denom == 0:
            radio = math.copysign(math.inf, distance)
        else:
            radio = distance / denom

        max_ratio = self.mode.max_ratio
        if max_ratio is not None:
            radio = max(-max_ratio, min(max_ratio, radio))
        return radio

    def _rotate(
        self,
        x: float,
        y: float,
        z: float,
        rotation_x: float,
        rotation_y: float,
        rotation_z: float,
    ) -> Tuple[float, float, float]:
        axes = self.mode.rotation_axes

        if Axis.X in axes:
            c = math.cos(rotation_x)
            s = math.sin(rotation_x)
            y, z = y * c - z * s, y * s + z * c

        if Axis.Y in axes:
            c = math.cos(rotation_y)
            s = math.sin(rotation_y)
            x, z = x * c + z * s, -x * s + z * c

        if Axis.Z in axes:
            c = math.cos(rotation_z)
            s = math.sin(rotation_z)
            x, y = x * c - y * s, x * s + y * c

        return x, y, z

    def _flatten(self, x, y, z):
        if self.mode.isometric:
            return (x - y) * ISOMETRIC_COS, (x + y) * ISOMETRIC_SIN - z
        # Plain rotation views drop the depth coordinate
        return x, y

    def project_array(
        self,
        points: np.ndarray,
        rotation_z: float,
        distance: float,
        rotation_x: float = 0.0,
        rotation_y: float = 0.0,
    ) -> np.ndarray:
        """Vectorized project(): (N, 3) world points to (N, 2) screen offsets."""
        pts = np.asarray(points, dtype=float).reshape(-1, 3)
        # _rotate and _flatten only use arithmetic, so they broadcast over columns
        x, y, z = self._rotate(
            pts[:, 0], pts[:, 1], pts[:, 2], rotation_x, rotation_y, rotation_z
        )
        x_proj, y_proj = self._flatten(x, y, z)

        if not self.mode.perspective or distance == 0:
            radio = np.ones_like(y_proj)
        else:
            with np.errstate(divide="ignore", invalid="ignore"):
                radio = distance / (distance - y_proj)
            if self.mode.max_ratio is not None:
                radio = np.clip(radio, -self.mode.max_ratio, self.mode.max_ratio)

        scale = self.mode.scale
        with np.errstate(invalid="ignore", over="ignore"):
            return np.column_stack((x_proj * scale * radio, -(y_proj * scale * radio)))


_CANONICAL_ENGINE = ProjectionEngine(CANONICAL_MODE)


def project(p: Point3D, rotation_z: float, distance: float) -> Offset:
    """Project with the canonical mode: Z rotation, isometric, perspective."""
    return _CANONICAL_ENGINE.project(p, rotation_z, distance)
