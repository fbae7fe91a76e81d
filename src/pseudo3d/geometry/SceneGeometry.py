from __future__ import annotations
from typing import Dict, List, Tuple

from pseudo3d.geometry.Axis import Axis, AxisSegment
from pseudo3d.geometry.GridPlane import GridPlane
from pseudo3d.geometry.Point3D import Point3D
from pseudo3d.geometry.Segment import Segment
from pseudo3d.geometry.geometry_constants import (
    AXIS_LENGTH,
    AXIS_X_COLOR,
    AXIS_X_LABEL,
    AXIS_Y_COLOR,
    AXIS_Y_LABEL,
    AXIS_Z_COLOR,
    AXIS_Z_LABEL,
    GRID_STEP,
)


class SceneGeometry:
    """Line segments that make up the scene: the three axes and the grid."""

    @staticmethod
    def axis_segments(
        length: float = AXIS_LENGTH, z_sign: int = 1
    ) -> Dict[Axis, AxisSegment]:
        """
        Return the X, Y and Z axes as segments from the origin, in that order.

        z_sign flips the Z axis endpoint; some views point Z down (-1).
        """
        if z_sign not in (1, -1):
            raise ValueError(f"z_sign must be 1 or -1, got {z_sign!r}")

        return {
            Axis.X: AxisSegment(
                Axis.X,
                Segment(Point3D.Zero, Point3D(length, 0.0, 0.0)),
                AXIS_X_COLOR,
                AXIS_X_LABEL,
            ),
            Axis.Y: AxisSegment(
                Axis.Y,
                Segment(Point3D.Zero, Point3D(0.0, length, 0.0)),
                AXIS_Y_COLOR,
                AXIS_Y_LABEL,
            ),
            Axis.Z: AxisSegment(
                Axis.Z,
                Segment(Point3D.Zero, Point3D(0.0, 0.0, z_sign * length)),
                AXIS_Z_COLOR,
                AXIS_Z_LABEL,
            ),
        }

    @staticmethod
    def grid_segments(
        half_extent: int, plane: GridPlane = GridPlane.XY, step: float = GRID_STEP
    ) -> List[Segment]:
        """
        Square grid of 2 * (2 * half_extent + 1) lines centered on the origin.

        For every i in [-half_extent, half_extent] two lines are emitted: one
        parallel to the plane's first axis at second-axis coordinate i, then one
        parallel to the second axis at first-axis coordinate i.
        """
        if half_extent < 0:
            raise ValueError(f"half_extent must be >= 0, got {half_extent!r}")
        if step <= 0:
            raise ValueError(f"step must be > 0, got {step!r}")

        edge = half_extent * step
        segments: List[Segment] = []
        for i in range(-half_extent, half_extent + 1):
            c = i * step
            # Line along the first axis, then along the second axis
            segments.append(SceneGeometry._segment_in_plane(plane, (-edge, c), (edge, c)))
            segments.append(SceneGeometry._segment_in_plane(plane, (c, -edge), (c, edge)))
        return segments

    @staticmethod
    def _segment_in_plane(
        plane: GridPlane, a: Tuple[float, float], b: Tuple[float, float]
    ) -> Segment:
        return Segment(
            SceneGeometry._point_in_plane(plane, *a),
            SceneGeometry._point_in_plane(plane, *b),
        )

    @staticmethod
    def _point_in_plane(plane: GridPlane, u: float, v: float) -> Point3D:
        if plane is GridPlane.XY:
            return Point3D(u, v, 0.0)
        if plane is GridPlane.XZ:
            return Point3D(u, 0.0, v)
        if plane is GridPlane.YZ:
            return Point3D(0.0, u, v)
        raise ValueError(f"Unknown grid plane: {plane!r}")
