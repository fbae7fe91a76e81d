from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import List, Optional

from pseudo3d.geometry.Axis import AxisSegment
from pseudo3d.geometry.Offset import Offset
from pseudo3d.geometry.SceneGeometry import SceneGeometry
from pseudo3d.geometry.Segment import Segment
from pseudo3d.projection.ProjectionEngine import ProjectionEngine
from pseudo3d.projection.Variant import Variant
from pseudo3d.projection.ViewState import ViewState
from pseudo3d.views.view_constants import (
    AXIS_LINE_WIDTH,
    GRID_LINE_COLOR,
    GRID_LINE_WIDTH,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DrawLine:
    start: Offset
    end: Offset
    color: str
    width: float
    label: Optional[str] = None


class FrameBuilder:
    """
    Turns the scene into canvas-space lines for one view state.

    Scene segments do not depend on rotation or distance, so they are built
    once here and only re-projected per frame.
    """

    def __init__(self, variant: Variant):
        self.variant = variant
        self.engine = ProjectionEngine(variant.mode)
        self.grid: List[Segment] = [
            seg
            for plane in variant.grid_planes
            for seg in SceneGeometry.grid_segments(variant.grid_half_extent, plane)
        ]
        self.axes: List[AxisSegment] = list(
            SceneGeometry.axis_segments(z_sign=variant.z_axis_sign).values()
        )

    def build(self, state: ViewState, width: float, height: float) -> List[DrawLine]:
        """Grid lines first, then the axes so they draw on top."""
        snap = state.snapshot()
        cx = width / 2
        cy = height / 2
        lines: List[DrawLine] = []
        skipped = 0

        for seg in self.grid:
            line = self._line(seg, snap, cx, cy, GRID_LINE_COLOR, GRID_LINE_WIDTH, None)
            if line is None:
                skipped += 1
                continue
            lines.append(line)

        for ax in self.axes:
            line = self._line(ax.segment, snap, cx, cy, ax.color, AXIS_LINE_WIDTH, ax.label)
            if line is None:
                skipped += 1
                continue
            lines.append(line)

        if skipped:
            logger.debug(
                "Skipped %d degenerate segment(s) at rotation=%.4f distance=%.4f",
                skipped,
                snap.rotation_z,
                snap.distance,
            )
        return lines

    def _line(
        self,
        seg: Segment,
        state: ViewState,
        cx: float,
        cy: float,
        color: str,
        width: float,
        label: Optional[str],
    ) -> Optional[DrawLine]:
        start = self._project(seg.start, state)
        end = self._project(seg.end, state)
        # A point on the perspective singularity projects to inf/nan
        if not (start.is_finite and end.is_finite):
            return None
        return DrawLine(start.translate(cx, cy), end.translate(cx, cy), color, width, label)

    def _project(self, p, state: ViewState) -> Offset:
        return self.engine.project(
            p, state.rotation_z, state.distance, state.rotation_x, state.rotation_y
        )
