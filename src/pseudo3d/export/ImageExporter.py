from __future__ import annotations
import logging
from typing import List, Tuple

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

from pseudo3d.geometry.Segment import Segment
from pseudo3d.projection.ProjectionEngine import ProjectionEngine
from pseudo3d.projection.Variant import Variant
from pseudo3d.projection.ViewState import ViewState
from pseudo3d.views.frame_builder import FrameBuilder
from pseudo3d.views.view_constants import (
    AXIS_LABEL_DX,
    AXIS_LABEL_DY,
    AXIS_LINE_WIDTH,
    BACKGROUND_COLOR,
    GRID_LINE_COLOR,
    GRID_LINE_WIDTH,
)

logger = logging.getLogger(__name__)

_DPI = 100


def _segments_to_array(segments: List[Segment]) -> np.ndarray:
    """(N, 2, 3) array of segment end points."""
    return np.array(
        [[seg.start.as_tuple(), seg.end.as_tuple()] for seg in segments], dtype=float
    ).reshape(-1, 2, 3)


class ImageExporter:
    """Renders a frame to a PNG file with matplotlib, without opening a window."""

    @staticmethod
    def project_segments(
        variant: Variant, state: ViewState, segments: List[Segment]
    ) -> np.ndarray:
        """
        Project segments in one vectorized pass.

        Returns an (N, 2, 2) array of screen offsets. Segments touching the
        perspective singularity come back with non-finite values.
        """
        engine = ProjectionEngine(variant.mode)
        ends = _segments_to_array(segments)
        flat = engine.project_array(
            ends.reshape(-1, 3),
            state.rotation_z,
            state.distance,
            state.rotation_x,
            state.rotation_y,
        )
        return flat.reshape(-1, 2, 2)

    @staticmethod
    def export(variant: Variant, state: ViewState, path: str, size: int = 800) -> None:
        # Same cached scene the interactive view draws
        scene = FrameBuilder(variant)
        grid = scene.grid
        axes = scene.axes

        grid_xy = ImageExporter.project_segments(variant, state, grid)
        axes_xy = ImageExporter.project_segments(variant, state, [a.segment for a in axes])

        fig = Figure(figsize=(size / _DPI, size / _DPI), dpi=_DPI)
        FigureCanvasAgg(fig)
        fig.patch.set_facecolor(BACKGROUND_COLOR)
        ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
        ax.set_axis_off()
        ax.set_aspect("equal")
        half = size / 2
        # Screen coordinates grow downward, so flip the y limits
        ax.set_xlim(-half, half)
        ax.set_ylim(half, -half)

        grid_finite = ImageExporter._finite_mask(grid_xy)
        axes_finite = ImageExporter._finite_mask(axes_xy)

        ax.add_collection(
            LineCollection(grid_xy[grid_finite], colors=GRID_LINE_COLOR, linewidths=GRID_LINE_WIDTH)
        )
        ax.add_collection(
            LineCollection(
                axes_xy[axes_finite],
                colors=[a.color for a, ok in zip(axes, axes_finite) if ok],
                linewidths=AXIS_LINE_WIDTH,
            )
        )
        for a, (_, end), ok in zip(axes, axes_xy, axes_finite):
            if not ok:
                continue
            ax.annotate(
                a.label,
                xy=(end[0], end[1]),
                xytext=ImageExporter.label_offset(),
                textcoords="offset pixels",
                color=a.color,
                fontsize=14,
            )

        fig.savefig(path, format="png", facecolor=fig.get_facecolor())
        logger.info(
            "Wrote %s image (%dx%d) to %s", variant.name, size, size, path
        )

    @staticmethod
    def label_offset() -> Tuple[float, float]:
        # Display y points up while canvas y points down
        return (AXIS_LABEL_DX, -AXIS_LABEL_DY)

    @staticmethod
    def _finite_mask(lines: np.ndarray) -> np.ndarray:
        keep = np.isfinite(lines).all(axis=(1, 2))
        dropped = int((~keep).sum())
        if dropped:
            logger.debug("Dropped %d degenerate segment(s) from image", dropped)
        return keep
