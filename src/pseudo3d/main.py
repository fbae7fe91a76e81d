from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from pseudo3d.export.ImageExporter import ImageExporter
from pseudo3d.export.JsonExporter import JsonExporter
from pseudo3d.logging_config import setup_logging
from pseudo3d.projection.Variant import DEFAULT_VARIANT, VARIANTS, get_variant
from pseudo3d.projection.ViewState import ViewState
from pseudo3d.projection.projection_constants import DEFAULT_DISTANCE, DEFAULT_ROTATION
from pseudo3d.views.frame_builder import FrameBuilder
from pseudo3d.views.view_constants import CANVAS_SIZE

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Pseudo-3D axes and ground grid with isometric + perspective projection")
    ap.add_argument("--variant", choices=sorted(VARIANTS), default=DEFAULT_VARIANT,
                    help="Projection variant (default: %s): " % DEFAULT_VARIANT
                    + "; ".join(f"{v.name}: {v.description}" for v in VARIANTS.values()))
    ap.add_argument("--rotation", type=float, default=DEFAULT_ROTATION,
                    help="Rotation about the vertical axis in radians (default: 0)")
    ap.add_argument("--rotation-x", type=float, default=None,
                    help="Rotation about X in radians, orbit variant only (default: variant start angle)")
    ap.add_argument("--rotation-y", type=float, default=None,
                    help="Rotation about Y in radians, orbit variant only (default: variant start angle)")
    ap.add_argument("--distance", type=float, default=DEFAULT_DISTANCE,
                    help=f"Viewer distance, clamped to the slider range (default: {DEFAULT_DISTANCE:g})")
    ap.add_argument("--width", type=int, default=CANVAS_SIZE, help="Frame width in pixels for exports")
    ap.add_argument("--height", type=int, default=CANVAS_SIZE, help="Frame height in pixels for exports")
    ap.add_argument("--export-json", metavar="PATH", help="Write the projected frame to JSON (use '-' for stdout)")
    ap.add_argument("--export-png", metavar="PATH", help="Render the frame to a PNG image")
    ap.add_argument("--no-view", action="store_true", help="Do not open the interactive viewer")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: INFO)")
    ap.add_argument("--log-file", metavar="PATH", help="Also write logs to this file")
    args = ap.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        ap.error("--width and --height must be positive")

    setup_logging(getattr(logging, args.log_level), args.log_file)

    variant = get_variant(args.variant)
    state = ViewState.for_variant(variant)
    state.set_rotation(args.rotation)
    if args.rotation_x is not None:
        state.set_rotation_x(args.rotation_x)
    if args.rotation_y is not None:
        state.set_rotation_y(args.rotation_y)
    try:
        state.set_distance(args.distance)
    except ValueError as e:
        ap.error(str(e))

    logger.info(
        "Variant %s: rotation=%.4f rad (x=%.4f, y=%.4f), distance=%.1f",
        variant.name,
        state.rotation_z,
        state.rotation_x,
        state.rotation_y,
        state.distance,
    )

    if args.export_json:
        lines = FrameBuilder(variant).build(state, args.width, args.height)
        JsonExporter.export(lines, variant, state, args.width, args.height, args.export_json)
    if args.export_png:
        ImageExporter.export(variant, state, args.export_png, size=min(args.width, args.height))

    if not args.no_view:
        # Imported here so exports work on machines without Tk
        from pseudo3d.views.view_app import run

        run(variant, state)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
