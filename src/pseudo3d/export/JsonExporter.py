import json
import logging
from dataclasses import dataclass
from typing import List

from pseudo3d.projection.Variant import Variant
from pseudo3d.projection.ViewState import ViewState
from pseudo3d.views.frame_builder import DrawLine

logger = logging.getLogger(__name__)


@dataclass
class JsonExporter:

    @staticmethod
    def to_dict(
        lines: List[DrawLine], variant: Variant, state: ViewState, width: int, height: int
    ) -> dict:
        return {
            "variant": variant.name,
            "width": width,
            "height": height,
            "rotation_z": state.rotation_z,
            "rotation_x": state.rotation_x,
            "rotation_y": state.rotation_y,
            "distance": state.distance,
            "lines": [
                {
                    "start": [line.start.x, line.start.y],
                    "end": [line.end.x, line.end.y],
                    "color": line.color,
                    "width": line.width,
                    "label": line.label,
                }
                for line in lines
            ],
        }

    @staticmethod
    def export(
        lines: List[DrawLine],
        variant: Variant,
        state: ViewState,
        width: int,
        height: int,
        path: str,
    ) -> None:
        """Export a projected frame as JSON (use '-' for stdout)."""
        obj = JsonExporter.to_dict(lines, variant, state, width, height)
        # Frame lines are always finite, keep the output strict JSON
        data = json.dumps(obj, ensure_ascii=False, indent=4, allow_nan=False)
        if path == "-" or path == "stdout":
            print(data)
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(data)
            logger.info("Wrote %d lines to %s", len(lines), path)
