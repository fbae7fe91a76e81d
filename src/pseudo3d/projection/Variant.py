from dataclasses import dataclass
import math
from typing import Dict, Tuple

from pseudo3d.geometry.Axis import Axis
from pseudo3d.geometry.GridPlane import GridPlane
from pseudo3d.geometry.geometry_constants import GRID_HALF_EXTENT
from pseudo3d.projection.ProjectionMode import ProjectionMode
from pseudo3d.projection.projection_constants import ISOMETRIC_SCALE, ORBIT_SCALE


@dataclass(frozen=True)
class Variant:
    """A projection mode together with the scene it is shown with."""
    name: str
    mode: ProjectionMode
    z_axis_sign: int = 1
    grid_half_extent: int = GRID_HALF_EXTENT
    grid_planes: Tuple[GridPlane, ...] = (GridPlane.XY,)
    # Starting angles (radians) for views that rotate about X and Y
    initial_rotation_x: float = 0.0
    initial_rotation_y: float = 0.0
    description: str = ""


FLAT = Variant(
    name="flat",
    mode=ProjectionMode(
        rotation_axes=frozenset(), isometric=False, perspective=False, scale=ORBIT_SCALE
    ),
    description="Front view, no rotation",
)

ORBIT = Variant(
    name="orbit",
    mode=ProjectionMode(
        rotation_axes=frozenset({Axis.X, Axis.Y, Axis.Z}),
        isometric=False,
        perspective=False,
        scale=ORBIT_SCALE,
    ),
    grid_planes=(GridPlane.XY, GridPlane.XZ, GridPlane.YZ),
    initial_rotation_x=math.radians(30),
    initial_rotation_y=math.radians(45),
    description="Free rotation about X, Y and Z with three grid planes",
)

ISOMETRIC = Variant(
    name="isometric",
    mode=ProjectionMode(
        rotation_axes=frozenset({Axis.Z}), isometric=True, perspective=False, scale=ISOMETRIC_SCALE
    ),
    z_axis_sign=-1,
    description="Isometric view turning about the vertical axis",
)

PERSPECTIVE = Variant(
    name="perspective",
    mode=ProjectionMode(
        rotation_axes=frozenset({Axis.Z}), isometric=True, perspective=True, scale=ISOMETRIC_SCALE
    ),
    grid_half_extent=32,
    description="Isometric view with perspective from the viewer distance",
)

VARIANTS: Dict[str, Variant] = {v.name: v for v in (FLAT, ORBIT, ISOMETRIC, PERSPECTIVE)}
DEFAULT_VARIANT = PERSPECTIVE.name


def get_variant(name: str) -> Variant:
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(
            f"Unknown variant {name!r}; expected one of {sorted(VARIANTS)}"
        ) from None
