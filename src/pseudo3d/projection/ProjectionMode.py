from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from pseudo3d.geometry.Axis import Axis
from pseudo3d.projection.projection_constants import ISOMETRIC_SCALE


@dataclass(frozen=True, slots=True)
class ProjectionMode:
    """
    Flag set selecting which stages of the projection pipeline run.

    rotation_axes: axes rotated about, applied in X, Y, Z order
    isometric: apply the fixed 30 degree isometric projection
    perspective: apply the distance based perspective ratio
    scale: linear screen scale (projection units per world unit)
    max_ratio: clamp for the perspective ratio; None lets it reach infinity
    """
    rotation_axes: FrozenSet[Axis] = field(default_factory=lambda: frozenset({Axis.Z}))
    isometric: bool = True
    perspective: bool = True
    scale: float = ISOMETRIC_SCALE
    max_ratio: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.rotation_axes, frozenset):
            object.__setattr__(self, "rotation_axes", frozenset(self.rotation_axes))
        if self.max_ratio is not None and self.max_ratio <= 0:
            raise ValueError(f"max_ratio must be > 0, got {self.max_ratio!r}")


CANONICAL_MODE = ProjectionMode()
