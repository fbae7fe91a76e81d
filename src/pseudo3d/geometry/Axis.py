from dataclasses import dataclass
from enum import Enum

from pseudo3d.geometry.Segment import Segment


class Axis(Enum):
    X = "X"
    Y = "Y"
    Z = "Z"


@dataclass(frozen=True, slots=True)
class AxisSegment:
    # color and label are only used by whoever strokes the segment
    axis: Axis
    segment: Segment
    color: str
    label: str
