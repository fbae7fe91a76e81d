from dataclasses import dataclass
from typing import Tuple

from pseudo3d.geometry.Point3D import Point3D


@dataclass(frozen=True, slots=True)
class Segment:
    start: Point3D
    end: Point3D

    def as_tuple(self) -> Tuple[Point3D, Point3D]:
        return (self.start, self.end)

    def points(self) -> Tuple[Point3D, ...]:
        return (self.start, self.end)
