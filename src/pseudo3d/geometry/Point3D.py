from dataclasses import dataclass
from typing import ClassVar, Tuple


@dataclass(frozen=True, slots=True)
class Point3D:
    x: float
    y: float
    z: float

    Zero: ClassVar["Point3D"]

    def as_tuple(self) -> Tuple[float, float, float]: return (self.x, self.y, self.z)
    def __add__(self, o: "Point3D") -> "Point3D": return Point3D(self.x + o.x, self.y + o.y, self.z + o.z)
    def __sub__(self, o: "Point3D") -> "Point3D": return Point3D(self.x - o.x, self.y - o.y, self.z - o.z)
    def scale(self, k: float) -> "Point3D": return Point3D(self.x * k, self.y * k, self.z * k)


Point3D.Zero = Point3D(0.0, 0.0, 0.0)
