from dataclasses import dataclass
import math
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Offset:
    """2D screen offset in projection units, before translation to the canvas."""
    x: float
    y: float
    def as_tuple(self) -> Tuple[float, float]: return (self.x, self.y)
    def translate(self, dx: float, dy: float) -> "Offset": return Offset(self.x + dx, self.y + dy)

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)
