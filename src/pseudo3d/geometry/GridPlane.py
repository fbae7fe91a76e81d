from enum import Enum


class GridPlane(Enum):
    XY = "XY"
    XZ = "XZ"
    YZ = "YZ"
