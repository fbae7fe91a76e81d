import math

TWO_PI = 2.0 * math.pi

# Isometric half-angle. Keep it in radians: rounding to whole degrees breaks
# the projection.
ISOMETRIC_ANGLE = math.pi / 6.0
ISOMETRIC_COS = math.cos(ISOMETRIC_ANGLE)
ISOMETRIC_SIN = math.sin(ISOMETRIC_ANGLE)

ISOMETRIC_SCALE = 32.0
ORBIT_SCALE = 40.0

DISTANCE_MIN = 18.0
DISTANCE_MAX = 100.0
DEFAULT_DISTANCE = 50.0
DISTANCE_ZOOM_STEP = 2.0

DEFAULT_ROTATION = 0.0

# Drag sensitivity: degrees of rotation per pixel dragged
DRAG_DEGREES_PER_PIXEL = 1.0 / 3.0
