AXIS_LENGTH = 5.0
GRID_STEP = 1.0
GRID_HALF_EXTENT = 5

AXIS_X_COLOR = "#ff0000"
AXIS_Y_COLOR = "#00ff00"
AXIS_Z_COLOR = "#0000ff"

AXIS_X_LABEL = "X"
AXIS_Y_LABEL = "Y"
AXIS_Z_LABEL = "Z"
