BACKGROUND_COLOR = "#ffffff"
GRID_LINE_COLOR = "#d9d9d9"  # gray at ~30% opacity over the white background

GRID_LINE_WIDTH = 1.0
AXIS_LINE_WIDTH = 4.0

AXIS_LABEL_FONT = ("TkDefaultFont", 16)
# Labels sit up and to the right of the axis end point
AXIS_LABEL_DX = 20.0
AXIS_LABEL_DY = -20.0

CANVAS_SIZE = 800
