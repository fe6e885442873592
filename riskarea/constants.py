"""Default risk-area template parameters.

Distances in metres, angles in mils, drawing sizes in pixels.
"""

# Template geometry
RANGE_M = 1500.0                 # danger distance along the centre line
LEFT_MILS = 300.0                # sector left of the centre line
RIGHT_MILS = 300.0               # sector right of the centre line
MARGIN_M = 100.0                 # lateral/far safety margin

# Drawing
PX_PER_M = 0.25                  # world → pixel scale
PAGE_W, PAGE_H = 800, 450
BOTTOM_MARGIN_PX = 30            # firing position height above page bottom
ARC_RADIUS_PX = 60.0             # sector overlay radius
FONT_SIZE = 12
LABEL_DX, LABEL_DY = 6, -16      # label offset from a line end

MARGIN_COLOR = "#555555"
