# constants.py
"""Default values shared by the scale bar helpers.

Layout helpers accept keyword overrides for the drawing related values, so the
numbers below only apply when a caller does not supply its own.
"""

# Unit promotion thresholds, expressed in the base unit of each system
METRIC_PROMOTION_THRESHOLD = 1000.0  # meters -> kilometers
IMPERIAL_PROMOTION_THRESHOLD = 2640.0  # feet -> miles (half a mile)

LABEL_DECIMALS = 2

DEFAULT_MAX_SEGMENTS = 4

# Geometry of the drawn line, in device independent pixels
STROKE_WIDTH = 3.0
SHADOW_OFFSET = 1.5
