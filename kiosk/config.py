"""Kiosk configuration."""

# Region matching thresholds used by RegionMatcher.
# Two regions overlap when the intersection covers more than this
# fraction of the smaller region's area.
MIN_OVERLAP_FRACTION = 0.1

# Fallback for small offsets: top-left Manhattan distance allowed,
# as a fraction of the average side length of both regions.
MAX_CORNER_DISTANCE_FRACTION = 0.25

# Width and height may differ by at most this fraction of the larger side.
SIZE_TOLERANCE_FRACTION = 0.5

# Image encoding settings
DEFAULT_DPI = 96
JPEG_QUALITY = 95
DEFAULT_IMAGE_FORMAT = "JPEG"

# Decoded pixel layout (BGRA8)
BYTES_PER_PIXEL = 4

# Height photos are downscaled to before being sent for detection
DEFAULT_RESIZE_HEIGHT = 720
