"""Internal constants shared across the library."""

# Capacity of the newest-first monitor log kept in the world snapshot.
MAX_MONITOR_ITEMS = 30

# Every Nth planning point is kept for display.
DOWNSAMPLE_STRIDE = 10

# ------------------------------------------------------------------
# Default vehicle parameters (Lincoln MKZ reference car, metres)
# ------------------------------------------------------------------

DEFAULT_VEHICLE_MODEL = "MKZ"
DEFAULT_VEHICLE_LENGTH = 4.933
DEFAULT_VEHICLE_WIDTH = 2.11
DEFAULT_VEHICLE_HEIGHT = 1.48

AUTO_DRIVING_CAR_TYPE = "AUTO_DRIVING_CAR"
