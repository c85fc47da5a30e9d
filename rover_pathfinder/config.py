# config.py

# Override image bits
OF_RIVER_MARSH = 0x10
OF_INLAND = 0x20
OF_WATER_BASIN = 0x40
BARRIER_MASK = OF_WATER_BASIN | OF_RIVER_MARSH

# Elevation value meaning "no data / water"
NO_DATA_ELEVATION = 0

# Step-time model
K_SLOPE = 0.003937     # elevation counts -> grid units (squared)
K_CLIMB = 0.0627455
CW_CONSTANT = 5        # (mass * gravitational constant * cell length) / power

# Endpoint snapping in the HTTP API
SNAP_MAX_RADIUS = 25

LOG_LEVEL_ENV = "ROVER_PATHFINDER_LOG_LEVEL"
