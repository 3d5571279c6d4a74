"""
Constants declarations for geodetics
"""
import math

# Reference ellipsoids: (semi-major axis (meters), inverse flattening)
ELLIPSOID_PRESETS = {
    'krasovskiy': (6378245.0, 298.3),
    'wgs84': (6378137.0, 298.257223563),
    'pz90': (6378136.0, 298.25784),
}

# One arc-second, in radians
ARCSECOND = math.pi / (180 * 3600)

# Convergence tolerances (radians)
MERIDIAN_TOLERANCE = 1e-12
SPATIAL_TOLERANCE = 1e-12
VINCENTY_TOLERANCE = 1e-14

# Iteration caps
MERIDIAN_MAX_ITER = 100
SPATIAL_MAX_ITER = 256
VINCENTY_MAX_ITER = 200

# Direct problem is integrated in one RK4 step; past this distance (meters)
# the truncation error is no longer negligible
DIRECT_PROBLEM_SINGLE_STEP_LIMIT = 200_000.0
