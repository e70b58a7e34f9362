"""
Constants declarations for tileproximity
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Equatorial radius (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_E2 = (2 - WGS84_F) * WGS84_F  # First eccentricity squared

# Ellipsoid inversion
CONVERGENCE_TOLERANCE = 1e-12  # radians
MAX_ITERATIONS = 100
