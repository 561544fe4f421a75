"""
Configuration
=============
Central registry for tolerances, output settings and process exit codes.

Exports:
    WELD_EPS (float): Distance under which intersector segment endpoints are merged.
    CLOSURE_EPS (float): Distance under which a loop's last point repeats its first.
    BOUNDARY_EPS (float): Distance under which a point counts as on a polygon edge.
    REPORT_PRECISION (int): Significant digits of reals in the report.
    DEFAULT_JOBS (int): Worker processes used for slicing when not overridden.
"""

# Geometry tolerances
WELD_EPS: float = 1e-6
CLOSURE_EPS: float = 1e-6
BOUNDARY_EPS: float = 1e-9

# Report output
REPORT_PRECISION: int = 10

# Slicing
DEFAULT_JOBS: int = 1

# Process exit codes
EXIT_OK: int = 0
EXIT_FILE_ERROR: int = 1
EXIT_MESH_ERROR: int = 2
EXIT_GEOMETRY_ERROR: int = 3
EXIT_USAGE_ERROR: int = 4
