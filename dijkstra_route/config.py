"""
Configuration constants for dijkstra-route.

Paths and logging settings live here. Environment variables override
the defaults where noted.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Sample tables ship inside the package so installed copies find them
PACKAGE_DIR = Path(__file__).parent

DATA_DIR = PACKAGE_DIR / "data"

# Road distance table used when no --graph is given
DEFAULT_GRAPH_FILE = Path(
    os.environ.get("DIJKSTRA_ROUTE_GRAPH", DATA_DIR / "road_distances.csv")
)

# =============================================================================
# Graph Input Configuration
# =============================================================================

# Expected header of the distance table: from,to,distance
CSV_COLUMNS = ("from", "to", "distance")

# =============================================================================
# Output Configuration
# =============================================================================

PATH_SEPARATOR = " -> "

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
