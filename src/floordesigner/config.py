"""
Configuration for the floor designer
"""

import os
from pathlib import Path

# Default specifications
DEFAULT_OVERALL_WIDTH = 12.0
DEFAULT_OVERALL_HEIGHT = 10.0
DEFAULT_WALL_THICKNESS = 15.0  # cm
DEFAULT_CEILING_HEIGHT = 3.0
DEFAULT_UNIT = "meters"
DEFAULT_BHK_TYPE = "2BHK"
DEFAULT_SHAPE = "Rectangular"

# Template store; unset means only the packaged templates are served
TEMPLATES_PATH = os.getenv("FLOORDESIGNER_TEMPLATES")

# Web server
HOST = os.getenv("FLOORDESIGNER_HOST", "127.0.0.1")
PORT = int(os.getenv("FLOORDESIGNER_PORT", "5000"))

# Logging
LOG_LEVEL = os.getenv("FLOORDESIGNER_LOG_LEVEL", "WARNING").upper()

# Output
OUTPUT_DIR = Path(os.getenv("FLOORDESIGNER_OUTPUT_DIR", "./outputs"))
