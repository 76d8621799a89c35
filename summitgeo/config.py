"""Engine configuration loaded from environment variables.

Geodetic constants are fixed data in ``datums``; only defaults and
presentation choices are configurable here.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path)

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Conversion defaults
GRIDREF_DIGITS_PER_AXIS: int = int(os.getenv("GRIDREF_DIGITS_PER_AXIS", "5"))
MAIDENHEAD_PRECISION: int = int(os.getenv("MAIDENHEAD_PRECISION", "3"))

# Candidate count from which nearest queries switch to the k-d tree index
SUMMIT_INDEX_THRESHOLD: int = int(os.getenv("SUMMIT_INDEX_THRESHOLD", "500"))

# Summit table column names
SUMMIT_GRID_COLUMN: str = os.getenv("SUMMIT_GRID_COLUMN", "gridid")
SUMMIT_ID_COLUMN: str = os.getenv("SUMMIT_ID_COLUMN", "wotaid")
SUMMIT_NAME_COLUMN: str = os.getenv("SUMMIT_NAME_COLUMN", "name")
