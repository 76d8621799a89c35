"""Display helpers for summit identifiers, heights and distances."""

import math
from typing import Optional

# WOTA IDs above this are Lake District outlying fells (LDO)
WOTA_LDW_MAX = 214


def format_distance(meters: float) -> str:
    """Format a distance as e.g. ``"1.2 km"`` or ``"350 m"``."""
    if meters >= 1000:
        return f"{meters / 1000:.1f} km"
    return f"{math.floor(meters + 0.5)} m"


def format_sota_id(sotaid: Optional[int]) -> Optional[str]:
    """Format a SOTA number as ``G/LD-001``; None stays None."""
    if sotaid is None:
        return None
    return f"G/LD-{sotaid:03d}"


def format_wota_id(wotaid: int) -> str:
    """Format a WOTA number as ``LDW-001`` (<= 214) or ``LDO-001`` (215 onwards)."""
    if wotaid <= WOTA_LDW_MAX:
        return f"LDW-{wotaid:03d}"
    return f"LDO-{wotaid - WOTA_LDW_MAX:03d}"


def format_height(height: Optional[float]) -> str:
    """Format a height as ``"978m"``; missing or non-positive is ``"Unknown"``."""
    if height is None or math.isnan(height) or height <= 0:
        return "Unknown"
    return f"{height:g}m"
