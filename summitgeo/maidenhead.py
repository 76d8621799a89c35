"""Maidenhead locator encoding.

Structure (each pair adds precision):
    Field      : 2 uppercase letters  (A-R)  -> 20 deg lon x 10 deg lat
    Square     : 2 digits             (0-9)  -> 2 deg lon  x 1 deg lat
    Subsquare  : 2 lowercase letters  (a-x)  -> 5' lon     x 2.5' lat
    Extended   : 2 digits             (0-9)  -> 30" lon    x 15" lat

Both axes are quantised once to extended-square cells and every level is
taken from the integer remainder of the level above, so a longer locator
always starts with the shorter one.
"""

import math

from .errors import RangeError

MIN_PRECISION = 1
MAX_PRECISION = 4

# (divisions of the parent cell, alphabet) per level
_LEVELS = (
    (18, "ABCDEFGHIJKLMNOPQR"),
    (10, "0123456789"),
    (24, "abcdefghijklmnopqrstuvwx"),
    (10, "0123456789"),
)

# Finest cells per degree: 18*10*24*10 over 360 deg lon / 180 deg lat
_LON_CELLS_PER_DEGREE = 120
_LAT_CELLS_PER_DEGREE = 240
_CELLS_PER_AXIS = 18 * 10 * 24 * 10


def _cell_index(value: float, cells_per_degree: int) -> int:
    # The closed upper edge (lon 180, lat 90) belongs to the last cell
    return min(math.floor(value * cells_per_degree), _CELLS_PER_AXIS - 1)


def _digits(index: int) -> list[str]:
    """Split a finest-level cell index into one symbol per level."""
    symbols = []
    divisor = _CELLS_PER_AXIS
    for size, alphabet in _LEVELS:
        divisor //= size
        symbols.append(alphabet[index // divisor])
        index %= divisor
    return symbols


def encode(lat: float, lon: float, precision: int = 3) -> str:
    """Encode a WGS84 position as a Maidenhead locator of ``2 * precision`` chars.

    Raises RangeError for latitude outside [-90, 90], longitude outside
    [-180, 180], non-finite values, or precision outside 1-4.
    """
    if not MIN_PRECISION <= precision <= MAX_PRECISION:
        raise RangeError(f"precision must be {MIN_PRECISION}-{MAX_PRECISION}, got {precision}")
    if not (math.isfinite(lat) and -90.0 <= lat <= 90.0):
        raise RangeError(f"latitude {lat} must be between -90 and 90")
    if not (math.isfinite(lon) and -180.0 <= lon <= 180.0):
        raise RangeError(f"longitude {lon} must be between -180 and 180")

    lon_symbols = _digits(_cell_index(lon + 180.0, _LON_CELLS_PER_DEGREE))
    lat_symbols = _digits(_cell_index(lat + 90.0, _LAT_CELLS_PER_DEGREE))

    return "".join(
        lon_symbols[level] + lat_symbols[level] for level in range(precision)
    )
