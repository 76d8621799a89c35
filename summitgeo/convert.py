"""Conversion entry points used by the summit API and UI layers.

Every failure here is an expected condition (a typo in a stored grid
reference, a position outside Great Britain), so these functions return a
``Result`` instead of raising. ``grid_ref_to_latlon`` and
``latlon_to_grid_ref`` keep the older text-in/text-out shape and return
None on failure.
"""

import logging
from typing import Optional

from . import gridref, helmert, maidenhead, projection
from .config import GRIDREF_DIGITS_PER_AXIS, MAIDENHEAD_PRECISION
from .datums import Datum
from .distance import distance_meters, find_nearest
from .errors import GeoError, RangeError, Result
from .gridref import GridReference
from .models import GeodeticCoordinate

logger = logging.getLogger(__name__)

__all__ = [
    "parse_grid_reference",
    "grid_reference_to_coordinates",
    "coordinates_to_grid_reference",
    "to_maidenhead_locator",
    "distance_meters",
    "find_nearest",
    "grid_ref_to_latlon",
    "latlon_to_grid_ref",
]


def parse_grid_reference(text: str) -> Result[GridReference]:
    try:
        return Result.success(gridref.parse(text))
    except GeoError as e:
        logger.debug("Rejected grid reference %r: %s", text, e)
        return Result.failure(e)


def grid_reference_to_coordinates(ref: GridReference) -> Result[GeodeticCoordinate]:
    """WGS84 position of the SW corner of the referenced cell."""
    try:
        osgb = projection.from_grid(ref.absolute_easting, ref.absolute_northing)
        return Result.success(helmert.convert(osgb, Datum.WGS84))
    except GeoError as e:
        logger.debug("Could not convert %s: %s", ref, e)
        return Result.failure(e)


def coordinates_to_grid_reference(
    lat: float,
    lon: float,
    digits_per_axis: int = GRIDREF_DIGITS_PER_AXIS,
) -> Result[GridReference]:
    """Grid reference of the cell containing a WGS84 position."""
    try:
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            raise RangeError(f"{lat}, {lon}")
        osgb = helmert.convert(GeodeticCoordinate(lat=lat, lon=lon), Datum.OSGB36)
        easting, northing = projection.to_grid(osgb)
        return Result.success(gridref.from_national_grid(easting, northing, digits_per_axis))
    except GeoError as e:
        logger.debug("No grid reference for %s, %s: %s", lat, lon, e)
        return Result.failure(e)


def to_maidenhead_locator(
    lat: float,
    lon: float,
    precision: int = MAIDENHEAD_PRECISION,
) -> Result[str]:
    try:
        return Result.success(maidenhead.encode(lat, lon, precision))
    except GeoError as e:
        logger.debug("No locator for %s, %s: %s", lat, lon, e)
        return Result.failure(e)


def grid_ref_to_latlon(text: str) -> Optional[tuple[float, float]]:
    """Convert e.g. ``"NY215072"`` straight to a WGS84 (lat, lon), or None."""
    result = parse_grid_reference(text)
    if result.ok:
        result = grid_reference_to_coordinates(result.value)
    if not result.ok:
        logger.warning("Invalid grid reference %r: %s", text, result.error)
        return None
    return result.value.as_tuple()


def latlon_to_grid_ref(lat: float, lon: float, digits: int = 10) -> Optional[str]:
    """Convert a WGS84 position to grid reference text, or None outside the grid.

    ``digits`` counts both axes together, so 6 gives ``"NY 215 072"``.
    """
    if digits % 2 or not 2 <= digits <= 10:
        logger.warning("Unsupported grid reference length %d", digits)
        return None
    result = coordinates_to_grid_reference(lat, lon, digits // 2)
    if not result.ok:
        logger.warning("Invalid coordinates %s, %s: %s", lat, lon, result.error)
        return None
    return str(result.value)
