"""Summit geodesy engine: National Grid, WGS84 and Maidenhead conversions
plus nearest-summit search."""

from .convert import (
    coordinates_to_grid_reference,
    distance_meters,
    find_nearest,
    grid_ref_to_latlon,
    grid_reference_to_coordinates,
    latlon_to_grid_ref,
    parse_grid_reference,
    to_maidenhead_locator,
)
from .datums import Datum
from .distance import SummitIndex, nearest_summit
from .errors import (
    CoverageError,
    DatumMismatch,
    GeoError,
    ParseError,
    ProjectionDivergence,
    RangeError,
    Result,
)
from .gridref import GridReference
from .models import GeodeticCoordinate, SummitPoint, wgs84

__version__ = "1.0.0"

__all__ = [
    # Conversions
    "parse_grid_reference",
    "grid_reference_to_coordinates",
    "coordinates_to_grid_reference",
    "to_maidenhead_locator",
    "grid_ref_to_latlon",
    "latlon_to_grid_ref",
    # Distance and search
    "distance_meters",
    "find_nearest",
    "nearest_summit",
    "SummitIndex",
    # Types
    "Datum",
    "GeodeticCoordinate",
    "GridReference",
    "SummitPoint",
    "wgs84",
    # Errors
    "GeoError",
    "ParseError",
    "RangeError",
    "ProjectionDivergence",
    "CoverageError",
    "DatumMismatch",
    "Result",
]
