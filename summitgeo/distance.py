"""Great-circle distance and nearest-summit search.

``find_nearest`` and ``nearest_summit`` are plain linear scans, which is
plenty for a few hundred summits. ``SummitIndex`` builds a
scipy.spatial.cKDTree over unit-sphere Cartesian points for larger sets
and gives the same answers.
"""

import logging
import math
from collections.abc import Hashable, Iterable
from typing import Optional

import numpy as np
from scipy.spatial import cKDTree

from .datums import MEAN_EARTH_RADIUS_M, Datum
from .errors import DatumMismatch
from .models import GeodeticCoordinate, SummitPoint

logger = logging.getLogger(__name__)


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance in metres between two lat/lon points (degrees)."""
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    return 2 * MEAN_EARTH_RADIUS_M * math.asin(min(1.0, math.sqrt(a)))


def distance_meters(a: GeodeticCoordinate, b: GeodeticCoordinate) -> float:
    """Great-circle distance between two WGS84 coordinates in metres."""
    for coord in (a, b):
        if coord.datum is not Datum.WGS84:
            raise DatumMismatch(f"distance needs WGS84, got {coord.datum.value}")
    return haversine_m(a.lat, a.lon, b.lat, b.lon)


def _closest(lat: float, lon: float, located: Iterable[tuple[object, float, float]]):
    """Return (item, distance) of the closest entry, or None.

    Only a strict improvement replaces the current best, so the first of
    several equidistant entries wins.
    """
    best = None
    min_distance = math.inf
    for item, item_lat, item_lon in located:
        d = haversine_m(lat, lon, item_lat, item_lon)
        if d < min_distance:
            min_distance = d
            best = item
    if best is None:
        return None
    return best, min_distance


def find_nearest_with_distance(
    reference: GeodeticCoordinate,
    candidates: Iterable[tuple[Hashable, Optional[GeodeticCoordinate]]],
) -> Optional[tuple[Hashable, float]]:
    """Like ``find_nearest`` but also returns the distance in metres."""
    if reference.datum is not Datum.WGS84:
        raise DatumMismatch(f"nearest search needs WGS84, got {reference.datum.value}")

    def located():
        for identifier, coord in candidates:
            # Skip candidates without computed coordinates
            if coord is None:
                continue
            if coord.datum is not Datum.WGS84:
                raise DatumMismatch(f"candidate {identifier!r} is {coord.datum.value}")
            yield identifier, coord.lat, coord.lon

    return _closest(reference.lat, reference.lon, located())


def find_nearest(
    reference: GeodeticCoordinate,
    candidates: Iterable[tuple[Hashable, Optional[GeodeticCoordinate]]],
) -> Optional[Hashable]:
    """Identifier of the candidate closest to ``reference``.

    Candidates are ``(identifier, coordinate)`` pairs; a ``None`` coordinate
    is skipped. Ties go to the earliest candidate. Returns None when no
    candidate has a location.
    """
    found = find_nearest_with_distance(reference, candidates)
    return None if found is None else found[0]


def nearest_summit(lat: float, lon: float, summits: Iterable[SummitPoint]) -> Optional[SummitPoint]:
    """Find the closest summit to the given WGS84 position, or None."""
    found = _closest(
        lat,
        lon,
        ((s, s.lat, s.lon) for s in summits if s.lat is not None and s.lon is not None),
    )
    return None if found is None else found[0]


# ── k-d tree index ───────────────────────────────────────────────


def _build_cartesian(lats_rad: np.ndarray, lons_rad: np.ndarray) -> np.ndarray:
    """Convert lat/lon (radians) to 3D unit-sphere Cartesian for cKDTree."""
    x = np.cos(lats_rad) * np.cos(lons_rad)
    y = np.cos(lats_rad) * np.sin(lons_rad)
    z = np.sin(lats_rad)
    return np.column_stack([x, y, z])


def _point_to_cartesian(lat_deg: float, lon_deg: float) -> np.ndarray:
    """Convert a single lat/lon (degrees) to 3D unit-sphere Cartesian."""
    lat_r = math.radians(lat_deg)
    lon_r = math.radians(lon_deg)
    return np.array([
        math.cos(lat_r) * math.cos(lon_r),
        math.cos(lat_r) * math.sin(lon_r),
        math.sin(lat_r),
    ])


class SummitIndex:
    """Immutable k-d tree over a fixed set of located summits.

    Summits without coordinates are dropped at construction. Tree hits are
    re-ranked with the haversine distance in input order, so results match
    ``nearest_summit`` over the same list.
    """

    # Tree neighbours re-ranked per nearest() query
    NEIGHBOURS = 8

    def __init__(self, summits: Iterable[SummitPoint]):
        self._summits: tuple[SummitPoint, ...] = tuple(
            s for s in summits if s.lat is not None and s.lon is not None
        )
        self._tree: Optional[cKDTree] = None
        if self._summits:
            lats = np.array([s.lat for s in self._summits], dtype=float)
            lons = np.array([s.lon for s in self._summits], dtype=float)
            self._tree = cKDTree(_build_cartesian(np.radians(lats), np.radians(lons)))
        logger.debug("Summit index built over %d located summits", len(self._summits))

    def __len__(self) -> int:
        return len(self._summits)

    def _rank(self, lat: float, lon: float, indices) -> list[tuple[SummitPoint, float]]:
        ranked = []
        for idx in sorted(int(i) for i in indices):
            s = self._summits[idx]
            ranked.append((s, haversine_m(lat, lon, s.lat, s.lon)))
        # Stable sort keeps input order among equal distances
        ranked.sort(key=lambda pair: pair[1])
        return ranked

    def nearest(self, lat: float, lon: float) -> Optional[SummitPoint]:
        if self._tree is None:
            return None
        k = min(self.NEIGHBOURS, len(self._summits))
        _, idx = self._tree.query(_point_to_cartesian(lat, lon), k=k)
        ranked = self._rank(lat, lon, np.atleast_1d(idx))
        return ranked[0][0]

    def within(self, lat: float, lon: float, radius_m: float) -> list[tuple[SummitPoint, float]]:
        """Summits within ``radius_m`` metres, nearest first, with distances."""
        if self._tree is None or radius_m < 0:
            return []
        # Chord length on the unit sphere for the given arc
        angle = min(radius_m / MEAN_EARTH_RADIUS_M, math.pi)
        chord = 2 * math.sin(angle / 2)
        indices = self._tree.query_ball_point(_point_to_cartesian(lat, lon), chord * (1 + 1e-9))
        return [pair for pair in self._rank(lat, lon, indices) if pair[1] <= radius_m]
