"""Reference ellipsoids, datums and the National Grid projection constants.

Values are the published Ordnance Survey figures ("A guide to coordinate
systems in Great Britain") and are embedded here as fixed data.
"""

import math
from dataclasses import dataclass
from enum import Enum


class Datum(str, Enum):
    OSGB36 = "OSGB36"
    WGS84 = "WGS84"


@dataclass(frozen=True)
class Ellipsoid:
    name: str
    a: float  # semi-major axis (m)
    b: float  # semi-minor axis (m)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return 1 - (self.b ** 2) / (self.a ** 2)

    @property
    def n(self) -> float:
        return (self.a - self.b) / (self.a + self.b)


@dataclass(frozen=True)
class HelmertParameters:
    """Seven-parameter transform; translations in metres, scale in ppm,
    rotations in arc-seconds."""

    tx: float
    ty: float
    tz: float
    s: float
    rx: float
    ry: float
    rz: float

    def inverse(self) -> "HelmertParameters":
        return HelmertParameters(
            tx=-self.tx, ty=-self.ty, tz=-self.tz,
            s=-self.s,
            rx=-self.rx, ry=-self.ry, rz=-self.rz,
        )


@dataclass(frozen=True)
class TransverseMercator:
    ellipsoid: Ellipsoid
    f0: float     # scale factor on central meridian
    phi0: float   # latitude of true origin (rad)
    lam0: float   # longitude of true origin (rad)
    e0: float     # easting of true origin (m)
    n0: float     # northing of true origin (m)


AIRY_1830 = Ellipsoid("Airy1830", a=6377563.396, b=6356256.909)
WGS84_ELLIPSOID = Ellipsoid("WGS84", a=6378137.0, b=6356752.314245)

ELLIPSOIDS: dict[Datum, Ellipsoid] = {
    Datum.OSGB36: AIRY_1830,
    Datum.WGS84: WGS84_ELLIPSOID,
}

WGS84_TO_OSGB36 = HelmertParameters(
    tx=-446.448, ty=125.157, tz=-542.060,
    s=20.4894,
    rx=-0.1502, ry=-0.2470, rz=-0.8421,
)
OSGB36_TO_WGS84 = WGS84_TO_OSGB36.inverse()

NATIONAL_GRID = TransverseMercator(
    ellipsoid=AIRY_1830,
    f0=0.9996012717,
    phi0=math.radians(49.0),
    lam0=math.radians(-2.0),
    e0=400000.0,
    n0=-100000.0,
)

# National Grid extent (m)
GRID_MAX_EASTING = 700000.0
GRID_MAX_NORTHING = 1300000.0

# Iterative solvers stop when successive latitudes agree to this (rad)
LATITUDE_TOLERANCE = 1e-12
MAX_ITERATIONS = 10

# Mean Earth radius (IUGG), used for spherical distances
MEAN_EARTH_RADIUS_M = 6371008.8
