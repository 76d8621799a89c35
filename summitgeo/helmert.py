"""Datum transforms between OSGB36 and WGS84.

Geodetic coordinates are taken to geocentric Cartesian on the source
datum's ellipsoid, shifted with a 7-parameter Helmert transform, and
brought back to geodetic on the target ellipsoid. Accuracy is the ~5 m of
the published single-transform parameters.
"""

import math

from .datums import (
    ELLIPSOIDS,
    LATITUDE_TOLERANCE,
    MAX_ITERATIONS,
    OSGB36_TO_WGS84,
    WGS84_TO_OSGB36,
    Datum,
    HelmertParameters,
)
from .errors import ProjectionDivergence
from .models import Cartesian, GeodeticCoordinate

_ARCSEC = math.pi / (180 * 3600)

_TRANSFORMS: dict[tuple[Datum, Datum], HelmertParameters] = {
    (Datum.OSGB36, Datum.WGS84): OSGB36_TO_WGS84,
    (Datum.WGS84, Datum.OSGB36): WGS84_TO_OSGB36,
}


def to_cartesian(coord: GeodeticCoordinate) -> Cartesian:
    """Geodetic latitude/longitude/height to geocentric x/y/z on its own ellipsoid."""
    ellipsoid = ELLIPSOIDS[coord.datum]
    e2 = ellipsoid.e2
    phi = math.radians(coord.lat)
    lam = math.radians(coord.lon)
    h = coord.height

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    nu = ellipsoid.a / math.sqrt(1 - e2 * sin_phi ** 2)

    return Cartesian(
        x=(nu + h) * cos_phi * math.cos(lam),
        y=(nu + h) * cos_phi * math.sin(lam),
        z=(nu * (1 - e2) + h) * sin_phi,
    )


def to_geodetic(point: Cartesian, datum: Datum) -> GeodeticCoordinate:
    """Geocentric x/y/z to geodetic coordinates on ``datum``'s ellipsoid.

    Starts from Bowring's closed-form latitude and refines it until
    successive estimates agree to LATITUDE_TOLERANCE.
    """
    ellipsoid = ELLIPSOIDS[datum]
    a, b, e2 = ellipsoid.a, ellipsoid.b, ellipsoid.e2
    x, y, z = point

    p = math.hypot(x, y)
    lam = math.atan2(y, x)

    if p == 0:
        # On the polar axis
        return GeodeticCoordinate(lat=math.copysign(90.0, z), lon=0.0, height=abs(z) - b, datum=datum)

    eps2 = e2 / (1 - e2)
    r = math.hypot(p, z)
    tan_beta = (b * z) / (a * p) * (1 + eps2 * b / r)
    beta = math.atan(tan_beta)
    sin_beta = math.sin(beta)
    cos_beta = math.cos(beta)
    phi = math.atan2(z + eps2 * b * sin_beta ** 3, p - e2 * a * cos_beta ** 3)

    for _ in range(MAX_ITERATIONS):
        nu = a / math.sqrt(1 - e2 * math.sin(phi) ** 2)
        refined = math.atan2(z + e2 * nu * math.sin(phi), p)
        converged = abs(refined - phi) < LATITUDE_TOLERANCE
        phi = refined
        if converged:
            break
    else:
        raise ProjectionDivergence("geocentric latitude did not converge")

    sin_phi = math.sin(phi)
    nu = a / math.sqrt(1 - e2 * sin_phi ** 2)
    h = p * math.cos(phi) + z * sin_phi - a * a / nu

    return GeodeticCoordinate(
        lat=math.degrees(phi),
        lon=math.degrees(lam),
        height=h,
        datum=datum,
    )


def apply_helmert(point: Cartesian, params: HelmertParameters) -> Cartesian:
    """Small-angle Helmert transform: T + (1 + s) * X + R x X."""
    s1 = 1 + params.s * 1e-6
    rx = params.rx * _ARCSEC
    ry = params.ry * _ARCSEC
    rz = params.rz * _ARCSEC
    x, y, z = point

    return Cartesian(
        x=params.tx + s1 * x - rz * y + ry * z,
        y=params.ty + rz * x + s1 * y - rx * z,
        z=params.tz - ry * x + rx * y + s1 * z,
    )


def convert(coord: GeodeticCoordinate, target: Datum) -> GeodeticCoordinate:
    """Re-express a coordinate on another datum.

    Returns the input unchanged when it is already on ``target``.
    """
    if coord.datum is target:
        return coord
    params = _TRANSFORMS[(coord.datum, target)]
    shifted = apply_helmert(to_cartesian(coord), params)
    return to_geodetic(shifted, target)
