"""Transverse Mercator projection for the OS National Grid (OSGB36 only).

Series expansions follow the Ordnance Survey guide to coordinate systems in
Great Britain, annex C. Latitudes and longitudes here are always on the
Airy 1830 ellipsoid; datum shifts live in ``helmert``.
"""

import logging
import math

from .datums import LATITUDE_TOLERANCE, MAX_ITERATIONS, NATIONAL_GRID, Datum
from .errors import DatumMismatch, ProjectionDivergence
from .models import GeodeticCoordinate

logger = logging.getLogger(__name__)

_GRID = NATIONAL_GRID
_A = _GRID.ellipsoid.a
_B = _GRID.ellipsoid.b
_E2 = _GRID.ellipsoid.e2
_F0 = _GRID.f0


def meridional_arc(phi: float) -> float:
    """Scaled meridional arc length from the true origin latitude to phi (m)."""
    n = _GRID.ellipsoid.n
    n2 = n * n
    n3 = n2 * n

    dphi = phi - _GRID.phi0
    sphi = phi + _GRID.phi0

    ma = (1 + n + (5.0 / 4.0) * n2 + (5.0 / 4.0) * n3) * dphi
    mb = (3 * n + 3 * n2 + (21.0 / 8.0) * n3) * math.sin(dphi) * math.cos(sphi)
    mc = ((15.0 / 8.0) * n2 + (15.0 / 8.0) * n3) * math.sin(2 * dphi) * math.cos(2 * sphi)
    md = (35.0 / 24.0) * n3 * math.sin(3 * dphi) * math.cos(3 * sphi)

    return _B * _F0 * (ma - mb + mc - md)


def _radii(sin_phi: float) -> tuple[float, float, float]:
    """Transverse radius nu, meridional radius rho and eta^2, all scaled by F0."""
    w = 1 - _E2 * sin_phi ** 2
    nu = _A * _F0 / math.sqrt(w)
    rho = _A * _F0 * (1 - _E2) / w ** 1.5
    return nu, rho, nu / rho - 1


def to_grid(coord: GeodeticCoordinate) -> tuple[float, float]:
    """Project an OSGB36 latitude/longitude to National Grid (easting, northing)."""
    if coord.datum is not Datum.OSGB36:
        raise DatumMismatch(f"projection needs OSGB36, got {coord.datum.value}")

    phi = math.radians(coord.lat)
    lam = math.radians(coord.lon)

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    tan2 = math.tan(phi) ** 2
    tan4 = tan2 * tan2
    nu, rho, eta2 = _radii(sin_phi)

    I = meridional_arc(phi) + _GRID.n0
    II = nu / 2 * sin_phi * cos_phi
    III = nu / 24 * sin_phi * cos_phi ** 3 * (5 - tan2 + 9 * eta2)
    IIIA = nu / 720 * sin_phi * cos_phi ** 5 * (61 - 58 * tan2 + tan4)
    IV = nu * cos_phi
    V = nu / 6 * cos_phi ** 3 * (nu / rho - tan2)
    VI = nu / 120 * cos_phi ** 5 * (5 - 18 * tan2 + tan4 + 14 * eta2 - 58 * tan2 * eta2)

    dl = lam - _GRID.lam0
    northing = I + II * dl ** 2 + III * dl ** 4 + IIIA * dl ** 6
    easting = _GRID.e0 + IV * dl + V * dl ** 3 + VI * dl ** 5
    return easting, northing


def _footpoint_latitude(northing: float) -> float:
    """Solve M(phi) = N - N0 for phi by fixed-point iteration.

    Raises ProjectionDivergence if successive estimates have not settled
    within MAX_ITERATIONS.
    """
    target = northing - _GRID.n0
    phi = target / (_A * _F0) + _GRID.phi0
    for iteration in range(1, MAX_ITERATIONS + 1):
        step = (target - meridional_arc(phi)) / (_A * _F0)
        phi += step
        if abs(step) < LATITUDE_TOLERANCE:
            logger.debug("Footpoint latitude converged after %d iterations", iteration)
            return phi
    raise ProjectionDivergence(f"latitude did not converge in {MAX_ITERATIONS} iterations")


def from_grid(easting: float, northing: float) -> GeodeticCoordinate:
    """Inverse projection: National Grid (easting, northing) to OSGB36 lat/lon."""
    if not (math.isfinite(easting) and math.isfinite(northing)):
        raise ProjectionDivergence("non-finite easting/northing")

    phi = _footpoint_latitude(northing)

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    tan_phi = math.tan(phi)
    tan2 = tan_phi ** 2
    tan4 = tan2 * tan2
    tan6 = tan4 * tan2
    nu, rho, eta2 = _radii(sin_phi)

    VII = tan_phi / (2 * rho * nu)
    VIII = tan_phi / (24 * rho * nu ** 3) * (5 + 3 * tan2 + eta2 - 9 * tan2 * eta2)
    IX = tan_phi / (720 * rho * nu ** 5) * (61 + 90 * tan2 + 45 * tan4)
    X = 1 / (cos_phi * nu)
    XI = 1 / (6 * cos_phi * nu ** 3) * (nu / rho + 2 * tan2)
    XII = 1 / (120 * cos_phi * nu ** 5) * (5 + 28 * tan2 + 24 * tan4)
    XIIA = 1 / (5040 * cos_phi * nu ** 7) * (61 + 662 * tan2 + 1320 * tan4 + 720 * tan6)

    de = easting - _GRID.e0
    lat = phi - VII * de ** 2 + VIII * de ** 4 - IX * de ** 6
    lon = _GRID.lam0 + X * de - XI * de ** 3 + XII * de ** 5 - XIIA * de ** 7

    lat_deg = math.degrees(lat)
    lon_deg = math.degrees(lon)
    if not (-90.0 <= lat_deg <= 90.0 and -180.0 <= lon_deg <= 180.0):
        raise ProjectionDivergence(f"E {easting:.0f} N {northing:.0f} is not representable")
    return GeodeticCoordinate(lat=lat_deg, lon=lon_deg, datum=Datum.OSGB36)
