"""Tests for the National Grid transverse Mercator projection."""

import math

import numpy as np
import pytest

from summitgeo import projection
from summitgeo.datums import NATIONAL_GRID, Datum
from summitgeo.errors import DatumMismatch, ProjectionDivergence
from summitgeo.models import GeodeticCoordinate
from summitgeo.projection import from_grid, meridional_arc, to_grid

# Worked example from the OS guide to coordinate systems, annex C
OS_LAT = 52 + 39 / 60 + 27.2531 / 3600
OS_LON = 1 + 43 / 60 + 4.5177 / 3600
OS_EASTING = 651409.903
OS_NORTHING = 313177.270


class TestForward:
    def test_os_worked_example(self):
        e, n = to_grid(GeodeticCoordinate(lat=OS_LAT, lon=OS_LON, datum=Datum.OSGB36))
        assert abs(e - OS_EASTING) < 0.01
        assert abs(n - OS_NORTHING) < 0.01

    def test_true_origin(self):
        e, n = to_grid(GeodeticCoordinate(lat=49.0, lon=-2.0, datum=Datum.OSGB36))
        assert e == pytest.approx(400000.0, abs=1e-6)
        assert n == pytest.approx(-100000.0, abs=1e-6)

    def test_rejects_wgs84(self):
        with pytest.raises(DatumMismatch):
            to_grid(GeodeticCoordinate(lat=OS_LAT, lon=OS_LON, datum=Datum.WGS84))


class TestInverse:
    def test_os_worked_example(self):
        coord = from_grid(OS_EASTING, OS_NORTHING)
        assert coord.datum is Datum.OSGB36
        assert abs(coord.lat - OS_LAT) < 1e-7
        assert abs(coord.lon - OS_LON) < 1e-7

    def test_central_meridian(self):
        coord = from_grid(400000, 500000)
        assert coord.lon == pytest.approx(-2.0, abs=1e-12)

    def test_non_finite(self):
        with pytest.raises(ProjectionDivergence):
            from_grid(float("nan"), 500000)
        with pytest.raises(ProjectionDivergence):
            from_grid(300000, float("inf"))


class TestRoundTrip:
    def test_grid_points_recovered(self):
        rng = np.random.default_rng(42)
        eastings = rng.uniform(150000, 650000, size=50)
        northings = rng.uniform(10000, 1200000, size=50)
        for e, n in zip(eastings, northings):
            e2, n2 = to_grid(from_grid(float(e), float(n)))
            assert abs(e2 - e) < 0.01
            assert abs(n2 - n) < 0.01


class TestMeridionalArc:
    def test_zero_at_origin(self):
        assert meridional_arc(NATIONAL_GRID.phi0) == 0.0

    def test_one_degree_is_about_111km(self):
        arc = meridional_arc(NATIONAL_GRID.phi0 + math.radians(1))
        assert 110000 < arc < 112000

    def test_monotonic(self):
        phis = np.radians(np.linspace(49, 61, 25))
        arcs = [meridional_arc(float(p)) for p in phis]
        assert all(b > a for a, b in zip(arcs, arcs[1:]))


class TestDivergence:
    def test_iteration_cap(self, monkeypatch):
        monkeypatch.setattr(projection, "MAX_ITERATIONS", 1)
        with pytest.raises(ProjectionDivergence, match="did not converge"):
            from_grid(321500, 507200)

    def test_converges_within_cap(self):
        coord = from_grid(321500, 507200)
        assert 54 < coord.lat < 55

    def test_result_not_representable(self):
        with pytest.raises(ProjectionDivergence, match="not representable"):
            from_grid(1e8, 500000)
