"""Tests for geocentric conversion and the OSGB36/WGS84 Helmert transform."""

import pytest

from summitgeo import helmert
from summitgeo.datums import AIRY_1830, OSGB36_TO_WGS84, WGS84_ELLIPSOID, WGS84_TO_OSGB36, Datum
from summitgeo.distance import haversine_m
from summitgeo.errors import ProjectionDivergence
from summitgeo.helmert import apply_helmert, convert, to_cartesian, to_geodetic
from summitgeo.models import Cartesian, GeodeticCoordinate


class TestCartesian:
    def test_equator_prime_meridian(self):
        point = to_cartesian(GeodeticCoordinate(lat=0.0, lon=0.0))
        assert point.x == pytest.approx(WGS84_ELLIPSOID.a)
        assert point.y == pytest.approx(0.0, abs=1e-9)
        assert point.z == pytest.approx(0.0, abs=1e-9)

    def test_uses_own_ellipsoid(self):
        point = to_cartesian(GeodeticCoordinate(lat=0.0, lon=0.0, datum=Datum.OSGB36))
        assert point.x == pytest.approx(AIRY_1830.a)

    @pytest.mark.parametrize("datum", [Datum.OSGB36, Datum.WGS84])
    @pytest.mark.parametrize(
        "lat, lon, height",
        [(54.454, -3.212, 0.0), (51.5, -0.1, 978.0), (-33.9, 151.2, 50.0), (89.9, 10.0, 0.0), (0.0, 179.0, -20.0)],
    )
    def test_round_trip(self, datum, lat, lon, height):
        coord = GeodeticCoordinate(lat=lat, lon=lon, height=height, datum=datum)
        back = to_geodetic(to_cartesian(coord), datum)
        assert back.datum is datum
        assert back.lat == pytest.approx(lat, abs=1e-9)
        assert back.lon == pytest.approx(lon, abs=1e-9)
        assert back.height == pytest.approx(height, abs=1e-4)

    def test_pole(self):
        coord = to_geodetic(Cartesian(0.0, 0.0, WGS84_ELLIPSOID.b), Datum.WGS84)
        assert coord.lat == 90.0
        assert coord.height == pytest.approx(0.0, abs=1e-6)

    def test_south_pole(self):
        coord = to_geodetic(Cartesian(0.0, 0.0, -AIRY_1830.b - 10), Datum.OSGB36)
        assert coord.lat == -90.0
        assert coord.height == pytest.approx(10.0)

    def test_iteration_cap(self, monkeypatch):
        point = to_cartesian(GeodeticCoordinate(lat=54.454, lon=-3.212))
        monkeypatch.setattr(helmert, "MAX_ITERATIONS", 0)
        with pytest.raises(ProjectionDivergence, match="did not converge"):
            to_geodetic(point, Datum.WGS84)


class TestHelmert:
    def test_inverse_parameters_negate(self):
        assert OSGB36_TO_WGS84.tx == -WGS84_TO_OSGB36.tx
        assert OSGB36_TO_WGS84.s == -WGS84_TO_OSGB36.s
        assert OSGB36_TO_WGS84.rz == -WGS84_TO_OSGB36.rz

    def test_forward_then_inverse_is_sub_metre(self):
        point = to_cartesian(GeodeticCoordinate(lat=54.454, lon=-3.212))
        back = apply_helmert(apply_helmert(point, WGS84_TO_OSGB36), OSGB36_TO_WGS84)
        for a, b in zip(point, back):
            assert abs(a - b) < 0.05


class TestConvert:
    def test_same_datum_is_identity(self):
        coord = GeodeticCoordinate(lat=54.454, lon=-3.212)
        assert convert(coord, Datum.WGS84) is coord

    def test_tags_target_datum(self):
        osgb = convert(GeodeticCoordinate(lat=54.454, lon=-3.212), Datum.OSGB36)
        assert osgb.datum is Datum.OSGB36

    def test_shift_is_around_a_hundred_metres(self):
        wgs = GeodeticCoordinate(lat=54.454, lon=-3.212)
        osgb = convert(wgs, Datum.OSGB36)
        shift = haversine_m(wgs.lat, wgs.lon, osgb.lat, osgb.lon)
        assert 20 < shift < 300

    def test_round_trip(self):
        wgs = GeodeticCoordinate(lat=52.658, lon=1.716)
        back = convert(convert(wgs, Datum.OSGB36), Datum.WGS84)
        assert back.lat == pytest.approx(wgs.lat, abs=1e-6)
        assert back.lon == pytest.approx(wgs.lon, abs=1e-6)
