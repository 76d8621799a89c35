"""Tests for Maidenhead locator encoding."""

import numpy as np
import pytest

from summitgeo.errors import RangeError
from summitgeo.maidenhead import encode


class TestKnownLocators:
    def test_scafell_pike(self):
        assert encode(54.454, -3.212, 3) == "IO84jk"

    def test_london(self):
        assert encode(51.5074, -0.1278, 3) == "IO91wm"

    def test_folsom(self):
        assert encode(38.69, -121.12, 3) == "CM98kq"

    def test_extended_square(self):
        assert encode(54.454, -3.212, 4) == "IO84jk48"

    def test_default_precision(self):
        assert len(encode(54.454, -3.212)) == 6

    def test_south_west_corner(self):
        assert encode(-90.0, -180.0, 4) == "AA00aa00"

    def test_north_east_corner_stays_on_grid(self):
        assert encode(90.0, 180.0, 4) == "RR99xx99"

    def test_extended_cell_centres(self):
        # Centre of extended cell k in the first subsquare of AA00
        for k in range(10):
            lon = -180.0 + (k + 0.5) / 120
            lat = -90.0 + (k + 0.5) / 240
            assert encode(lat, lon, 4) == f"AA00aa{k}{k}"


class TestProperties:
    def test_length_is_twice_precision(self):
        for precision in range(1, 5):
            assert len(encode(54.454, -3.212, precision)) == 2 * precision

    def test_prefix_stable(self):
        rng = np.random.default_rng(7)
        for lat, lon in zip(rng.uniform(-90, 90, 200), rng.uniform(-180, 180, 200)):
            full = encode(float(lat), float(lon), 4)
            for precision in range(1, 4):
                assert full.startswith(encode(float(lat), float(lon), precision))

    def test_alphabet(self):
        loc = encode(-33.9, 151.2, 4)
        assert loc[0:2].isupper() and loc[0:2].isalpha()
        assert loc[2:4].isdigit()
        assert loc[4:6].islower() and loc[4:6].isalpha()
        assert loc[6:8].isdigit()


class TestRange:
    @pytest.mark.parametrize(
        "lat, lon",
        [(90.1, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0), (float("nan"), 0.0), (0.0, float("inf"))],
    )
    def test_rejects_out_of_range(self, lat, lon):
        with pytest.raises(RangeError):
            encode(lat, lon)

    @pytest.mark.parametrize("precision", [0, 5, -1])
    def test_rejects_bad_precision(self, precision):
        with pytest.raises(RangeError):
            encode(54.454, -3.212, precision)
