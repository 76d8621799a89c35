"""Tests for summit display formatting."""

from summitgeo.formatters import format_distance, format_height, format_sota_id, format_wota_id


class TestFormatDistance:
    def test_metres(self):
        assert format_distance(350) == "350 m"

    def test_rounds_half_up(self):
        assert format_distance(350.5) == "351 m"

    def test_kilometres(self):
        assert format_distance(1234) == "1.2 km"

    def test_boundary(self):
        assert format_distance(1000) == "1.0 km"


class TestSummitIds:
    def test_sota(self):
        assert format_sota_id(1) == "G/LD-001"
        assert format_sota_id(56) == "G/LD-056"

    def test_sota_missing(self):
        assert format_sota_id(None) is None

    def test_wota_ldw(self):
        assert format_wota_id(1) == "LDW-001"
        assert format_wota_id(214) == "LDW-214"

    def test_wota_ldo(self):
        assert format_wota_id(215) == "LDO-001"
        assert format_wota_id(330) == "LDO-116"


class TestFormatHeight:
    def test_known(self):
        assert format_height(978) == "978m"

    def test_whole_float(self):
        assert format_height(978.0) == "978m"

    def test_fractional(self):
        assert format_height(978.5) == "978.5m"

    def test_missing(self):
        assert format_height(None) == "Unknown"
        assert format_height(float("nan")) == "Unknown"

    def test_unknown(self):
        assert format_height(0) == "Unknown"
