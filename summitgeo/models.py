"""Immutable value types shared across the engine."""

from typing import NamedTuple, Optional, Union

from pydantic import BaseModel, Field

from .datums import Datum


class GeodeticCoordinate(BaseModel):
    """Latitude/longitude in decimal degrees, tagged with its datum."""

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    height: float = 0.0
    datum: Datum = Datum.WGS84

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[float, float]:
        return self.lat, self.lon


class Cartesian(NamedTuple):
    """Earth-centred, Earth-fixed coordinates in metres."""

    x: float
    y: float
    z: float


SummitId = Union[int, str]


class SummitPoint(BaseModel):
    """A queryable summit as supplied by the persistence layer.

    Coordinates are WGS84 and may be missing when the summit's grid
    reference could not be converted.
    """

    identifier: SummitId
    name: Optional[str] = None
    lat: Optional[float] = Field(default=None, ge=-90.0, le=90.0)
    lon: Optional[float] = Field(default=None, ge=-180.0, le=180.0)

    model_config = {"frozen": True}

    @property
    def coordinate(self) -> Optional[GeodeticCoordinate]:
        if self.lat is None or self.lon is None:
            return None
        return GeodeticCoordinate(lat=self.lat, lon=self.lon)


def wgs84(lat: float, lon: float) -> GeodeticCoordinate:
    """Shorthand for a WGS84 coordinate at zero height."""
    return GeodeticCoordinate(lat=lat, lon=lon, datum=Datum.WGS84)
