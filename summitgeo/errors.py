"""Error taxonomy for the geodesy engine and the value-or-error ``Result``."""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class GeoError(ValueError):
    """Base class for expected, recoverable conversion failures."""

    default_message = "geodetic conversion failed"

    def __init__(self, detail: str = ""):
        self.detail = detail
        message = self.default_message
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ParseError(GeoError):
    default_message = "invalid grid reference"


class RangeError(GeoError):
    default_message = "out of range"


class ProjectionDivergence(GeoError):
    default_message = "projection failure"


class CoverageError(GeoError):
    default_message = "outside National Grid coverage"


class DatumMismatch(GeoError):
    default_message = "coordinate is in the wrong datum"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or the ``GeoError`` that prevented computing it."""

    value: Optional[T] = None
    error: Optional[GeoError] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: GeoError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value

    def value_or_none(self) -> Optional[T]:
        return self.value if self.error is None else None
