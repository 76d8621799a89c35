"""Ordnance Survey National Grid references: parsing, validation, formatting.

A reference such as ``NY 215 072`` names a 100 km square by two letters and
then gives easting and northing digits within it. Six digits locate a
100 m cell, ten digits a 1 m cell.
"""

import math
import re
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .datums import GRID_MAX_EASTING, GRID_MAX_NORTHING
from .errors import CoverageError, ParseError, RangeError

SQUARE_SIZE = 100000

# 5x5 lettering table, "I" omitted
_LETTERS = "ABCDEFGHJKLMNOPQRSTUVWXYZ"

_GRIDREF_RE = re.compile(r"^([A-Z]{2})([0-9]*)$")
# All-numeric "easting,northing" in metres from the grid origin
_NUMERIC_RE = re.compile(r"^([0-9]+(?:\.[0-9]+)?),([0-9]+(?:\.[0-9]+)?)$")
_WHITESPACE_RE = re.compile(r"\s+")


def _square_letters(e100k: int, n100k: int) -> str:
    """Two-letter code of the 100 km square with the given SW corner index."""
    row = 19 - n100k
    l1 = row - row % 5 + (e100k + 10) // 5
    l2 = row * 5 % 25 + e100k % 5
    return _LETTERS[l1] + _LETTERS[l2]


def _build_square_table() -> dict[str, tuple[int, int]]:
    squares = {}
    for e100k in range(int(GRID_MAX_EASTING // SQUARE_SIZE)):
        for n100k in range(int(GRID_MAX_NORTHING // SQUARE_SIZE)):
            squares[_square_letters(e100k, n100k)] = (e100k, n100k)
    return squares


# Code -> (easting index, northing index) for every square on the grid
SQUARES: dict[str, tuple[int, int]] = _build_square_table()


class GridReference(BaseModel):
    """A National Grid reference at a given precision.

    ``easting`` and ``northing`` are metres from the SW corner of the
    100 km square; ``precision`` is the number of digits per axis.
    """

    square: str
    easting: int = Field(ge=0, lt=SQUARE_SIZE)
    northing: int = Field(ge=0, lt=SQUARE_SIZE)
    precision: int = Field(ge=1, le=5)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_square_and_resolution(self):
        if self.square not in SQUARES:
            raise ValueError(f"unknown 100km square {self.square!r}")
        res = self.resolution
        if self.easting % res or self.northing % res:
            raise ValueError(
                f"offsets must be multiples of {res} m at precision {self.precision}"
            )
        return self

    @property
    def resolution(self) -> int:
        """Size of the referenced cell in metres."""
        return 10 ** (5 - self.precision)

    @property
    def absolute_easting(self) -> int:
        return SQUARES[self.square][0] * SQUARE_SIZE + self.easting

    @property
    def absolute_northing(self) -> int:
        return SQUARES[self.square][1] * SQUARE_SIZE + self.northing

    def format(self, digits_per_axis: Optional[int] = None, separator: str = " ") -> str:
        """Render as text, optionally coarsened or padded to another precision."""
        digits = self.precision if digits_per_axis is None else digits_per_axis
        if not 1 <= digits <= 5:
            raise RangeError(f"digits per axis must be 1-5, got {digits}")
        scale = 10 ** (5 - digits)
        e = f"{self.easting // scale:0{digits}d}"
        n = f"{self.northing // scale:0{digits}d}"
        return separator.join([self.square, e, n])

    def compact(self) -> str:
        return self.format(separator="")

    def __str__(self) -> str:
        return self.format()


def parse(text: str) -> GridReference:
    """Parse a grid reference such as ``"NY215072"`` or ``"NY 215 072"``.

    An all-numeric ``"651409,313177"`` is read as absolute easting,northing
    in metres and returned at 1 m precision.

    Raises ParseError for an unknown square code, non-digit characters, or
    a digit count that is odd, zero or above ten.
    """
    if not isinstance(text, str):
        raise ParseError(f"expected text, got {type(text).__name__}")
    cleaned = _WHITESPACE_RE.sub("", text).upper()
    numeric = _NUMERIC_RE.match(cleaned)
    if numeric:
        try:
            return from_national_grid(float(numeric.group(1)), float(numeric.group(2)))
        except CoverageError as e:
            raise ParseError(e.detail)
    match = _GRIDREF_RE.match(cleaned)
    if not match:
        raise ParseError(repr(text))

    square, digits = match.groups()
    if square not in SQUARES:
        raise ParseError(f"unknown 100km square {square!r}")
    if not digits or len(digits) % 2 or len(digits) > 10:
        raise ParseError(f"expected 2-10 digits in pairs, got {len(digits)}")

    half = len(digits) // 2
    scale = 10 ** (5 - half)
    return GridReference(
        square=square,
        easting=int(digits[:half]) * scale,
        northing=int(digits[half:]) * scale,
        precision=half,
    )


def from_national_grid(easting: float, northing: float, digits_per_axis: int = 5) -> GridReference:
    """Build the reference of the cell containing an absolute easting/northing.

    Coordinates are rounded to the millimetre and then truncated to the
    requested resolution, so a cell's SW corner maps back to that cell.
    """
    if not 1 <= digits_per_axis <= 5:
        raise RangeError(f"digits per axis must be 1-5, got {digits_per_axis}")
    if not (math.isfinite(easting) and math.isfinite(northing)):
        raise CoverageError("non-finite easting/northing")

    e = round(easting, 3)
    n = round(northing, 3)
    if not (0 <= e < GRID_MAX_EASTING and 0 <= n < GRID_MAX_NORTHING):
        raise CoverageError(f"E {e:.0f} N {n:.0f}")

    e100k, n100k = int(e // SQUARE_SIZE), int(n // SQUARE_SIZE)
    scale = 10 ** (5 - digits_per_axis)
    return GridReference(
        square=_square_letters(e100k, n100k),
        easting=int((e % SQUARE_SIZE) // scale) * scale,
        northing=int((n % SQUARE_SIZE) // scale) * scale,
        precision=digits_per_axis,
    )
