"""Whole-table helpers for summit lists held in pandas DataFrames.

The persistence layer hands over summit rows with a stored grid reference
(``gridid``); these helpers add WGS84 and locator columns and answer
nearest-summit queries against such a frame.
"""

import logging
from typing import Optional

import pandas as pd

from .config import (
    MAIDENHEAD_PRECISION,
    SUMMIT_GRID_COLUMN,
    SUMMIT_ID_COLUMN,
    SUMMIT_INDEX_THRESHOLD,
    SUMMIT_NAME_COLUMN,
)
from .convert import grid_reference_to_coordinates, parse_grid_reference, to_maidenhead_locator
from .distance import SummitIndex, nearest_summit
from .models import SummitId, SummitPoint

logger = logging.getLogger(__name__)


def _locate(reference, precision: int) -> tuple[Optional[float], Optional[float], Optional[str]]:
    if not isinstance(reference, str) or not reference.strip():
        return None, None, None
    result = parse_grid_reference(reference)
    if result.ok:
        result = grid_reference_to_coordinates(result.value)
    if not result.ok:
        return None, None, None
    coord = result.value
    locator = to_maidenhead_locator(coord.lat, coord.lon, precision).value_or_none()
    return coord.lat, coord.lon, locator


def locate_summits(
    df: pd.DataFrame,
    grid_column: str = SUMMIT_GRID_COLUMN,
    precision: int = MAIDENHEAD_PRECISION,
) -> pd.DataFrame:
    """Return a copy of ``df`` with ``lat``, ``lon`` and ``locator`` columns.

    Rows whose grid reference is missing or invalid get missing values.
    """
    if grid_column not in df.columns:
        raise KeyError(f"column {grid_column!r} not in frame")

    located = [_locate(ref, precision) for ref in df[grid_column].tolist()]
    out = df.copy()
    out["lat"] = pd.array([row[0] for row in located], dtype="Float64")
    out["lon"] = pd.array([row[1] for row in located], dtype="Float64")
    out["locator"] = pd.array([row[2] for row in located], dtype="string")

    failed = int(out["lat"].isna().sum())
    logger.info("Located %d/%d summits (%d without a usable grid reference)",
                len(out) - failed, len(out), failed)
    return out


def summits_from_frame(
    df: pd.DataFrame,
    id_column: str = SUMMIT_ID_COLUMN,
    name_column: str = SUMMIT_NAME_COLUMN,
) -> list[SummitPoint]:
    """Build SummitPoints from a frame that already has ``lat``/``lon`` columns."""
    has_name = name_column in df.columns
    summits = []
    for row in df.to_dict("records"):
        lat, lon = row.get("lat"), row.get("lon")
        summits.append(SummitPoint(
            identifier=row[id_column],
            name=row[name_column] if has_name and not pd.isna(row[name_column]) else None,
            lat=None if pd.isna(lat) else float(lat),
            lon=None if pd.isna(lon) else float(lon),
        ))
    return summits


def nearest_in_frame(
    df: pd.DataFrame,
    lat: float,
    lon: float,
    id_column: str = SUMMIT_ID_COLUMN,
) -> Optional[SummitId]:
    """Identifier of the located row nearest to (lat, lon), or None."""
    summits = summits_from_frame(df, id_column=id_column)
    if len(summits) >= SUMMIT_INDEX_THRESHOLD:
        found = SummitIndex(summits).nearest(lat, lon)
    else:
        found = nearest_summit(lat, lon, summits)
    return None if found is None else found.identifier
