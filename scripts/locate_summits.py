#!/usr/bin/env python3
"""Locate every summit in a CSV export and optionally find the nearest one.

Usage:
    python scripts/locate_summits.py summits.csv                         # Print summary
    python scripts/locate_summits.py summits.csv -o located.parquet      # Write lat/lon/locator
    python scripts/locate_summits.py summits.csv --near 54.45,-3.21      # Nearest summit
    python scripts/locate_summits.py summits.csv --precision 4 -o out.csv

The CSV needs the grid reference column (``gridid`` by default) and the
summit ID column (``wotaid`` by default); see summitgeo.config.
"""

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path so `summitgeo` is importable from a checkout
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from summitgeo.batch import locate_summits, nearest_in_frame
from summitgeo.config import LOG_LEVEL, MAIDENHEAD_PRECISION, SUMMIT_GRID_COLUMN, SUMMIT_ID_COLUMN
from summitgeo.distance import haversine_m
from summitgeo.formatters import format_distance

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("locate_summits")


def parse_position(text: str) -> tuple[float, float]:
    """Parse ``"LAT,LON"`` into floats."""
    try:
        lat_s, lon_s = text.split(",")
        lat, lon = float(lat_s), float(lon_s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LAT,LON, got {text!r}")
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise argparse.ArgumentTypeError(f"position {text!r} is outside -90..90, -180..180")
    return lat, lon


def write_output(df: pd.DataFrame, path: Path) -> None:
    if path.suffix == ".parquet":
        pq.write_table(pa.Table.from_pandas(df, preserve_index=False), path, compression="snappy")
    else:
        df.to_csv(path, index=False)
    logger.info("Wrote %d rows to %s", len(df), path)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Convert summit grid references to WGS84")
    parser.add_argument("input", type=Path, help="Summit CSV export")
    parser.add_argument(
        "-o", "--output", type=Path,
        help="Write the located table here (.csv or .parquet)",
    )
    parser.add_argument(
        "--near", type=parse_position, metavar="LAT,LON",
        help="Report the summit nearest to this WGS84 position",
    )
    parser.add_argument(
        "--precision", type=int, default=MAIDENHEAD_PRECISION, choices=range(1, 5),
        help=f"Maidenhead locator pairs (default: {MAIDENHEAD_PRECISION})",
    )
    parser.add_argument("--grid-column", default=SUMMIT_GRID_COLUMN)
    parser.add_argument("--id-column", default=SUMMIT_ID_COLUMN)
    args = parser.parse_args(argv)

    if not args.input.exists():
        logger.error("Input file not found: %s", args.input)
        return 1

    df = pd.read_csv(args.input)
    try:
        located = locate_summits(df, grid_column=args.grid_column, precision=args.precision)
    except KeyError as e:
        logger.error("%s", e)
        return 1

    if args.output:
        write_output(located, args.output)

    if args.near:
        lat, lon = args.near
        summit_id = nearest_in_frame(located, lat, lon, id_column=args.id_column)
        if summit_id is None:
            print("No located summits")
            return 0
        row = located[located[args.id_column] == summit_id].iloc[0]
        meters = haversine_m(lat, lon, float(row["lat"]), float(row["lon"]))
        name = row.get("name")
        name = "" if pd.isna(name) else name
        print(f"{summit_id}\t{name}\t{row['locator']}\t{format_distance(meters)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
