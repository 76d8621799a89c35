"""Shared test fixtures for the summit geodesy test suite."""

import pandas as pd
import pytest

from summitgeo.models import SummitPoint


@pytest.fixture()
def lakeland_frame():
    """A small summit table as exported by the persistence layer."""
    return pd.DataFrame(
        {
            "wotaid": [1, 2, 3, 4, 5],
            "name": ["Scafell Pike", "Helvellyn", "Skiddaw", "Nameless", "Unmapped"],
            "height": [978, 950, 931, 0, 500],
            "gridid": ["NY215072", "NY 342 151", "NY260290", "not a ref", None],
        }
    )


@pytest.fixture()
def summit_points():
    return [
        SummitPoint(identifier=1, name="Scafell Pike", lat=54.4541, lon=-3.2117),
        SummitPoint(identifier=2, name="Helvellyn", lat=54.5271, lon=-3.0164),
        SummitPoint(identifier=3, name="Unlocated"),
        SummitPoint(identifier=4, name="Skiddaw", lat=54.6513, lon=-3.1478),
    ]
