from __future__ import annotations

from typing import Union

import pandas as pd

from mortgage_projection.validation.checks import InvalidInput

from .mortgage import year_value

ALL = "all"

Horizon = Union[int, str]


def parse_horizon(horizon: Horizon) -> int:
    """Whole-year limit for a timeframe selector value ("10", 10, "10.5" -> 10)."""
    text = str(horizon).strip()
    try:
        limit = int(float(text))
    except (ValueError, OverflowError):
        raise InvalidInput(f"Timeframe must be 'all' or a number of years, got {horizon!r}.") from None
    if limit < 0:
        raise InvalidInput("Timeframe cannot be negative.")
    return limit


def project(series: pd.DataFrame, horizon: Horizon) -> pd.DataFrame:
    """Keep samples whose year label is within ``horizon`` years.

    Filters the already-computed series; never re-runs the simulation. Order
    is preserved, and ``"all"`` returns the series untouched.
    """
    if isinstance(horizon, str) and horizon.strip().lower() == ALL:
        return series

    limit = parse_horizon(horizon)
    years = series["year_label"].map(year_value)
    return series.loc[years <= limit]
