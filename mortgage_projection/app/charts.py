from __future__ import annotations

from typing import Any, Callable, Optional

import pandas as pd


def format_currency(value: float) -> str:
    """Whole-dollar USD, e.g. 1798.65 -> "$1,799"."""
    sign = "-" if round(value) < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def chart_frame(df: pd.DataFrame, columns: list[str]) -> pd.DataFrame:
    """Index chart data by numeric year so the x axis follows simulated time."""
    return df.assign(year=df["month"] / 12).set_index("year")[columns]


class ChartSurface:
    """One display surface owning at most one live chart.

    ``placeholder_factory`` returns a Streamlit-style placeholder (anything with
    ``empty()`` and ``container()``). The previous chart is always released
    before a new one is drawn from fresh data.

    A Streamlit rerun discards every element from the previous run, so the app
    builds fresh surfaces per run and ``release`` only matters when one
    surface is redrawn within a run.
    """

    def __init__(self, name: str, placeholder_factory: Callable[[], Any]):
        self.name = name
        self._placeholder_factory = placeholder_factory
        self._placeholder: Optional[Any] = None

    @property
    def active(self) -> bool:
        return self._placeholder is not None

    def release(self) -> None:
        if self._placeholder is not None:
            self._placeholder.empty()
            self._placeholder = None

    def render(self, data: pd.DataFrame, draw: Callable[[pd.DataFrame], None]) -> None:
        self.release()
        self._placeholder = self._placeholder_factory()
        with self._placeholder.container():
            draw(data)
