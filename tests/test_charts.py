"""Tests for presentation helpers that do not need a running Streamlit app."""

from contextlib import nullcontext

import pandas as pd
import pytest

from mortgage_projection.app.charts import ChartSurface, chart_frame, format_currency
from mortgage_projection.core.inputs import SimulationInput
from mortgage_projection.core.simulator import simulate


@pytest.mark.parametrize(
    "value, text",
    [(1798.65, "$1,799"), (0, "$0"), (-1798.65, "-$1,799"), (-0.4, "$0"), (1_234_567.2, "$1,234,567")],
)
def test_format_currency(value, text):
    assert format_currency(value) == text


class _Placeholder:
    def __init__(self, events, number):
        self.events = events
        self.number = number

    def empty(self):
        self.events.append(("release", self.number))

    def container(self):
        return nullcontext()


def _surface(events):
    created = []

    def factory():
        placeholder = _Placeholder(events, len(created) + 1)
        created.append(placeholder)
        events.append(("create", placeholder.number))
        return placeholder

    return ChartSurface("mortgage", factory)


def test_render_releases_previous_chart_first():
    events = []
    surface = _surface(events)
    data = pd.DataFrame({"year_label": ["Year 1"], "balance": [1.0]})

    surface.render(data, lambda df: events.append(("draw", len(df))))
    surface.render(data, lambda df: events.append(("draw", len(df))))

    assert events == [
        ("create", 1),
        ("draw", 1),
        ("release", 1),
        ("create", 2),
        ("draw", 1),
    ]
    assert surface.active


def test_release_is_idempotent():
    events = []
    surface = _surface(events)
    surface.release()
    assert events == []
    assert not surface.active


def test_chart_frame_orders_by_numeric_year():
    """Year 2 plots before Year 10, not after it as text sorting would."""
    series = simulate(SimulationInput(principal=100_000, annual_rate_percent=5, term_years=15)).series
    frame = chart_frame(series, ["balance"])

    assert list(frame.columns) == ["balance"]
    assert pd.api.types.is_numeric_dtype(frame.index)
    assert frame.index.is_monotonic_increasing
    assert frame.index[:3].tolist() == pytest.approx([1.0, 2.0, 3.0])
    assert frame.loc[10.0, "balance"] == series.loc[series["year_label"] == "Year 10", "balance"].iloc[0]
