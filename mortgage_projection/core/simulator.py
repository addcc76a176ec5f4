from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import pandas as pd

from mortgage_projection.validation.checks import InvalidInput, parse_inputs, validate_inputs

from .engine import run_projection
from .inputs import ProjectionSettings, SimulationInput

logger = logging.getLogger(__name__)

SERIES_COLUMNS = [
    "year_label",
    "month",
    "balance",
    "interest",
    "principal",
    "portfolio",
    "portfolio_payment",
    "home_value",
    "home_equity",
    "net_worth",
]


@dataclass
class SimulationResult:
    series: pd.DataFrame
    summary: Dict[str, Any]
    settings: ProjectionSettings = field(default_factory=ProjectionSettings)


def simulate(sim_input: SimulationInput, settings: Optional[ProjectionSettings] = None) -> SimulationResult:
    settings = settings or ProjectionSettings()
    validate_inputs(sim_input, settings)

    records, summary = run_projection(sim_input, settings)
    series = pd.DataFrame.from_records(records, columns=SERIES_COLUMNS)

    logger.debug(
        "Simulated %d months, %d samples, payoff month %s",
        summary["months_simulated"],
        len(series),
        summary["payoff_month"],
    )
    return SimulationResult(series=series, summary=summary, settings=settings)


def recalculate(
    raw: Mapping[str, Any],
    previous: Optional[SimulationResult] = None,
    settings: Optional[ProjectionSettings] = None,
) -> Optional[SimulationResult]:
    """Re-run from raw form values, keeping ``previous`` when the input is rejected."""
    try:
        sim_input = parse_inputs(raw)
        return simulate(sim_input, settings)
    except InvalidInput as exc:
        logger.info("Input rejected, keeping previous result: %s", exc)
        return previous
