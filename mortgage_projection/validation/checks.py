from __future__ import annotations

from typing import Any, Mapping, Optional

import numpy as np

from mortgage_projection.core.inputs import ProjectionSettings, SimulationInput


class InvalidInput(ValueError):
    """Raised when a required field is missing, non-numeric or out of range."""


REQUIRED_FIELDS = ("principal", "annual_rate_percent", "term_years")
OPTIONAL_FIELDS = (
    "extra_monthly_payment",
    "initial_portfolio",
    "annual_market_return_percent",
    "initial_home_value",
    "annual_home_appreciation_percent",
)


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidInput(message)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return bool(np.isfinite(float(value)))
    except (TypeError, ValueError):
        return False


def _parse_number(name: str, value: Any) -> Optional[float]:
    """Coerce a raw form value; blank means "not supplied"."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    _require(_is_number(value), f"{name} must be a number, got {value!r}.")
    return float(value)


def parse_inputs(raw: Mapping[str, Any]) -> SimulationInput:
    """Build a SimulationInput from raw form values, applying defaults for blank optionals."""
    values = {}
    for name in REQUIRED_FIELDS:
        parsed = _parse_number(name, raw.get(name))
        _require(parsed is not None, f"{name} is required.")
        values[name] = parsed
    for name in OPTIONAL_FIELDS:
        parsed = _parse_number(name, raw.get(name))
        if parsed is not None:
            values[name] = parsed

    sim_input = SimulationInput(**values)
    validate_simulation_input(sim_input)
    return sim_input


def validate_simulation_input(inputs: SimulationInput) -> None:
    for name in REQUIRED_FIELDS + OPTIONAL_FIELDS:
        value = getattr(inputs, name)
        if value is None and name == "initial_home_value":
            continue
        _require(_is_number(value), f"{name} must be a finite number.")

    _require(inputs.principal > 0, "Loan amount must be positive.")
    _require(inputs.annual_rate_percent > 0, "Interest rate must be positive.")
    _require(inputs.term_years > 0, "Term must be positive.")
    _require(inputs.extra_monthly_payment >= 0, "Extra payment cannot be negative.")


def validate_settings(settings: ProjectionSettings) -> None:
    _require(
        isinstance(settings.horizon_years, int) and settings.horizon_years > 0,
        "Simulation horizon must be a positive whole number of years.",
    )


def validate_inputs(sim_input: SimulationInput, settings: ProjectionSettings) -> None:
    validate_simulation_input(sim_input)
    validate_settings(settings)
