from __future__ import annotations

from .inputs import ProjectionSettings, SimulationInput

TIMEFRAME_OPTIONS = ["all", "5", "10", "15", "20", "30", "40", "60"]


def net_worth_settings() -> ProjectionSettings:
    """Long-run view: pay the down payment out of the portfolio and keep going after payoff."""
    return ProjectionSettings(
        horizon_years=60,
        stop_at_payoff=False,
        apply_down_payment_offset=True,
        sample_at_term_end=True,
    )


def payoff_settings() -> ProjectionSettings:
    """Loan-focused view: simulate until the loan is gone, at most 100 years."""
    return ProjectionSettings(
        horizon_years=100,
        stop_at_payoff=True,
        apply_down_payment_offset=False,
        sample_at_term_end=False,
    )


MODES = {
    "Long-term net worth": net_worth_settings,
    "Until payoff": payoff_settings,
}


def base_scenario() -> SimulationInput:
    """Provide a reasonable starting point for the UI."""
    return SimulationInput(
        principal=300_000,
        annual_rate_percent=6.0,
        term_years=30,
        extra_monthly_payment=0.0,
        initial_portfolio=150_000,
        annual_market_return_percent=7.0,
        initial_home_value=375_000,
        annual_home_appreciation_percent=3.0,
    )
