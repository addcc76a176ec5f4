from __future__ import annotations

from typing import Optional

from .inputs import ProjectionSettings, SimulationInput
from .mortgage import amortize_month, monthly_payment, monthly_rate, year_label


def run_projection(sim_input: SimulationInput, settings: ProjectionSettings) -> tuple[list[dict], dict]:
    """Month-by-month loan, portfolio and home value evolution, sampled by year.

    Samples are taken at every 12-month boundary, in the payoff month, and
    (optionally) at the scheduled term while a balance is still owed. A label
    equal to the previous sample's label is not emitted twice.
    """
    rate = monthly_rate(sim_input.annual_rate_percent)
    market_rate = monthly_rate(sim_input.annual_market_return_percent)
    home_rate = monthly_rate(sim_input.annual_home_appreciation_percent)
    term_months = sim_input.term_months

    base_payment = monthly_payment(sim_input.principal, sim_input.annual_rate_percent, term_months)
    actual_payment = base_payment + sim_input.extra_monthly_payment

    balance = sim_input.principal
    portfolio = sim_input.initial_portfolio
    if settings.apply_down_payment_offset:
        portfolio -= sim_input.down_payment
    home_value = sim_input.home_value

    total_interest = 0.0
    annual_principal = 0.0
    payoff_month: Optional[int] = None
    months_run = 0

    records: list[dict] = []

    for month in range(1, settings.max_months + 1):
        months_run = month
        previous_balance = balance

        interest, principal_paid, balance = amortize_month(balance, rate, actual_payment)
        payment = interest + principal_paid

        # Accrue before withdrawing within the same month
        portfolio += portfolio * market_rate
        portfolio -= payment
        home_value += home_value * home_rate

        annual_principal += principal_paid
        total_interest += interest

        paid_off = balance == 0 and previous_balance > 0
        if paid_off:
            payoff_month = month

        at_term_end = settings.sample_at_term_end and month == term_months and balance > 0
        if month % 12 == 0 or paid_off or at_term_end:
            label = year_label(month)
            if not records or records[-1]["year_label"] != label:
                home_equity = home_value - balance
                records.append(
                    {
                        "year_label": label,
                        "month": month,
                        "balance": balance,
                        "interest": interest,
                        "principal": annual_principal,
                        "portfolio": portfolio,
                        "portfolio_payment": payment,
                        "home_value": home_value,
                        "home_equity": home_equity,
                        "net_worth": home_equity + portfolio,
                    }
                )
                annual_principal = 0.0

        if paid_off and settings.stop_at_payoff:
            break

    summary = {
        "monthly_payment": actual_payment,
        "total_interest": total_interest,
        "total_cost": sim_input.principal + total_interest,
        "payoff_month": payoff_month,
        "months_simulated": months_run,
    }
    return records, summary
