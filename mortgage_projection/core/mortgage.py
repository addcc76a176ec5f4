from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from mortgage_projection.validation.checks import InvalidInput


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100.0 / 12.0


def monthly_payment(principal: float, annual_rate_percent: float, term_months: float) -> float:
    """Level annuity payment M = P * r(1+r)^n / ((1+r)^n - 1)."""
    rate = monthly_rate(annual_rate_percent)
    try:
        factor = (1 + rate) ** term_months
        payment = principal * rate * factor / (factor - 1)
    except (ZeroDivisionError, OverflowError):
        payment = float("nan")
    if not np.isfinite(payment):
        raise InvalidInput(
            f"No level payment for {annual_rate_percent}% over {term_months:g} months; rate or term out of range."
        )
    return payment


def amortize_month(balance: float, rate: float, payment: float) -> tuple[float, float, float]:
    """Return (interest, principal, ending_balance) for one month.

    The final payment is clamped to the remaining balance so the loan never
    overshoots below zero. A zero balance pays nothing.
    """
    if balance <= 0:
        return 0.0, 0.0, 0.0
    interest = balance * rate
    principal_paid = min(payment - interest, balance)
    ending_balance = max(balance - principal_paid, 0.0)
    return interest, principal_paid, ending_balance


def year_label(month: int) -> str:
    """Label a sample month, e.g. month 24 -> "Year 2", month 64 -> "Year 5.3"."""
    if month % 12 == 0:
        return f"Year {month // 12}"
    year = (Decimal(month) / Decimal(12)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if year == year.to_integral_value():
        return f"Year {int(year)}"
    return f"Year {year}"


def year_value(label: str) -> float:
    return float(label.replace("Year ", "", 1))
