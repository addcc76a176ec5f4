from dataclasses import dataclass
from typing import Optional


@dataclass
class SimulationInput:
    principal: float
    annual_rate_percent: float
    term_years: float
    extra_monthly_payment: float = 0.0
    initial_portfolio: float = 0.0
    annual_market_return_percent: float = 0.0
    initial_home_value: Optional[float] = None  # defaults to principal
    annual_home_appreciation_percent: float = 0.0

    @property
    def home_value(self) -> float:
        return self.principal if self.initial_home_value is None else self.initial_home_value

    @property
    def down_payment(self) -> float:
        return max(0.0, self.home_value - self.principal)

    @property
    def term_months(self) -> float:
        return self.term_years * 12


@dataclass
class ProjectionSettings:
    horizon_years: int = 60
    stop_at_payoff: bool = False
    apply_down_payment_offset: bool = True
    sample_at_term_end: bool = True  # emit a sample at month == term if still owing

    @property
    def max_months(self) -> int:
        return self.horizon_years * 12
