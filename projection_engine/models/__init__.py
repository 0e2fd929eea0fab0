"""Data models and simulators for financial projections."""

from .rounding import round_currency
from .rates import RateConverter
from .loan_amortization import (
    AmortizationCalculator,
    AmortizationRow,
    LoanParameters,
    LoanSimulation,
    amortize,
)
from .accumulation import (
    AccumulationParameters,
    AccumulationProjector,
    AccumulationRow,
    InvestmentParameters,
    InvestmentSimulation,
    InvestmentSimulator,
    project_accumulation,
    simulate_investment,
)
from .retirement import (
    RetirementInputs,
    RetirementProjectionRow,
    RetirementSimulation,
    RetirementSimulator,
    simulate_retirement,
)
from .cash_flow import (
    RECURRENCE_KINDS,
    CashFlowForecaster,
    CashFlowPeriod,
    CashFlowRequest,
    RecurringItem,
    forecast_cash_flow,
    occurs_in_month,
)
from .financial_health import (
    FinancialHealthScorer,
    HealthInputs,
    HealthSnapshot,
    score_financial_health,
)

__all__ = [
    "round_currency",
    "RateConverter",
    "AmortizationCalculator",
    "AmortizationRow",
    "LoanParameters",
    "LoanSimulation",
    "amortize",
    "AccumulationParameters",
    "AccumulationProjector",
    "AccumulationRow",
    "InvestmentParameters",
    "InvestmentSimulation",
    "InvestmentSimulator",
    "project_accumulation",
    "simulate_investment",
    "RetirementInputs",
    "RetirementProjectionRow",
    "RetirementSimulation",
    "RetirementSimulator",
    "simulate_retirement",
    "RECURRENCE_KINDS",
    "CashFlowForecaster",
    "CashFlowPeriod",
    "CashFlowRequest",
    "RecurringItem",
    "forecast_cash_flow",
    "occurs_in_month",
    "FinancialHealthScorer",
    "HealthInputs",
    "HealthSnapshot",
    "score_financial_health",
]
