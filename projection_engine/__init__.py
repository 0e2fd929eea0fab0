"""Financial Projection Engine.

Deterministic simulators for loans, investments, retirement savings and recurring
cash flow, plus a financial health scorer.
"""

from projection_engine.models import (
    AccumulationRow,
    AmortizationRow,
    CashFlowPeriod,
    HealthSnapshot,
    InvestmentSimulation,
    LoanSimulation,
    RecurringItem,
    RetirementSimulation,
    amortize,
    forecast_cash_flow,
    project_accumulation,
    score_financial_health,
    simulate_investment,
    simulate_retirement,
)

__all__ = [
    "AccumulationRow",
    "AmortizationRow",
    "CashFlowPeriod",
    "HealthSnapshot",
    "InvestmentSimulation",
    "LoanSimulation",
    "RecurringItem",
    "RetirementSimulation",
    "amortize",
    "forecast_cash_flow",
    "project_accumulation",
    "score_financial_health",
    "simulate_investment",
    "simulate_retirement",
]
