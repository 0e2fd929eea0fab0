"""
Financial health scoring.

Classifies the current month's finances from aggregated income, expense and
investment totals. The debt ratio picks a tier (label and base score); savings,
investment and a positive net balance each add a bonus on top.
"""

import logging
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .rounding import round_currency

logger = logging.getLogger(__name__)

# (debt ratio lower bound, label, base score), checked in order; first match wins
HEALTH_TIERS: List[Tuple[float, str, int]] = [
    (70, "Crítica", 20),
    (50, "Ruim", 40),
    (30, "Regular", 60),
    (20, "Boa", 80),
]
DEFAULT_TIER: Tuple[str, int] = ("Excelente", 100)

SAVINGS_BONUS_THRESHOLD = 20
INVESTMENT_BONUS_THRESHOLD = 10
BONUS_POINTS = 10


class HealthInputs(BaseModel):
    """Validated current-period aggregates."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False, frozen=True)

    income: float = Field(..., ge=0, description="Income total for the period")
    expense: float = Field(..., ge=0, description="Expense total for the period")
    investment_total: float = Field(
        ..., ge=0, description="Principal of active investments"
    )


class HealthSnapshot(BaseModel):
    """Explainable financial health result."""

    income: float = Field(..., description="Income total for the period")
    expense: float = Field(..., description="Expense total for the period")
    investment_total: float = Field(..., description="Principal of active investments")
    net_balance: float = Field(..., description="Income minus expenses")
    debt_ratio: float = Field(..., description="Expense as a percentage of income")
    investment_ratio: float = Field(
        ..., description="Investments as a percentage of income"
    )
    savings_ratio: float = Field(
        ..., description="Net balance as a percentage of income"
    )
    label: str = Field(..., description="Health category from the debt-ratio tier")
    score: int = Field(..., ge=0, le=100, description="Score from 0 to 100")


class FinancialHealthScorer:
    """Scorer for current-period financial health."""

    @staticmethod
    def classify(debt_ratio: float) -> Tuple[str, int]:
        """Return (label, base score) for a debt ratio."""
        for threshold, label, base_score in HEALTH_TIERS:
            if debt_ratio > threshold:
                return label, base_score
        return DEFAULT_TIER

    @staticmethod
    def score(inputs: HealthInputs) -> HealthSnapshot:
        """
        Score financial health.

        Ratios are 0 when there is no income. The label reflects only the
        debt-ratio tier; bonuses change the score, never the label.

        Args:
            inputs: Validated period aggregates

        Returns:
            HealthSnapshot with ratios, label and score
        """
        income = inputs.income
        net_balance = income - inputs.expense

        if income > 0:
            debt_ratio = inputs.expense / income * 100
            investment_ratio = inputs.investment_total / income * 100
            savings_ratio = net_balance / income * 100
        else:
            debt_ratio = investment_ratio = savings_ratio = 0.0

        label, score = FinancialHealthScorer.classify(debt_ratio)

        if savings_ratio > SAVINGS_BONUS_THRESHOLD:
            score += BONUS_POINTS
        if investment_ratio > INVESTMENT_BONUS_THRESHOLD:
            score += BONUS_POINTS
        if net_balance > 0:
            score += BONUS_POINTS

        score = min(100, max(0, score))

        logger.debug(f"Health score {score} ({label}) at debt ratio {debt_ratio:.2f}")

        return HealthSnapshot(
            income=round_currency(income),
            expense=round_currency(inputs.expense),
            investment_total=round_currency(inputs.investment_total),
            net_balance=round_currency(net_balance),
            debt_ratio=round_currency(debt_ratio),
            investment_ratio=round_currency(investment_ratio),
            savings_ratio=round_currency(savings_ratio),
            label=label,
            score=score,
        )


def score_financial_health(
    income: float, expense: float, investment_total: float
) -> HealthSnapshot:
    """
    Score financial health from current-period totals.

    Raises:
        pydantic.ValidationError: If any total is missing, non-numeric or negative
    """
    inputs = HealthInputs(
        income=income, expense=expense, investment_total=investment_total
    )
    return FinancialHealthScorer.score(inputs)
