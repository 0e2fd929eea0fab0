"""
Compounding-with-contribution projections.

This module provides the accumulation engine shared by the investment simulator
and the retirement accumulation phase. Each period the running balance first
grows by the periodic rate and then receives the periodic contribution, so a
contribution earns nothing in the period it is made.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .rates import RateConverter
from .rounding import round_currency

logger = logging.getLogger(__name__)


class AccumulationParameters(BaseModel):
    """Validated inputs for an accumulation projection."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False, frozen=True)

    initial_balance: float = Field(..., description="Balance before the first period")
    periodic_contribution: float = Field(
        ..., description="Contribution added at the end of each period"
    )
    periods: int = Field(..., ge=1, description="Number of periods to project")
    periodic_rate: float = Field(
        ..., description="Growth rate per period as a fraction (0.007 = 0.7%)"
    )


class AccumulationRow(BaseModel):
    """Projection state at the end of one period."""

    period: int = Field(..., ge=1, description="Period number (1-based)")
    balance: float = Field(..., description="Ending balance")
    cumulative_contributions: float = Field(
        ..., description="Contributions made through this period"
    )
    cumulative_gain: float = Field(
        ..., description="Balance minus initial balance minus contributions"
    )


class InvestmentParameters(BaseModel):
    """Validated inputs for a monthly investment simulation."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False, frozen=True)

    initial_amount: float = Field(..., ge=0, description="Amount invested up front")
    monthly_contribution: float = Field(..., ge=0, description="Monthly contribution")
    months: int = Field(..., ge=1, description="Investment horizon in months")
    annual_rate_percent: float = Field(
        ..., description="Nominal annual return as a percentage"
    )
    investment_type: Optional[str] = Field(
        default=None, description="Free-form label of the investment product"
    )


class InvestmentSimulation(BaseModel):
    """Result of a monthly investment simulation."""

    investment_type: Optional[str] = Field(default=None, description="Product label")
    monthly_rate: float = Field(..., description="Monthly rate as a fraction")
    final_balance: float = Field(..., description="Balance after the last month")
    total_contributed: float = Field(
        ..., description="Initial amount plus all monthly contributions"
    )
    total_return: float = Field(
        ..., description="Final balance minus total contributed"
    )
    total_return_percent: float = Field(
        ..., description="Total return as a percentage of total contributed"
    )
    projection: List[AccumulationRow] = Field(..., description="Month-by-month rows")


class AccumulationProjector:
    """Engine for growth-then-contribution projections."""

    @staticmethod
    def iterate_balances(
        initial_balance: float,
        periodic_contribution: float,
        periods: int,
        periodic_rate: float,
    ) -> Iterator[Tuple[int, float]]:
        """
        Yield the full-precision balance at the end of each period.

        Args:
            initial_balance: Balance before the first period
            periodic_contribution: Contribution landing after growth each period
            periods: Number of periods
            periodic_rate: Growth per period as a fraction

        Yields:
            Tuples of (period, unrounded balance)
        """
        balance = initial_balance
        for period in range(1, periods + 1):
            balance = balance * (1 + periodic_rate) + periodic_contribution
            yield period, balance

    @staticmethod
    def project(params: AccumulationParameters) -> List[AccumulationRow]:
        """
        Project an accumulation and emit one rounded row per period.

        Args:
            params: Validated accumulation parameters

        Returns:
            List of rows, one per period
        """
        rows, _ = AccumulationProjector.project_with_final_balance(params)
        return rows

    @staticmethod
    def project_with_final_balance(
        params: AccumulationParameters,
    ) -> Tuple[List[AccumulationRow], float]:
        """Project rows and return them with the unrounded closing balance."""
        rows = []
        final_balance = params.initial_balance
        for period, balance in AccumulationProjector.iterate_balances(
            params.initial_balance,
            params.periodic_contribution,
            params.periods,
            params.periodic_rate,
        ):
            final_balance = balance
            contributed = params.periodic_contribution * period
            rows.append(
                AccumulationRow(
                    period=period,
                    balance=round_currency(balance),
                    cumulative_contributions=round_currency(contributed),
                    cumulative_gain=round_currency(
                        balance - params.initial_balance - contributed
                    ),
                )
            )
        return rows, final_balance


class InvestmentSimulator:
    """Monthly investment simulator built on the accumulation engine."""

    @staticmethod
    def simulate(params: InvestmentParameters) -> InvestmentSimulation:
        """
        Simulate monthly compounding with a fixed monthly contribution.

        Args:
            params: Validated investment parameters

        Returns:
            Summary figures and the month-by-month projection
        """
        monthly_rate = RateConverter.annual_percent_to_monthly_rate(
            params.annual_rate_percent
        )

        projection, final_balance = AccumulationProjector.project_with_final_balance(
            AccumulationParameters(
                initial_balance=params.initial_amount,
                periodic_contribution=params.monthly_contribution,
                periods=params.months,
                periodic_rate=monthly_rate,
            )
        )

        total_contributed = params.initial_amount + (
            params.monthly_contribution * params.months
        )
        total_return = final_balance - total_contributed
        if total_contributed != 0:
            total_return_percent = total_return / total_contributed * 100
        else:
            total_return_percent = 0.0

        logger.debug(
            f"Investment over {params.months} months at {monthly_rate}: "
            f"final balance {final_balance:.2f}"
        )

        return InvestmentSimulation(
            investment_type=params.investment_type,
            monthly_rate=monthly_rate,
            final_balance=round_currency(final_balance),
            total_contributed=round_currency(total_contributed),
            total_return=round_currency(total_return),
            total_return_percent=round_currency(total_return_percent),
            projection=projection,
        )


def project_accumulation(
    initial_balance: float,
    periodic_contribution: float,
    periods: int,
    periodic_rate: float,
) -> List[AccumulationRow]:
    """
    Project a balance growing at a periodic rate with periodic contributions.

    Args:
        initial_balance: Balance before the first period
        periodic_contribution: Contribution per period
        periods: Number of periods (>= 1)
        periodic_rate: Growth per period as a fraction

    Returns:
        One AccumulationRow per period

    Raises:
        pydantic.ValidationError: If any parameter is missing or invalid
    """
    params = AccumulationParameters(
        initial_balance=initial_balance,
        periodic_contribution=periodic_contribution,
        periods=periods,
        periodic_rate=periodic_rate,
    )
    return AccumulationProjector.project(params)


def simulate_investment(
    initial_amount: float,
    monthly_contribution: float,
    months: int,
    annual_rate_percent: float,
    investment_type: Optional[str] = None,
) -> InvestmentSimulation:
    """
    Simulate an investment with monthly contributions.

    The monthly rate is the annual percentage divided by 12 and by 100.

    Raises:
        pydantic.ValidationError: If any parameter is missing or invalid
    """
    params = InvestmentParameters(
        initial_amount=initial_amount,
        monthly_contribution=monthly_contribution,
        months=months,
        annual_rate_percent=annual_rate_percent,
        investment_type=investment_type,
    )
    return InvestmentSimulator.simulate(params)
