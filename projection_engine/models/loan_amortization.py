"""
Loan amortization calculations for the projection engine.

This module implements the constant-installment (French/Price) amortization
system: a fixed installment computed from the financed amount, term and monthly
rate, plus the full period-by-period breakdown into interest and principal.
"""

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .rates import RateConverter
from .rounding import round_currency

logger = logging.getLogger(__name__)


class LoanParameters(BaseModel):
    """Validated inputs for a loan simulation."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False, frozen=True)

    principal_to_finance: float = Field(
        ..., ge=0, description="Amount requested minus down payment"
    )
    term_periods: int = Field(..., ge=1, description="Number of monthly installments")
    annual_rate_percent: float = Field(
        ..., description="Nominal annual interest rate as a percentage (12 = 12%)"
    )

    @classmethod
    def from_request(
        cls,
        requested_amount: float,
        down_payment: float,
        term_periods: int,
        annual_rate_percent: float,
    ) -> "LoanParameters":
        """Build parameters from the requested amount and the down payment."""
        return cls(
            principal_to_finance=requested_amount - down_payment,
            term_periods=term_periods,
            annual_rate_percent=annual_rate_percent,
        )

    @property
    def monthly_rate(self) -> float:
        return RateConverter.annual_percent_to_monthly_rate(self.annual_rate_percent)


class AmortizationRow(BaseModel):
    """Breakdown of a single installment."""

    period: int = Field(..., ge=1, description="Installment number (1-based)")
    installment: float = Field(..., description="Installment amount")
    interest: float = Field(..., description="Interest portion of the installment")
    principal: float = Field(..., description="Principal portion of the installment")
    remaining_balance: float = Field(..., description="Balance after this installment")


class LoanSimulation(BaseModel):
    """Complete result of a loan simulation."""

    monthly_rate: float = Field(..., description="Monthly rate as a fraction")
    installment: float = Field(..., description="Fixed installment amount")
    total_paid: float = Field(..., description="Installment times term")
    total_interest: float = Field(..., description="Total paid minus financed amount")
    schedule: List[AmortizationRow] = Field(
        ..., description="Period-by-period amortization schedule"
    )


class AmortizationCalculator:
    """Calculator for constant-installment loan amortization."""

    @staticmethod
    def calculate_installment(
        principal: float, term_periods: int, monthly_rate: float
    ) -> float:
        """
        Calculate the unrounded fixed installment.

        Args:
            principal: Amount being financed
            term_periods: Number of installments
            monthly_rate: Monthly rate as a fraction

        Returns:
            Installment amount at full precision
        """
        growth = (1 + monthly_rate) ** term_periods
        # Rates below float resolution leave growth at exactly 1.0
        if monthly_rate == 0 or growth == 1:
            return principal / term_periods

        return principal * (monthly_rate * growth) / (growth - 1)

    @staticmethod
    def generate_schedule(
        principal: float, term_periods: int, monthly_rate: float
    ) -> List[AmortizationRow]:
        """
        Generate the amortization schedule.

        The running balance is carried at full precision; each emitted figure is
        rounded to cents, so interest + principal may differ from the installment
        by one cent on individual rows.

        Args:
            principal: Amount being financed
            term_periods: Number of installments
            monthly_rate: Monthly rate as a fraction

        Returns:
            One row per installment
        """
        installment = AmortizationCalculator.calculate_installment(
            principal, term_periods, monthly_rate
        )

        schedule = []
        balance = principal
        for period in range(1, term_periods + 1):
            interest = balance * monthly_rate
            principal_portion = installment - interest
            balance -= principal_portion

            schedule.append(
                AmortizationRow(
                    period=period,
                    installment=round_currency(installment),
                    interest=round_currency(interest),
                    principal=round_currency(principal_portion),
                    remaining_balance=round_currency(balance),
                )
            )

        return schedule

    @staticmethod
    def simulate(params: LoanParameters) -> LoanSimulation:
        """
        Run a full loan simulation.

        Totals are derived from the rounded installment, which is what the
        borrower actually pays each period.

        Args:
            params: Validated loan parameters

        Returns:
            Installment, totals and schedule
        """
        monthly_rate = params.monthly_rate
        installment = round_currency(
            AmortizationCalculator.calculate_installment(
                params.principal_to_finance, params.term_periods, monthly_rate
            )
        )
        total_paid = round_currency(installment * params.term_periods)
        total_interest = round_currency(total_paid - params.principal_to_finance)

        schedule = AmortizationCalculator.generate_schedule(
            params.principal_to_finance, params.term_periods, monthly_rate
        )

        logger.debug(
            f"Amortized {params.principal_to_finance} over {params.term_periods} "
            f"periods at {monthly_rate}: installment {installment}"
        )

        return LoanSimulation(
            monthly_rate=monthly_rate,
            installment=installment,
            total_paid=total_paid,
            total_interest=total_interest,
            schedule=schedule,
        )


def amortize(
    principal_to_finance: float, term_periods: int, annual_rate_percent: float
) -> LoanSimulation:
    """
    Simulate a constant-installment loan.

    Args:
        principal_to_finance: Amount requested minus down payment
        term_periods: Number of monthly installments (>= 1)
        annual_rate_percent: Nominal annual rate as a percentage

    Returns:
        LoanSimulation with installment, totals and schedule

    Raises:
        pydantic.ValidationError: If any parameter is missing or invalid
    """
    params = LoanParameters(
        principal_to_finance=principal_to_finance,
        term_periods=term_periods,
        annual_rate_percent=annual_rate_percent,
    )
    return AmortizationCalculator.simulate(params)
