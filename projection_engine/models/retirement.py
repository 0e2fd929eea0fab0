"""
Retirement accumulation simulator.

Projects salary to the purchasing-power level of the retirement year, derives a
constant savings amount from it and accumulates yearly contributions with annual
growth. The retirement income estimate is a perpetuity-style withdrawal: one
year of growth on the final balance, spread over twelve months.
"""

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .accumulation import AccumulationProjector
from .rates import RateConverter
from .rounding import round_currency

logger = logging.getLogger(__name__)


class RetirementInputs(BaseModel):
    """Validated inputs for a retirement simulation."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False, frozen=True)

    current_age: int = Field(..., ge=0, le=120, description="Current age in years")
    retirement_age: int = Field(
        ..., ge=0, le=120, description="Age at retirement (> current age)"
    )
    current_salary: float = Field(..., ge=0, description="Current gross monthly salary")
    savings_rate_percent: float = Field(
        ..., ge=0, le=100, description="Share of adjusted salary saved, as a percentage"
    )
    annual_growth_rate_percent: float = Field(
        ..., description="Annual return on savings as a percentage"
    )
    annual_inflation_rate_percent: float = Field(
        ..., description="Annual inflation as a percentage"
    )

    @field_validator("retirement_age")
    @classmethod
    def validate_retirement_age(cls, v: int, info: ValidationInfo) -> int:
        current_age = info.data.get("current_age")
        if current_age is not None and v <= current_age:
            raise ValueError("Retirement age must be greater than current age")
        return v

    @property
    def contribution_years(self) -> int:
        return self.retirement_age - self.current_age


class RetirementProjectionRow(BaseModel):
    """Projection state at the end of one contribution year."""

    year: int = Field(..., ge=1, description="Contribution year (1-based)")
    age: int = Field(..., description="Age at the end of the year")
    balance: float = Field(..., description="Accumulated balance")
    monthly_income: float = Field(
        ..., description="Monthly income the balance would support at this point"
    )
    annual_contribution: float = Field(..., description="Amount saved this year")
    cumulative_contributions: float = Field(
        ..., description="Amount saved through this year"
    )


class RetirementSimulation(BaseModel):
    """Result of a retirement simulation."""

    contribution_years: int = Field(..., ge=1, description="Years of contributions")
    inflation_adjusted_salary: float = Field(
        ..., description="Salary at the retirement year's price level"
    )
    monthly_savings: float = Field(..., description="Constant monthly savings amount")
    final_balance: float = Field(..., description="Balance at retirement")
    monthly_income_estimate: float = Field(
        ..., description="Estimated monthly retirement income"
    )
    projection: List[RetirementProjectionRow] = Field(
        ..., description="Year-by-year projection"
    )


class RetirementSimulator:
    """Simulator for the retirement accumulation phase."""

    @staticmethod
    def calculate_inflation_adjusted_salary(
        salary: float, inflation_rate: float, years: int
    ) -> float:
        """Project salary to the price level ``years`` from now."""
        return salary * (1 + inflation_rate) ** years

    @staticmethod
    def calculate_monthly_income(balance: float, growth_rate: float) -> float:
        """Monthly income from withdrawing one year of growth, principal untouched."""
        return balance * growth_rate / 12

    @staticmethod
    def simulate(inputs: RetirementInputs) -> RetirementSimulation:
        """
        Run the retirement simulation.

        Args:
            inputs: Validated retirement inputs

        Returns:
            Final balance, monthly income estimate and yearly projection
        """
        years = inputs.contribution_years
        growth_rate = RateConverter.percent_to_fraction(
            inputs.annual_growth_rate_percent
        )
        inflation_rate = RateConverter.percent_to_fraction(
            inputs.annual_inflation_rate_percent
        )

        adjusted_salary = RetirementSimulator.calculate_inflation_adjusted_salary(
            inputs.current_salary, inflation_rate, years
        )
        monthly_savings = adjusted_salary * inputs.savings_rate_percent / 100
        annual_contribution = monthly_savings * 12

        projection = []
        final_balance = 0.0
        for year, balance in AccumulationProjector.iterate_balances(
            0.0, annual_contribution, years, growth_rate
        ):
            final_balance = balance
            projection.append(
                RetirementProjectionRow(
                    year=year,
                    age=inputs.current_age + year,
                    balance=round_currency(balance),
                    monthly_income=round_currency(
                        RetirementSimulator.calculate_monthly_income(
                            balance, growth_rate
                        )
                    ),
                    annual_contribution=round_currency(annual_contribution),
                    cumulative_contributions=round_currency(annual_contribution * year),
                )
            )

        monthly_income = RetirementSimulator.calculate_monthly_income(
            final_balance, growth_rate
        )

        logger.debug(
            f"Retirement over {years} years: final balance {final_balance:.2f}, "
            f"monthly income {monthly_income:.2f}"
        )

        return RetirementSimulation(
            contribution_years=years,
            inflation_adjusted_salary=round_currency(adjusted_salary),
            monthly_savings=round_currency(monthly_savings),
            final_balance=round_currency(final_balance),
            monthly_income_estimate=round_currency(monthly_income),
            projection=projection,
        )


def simulate_retirement(
    current_age: int,
    retirement_age: int,
    current_salary: float,
    savings_rate_percent: float,
    annual_growth_rate_percent: float,
    annual_inflation_rate_percent: float,
) -> RetirementSimulation:
    """
    Simulate retirement savings from now until the retirement age.

    Raises:
        pydantic.ValidationError: If any input is missing or invalid, including a
            retirement age that does not exceed the current age
    """
    inputs = RetirementInputs(
        current_age=current_age,
        retirement_age=retirement_age,
        current_salary=current_salary,
        savings_rate_percent=savings_rate_percent,
        annual_growth_rate_percent=annual_growth_rate_percent,
        annual_inflation_rate_percent=annual_inflation_rate_percent,
    )
    return RetirementSimulator.simulate(inputs)
