"""
Tests for the retirement simulator.

This module tests contribution-year derivation, salary inflation adjustment,
yearly accumulation, the monthly income estimate and input validation.
"""

import pytest
from pydantic import ValidationError

from projection_engine.models.retirement import (
    RetirementInputs,
    RetirementSimulation,
    RetirementSimulator,
    simulate_retirement,
)


def _inputs(**overrides):
    data = dict(
        current_age=30,
        retirement_age=65,
        current_salary=5000.0,
        savings_rate_percent=10.0,
        annual_growth_rate_percent=6.0,
        annual_inflation_rate_percent=0.0,
    )
    data.update(overrides)
    return data


class TestRetirementInputs:
    """Test cases for retirement input validation."""

    def test_contribution_years(self):
        """Test contribution years from age 30 to 65."""
        inputs = RetirementInputs(**_inputs())

        assert inputs.contribution_years == 35

    @pytest.mark.parametrize("retirement_age", [30, 25])
    def test_retirement_age_must_exceed_current_age(self, retirement_age):
        """Test that retiring at or before the current age is an input error."""
        with pytest.raises(ValidationError) as exc_info:
            RetirementInputs(**_inputs(retirement_age=retirement_age))

        assert "retirement_age" in str(exc_info.value)
        assert "Retirement age must be greater than current age" in str(exc_info.value)

    def test_simulate_rejects_invalid_ages_before_iterating(self):
        """Test the entry point raises instead of producing an empty projection."""
        with pytest.raises(ValueError):
            simulate_retirement(65, 65, 5000, 10, 6, 4)

    def test_savings_rate_bounds(self):
        """Test savings rate must be a percentage between 0 and 100."""
        with pytest.raises(ValidationError) as exc_info:
            RetirementInputs(**_inputs(savings_rate_percent=120.0))

        assert "savings_rate_percent" in str(exc_info.value)

    def test_missing_salary_rejected(self):
        """Test a missing salary is reported by field."""
        data = _inputs()
        del data["current_salary"]

        with pytest.raises(ValidationError) as exc_info:
            RetirementInputs(**data)

        assert "current_salary" in str(exc_info.value)

    def test_fractional_age_rejected(self):
        """Test ages must be whole years."""
        with pytest.raises(ValidationError):
            RetirementInputs(**_inputs(current_age=30.5))


class TestRetirementSimulator:
    """Test cases for RetirementSimulator class."""

    def test_inflation_adjusted_salary(self):
        """Test salary is projected to the retirement year's price level."""
        adjusted = RetirementSimulator.calculate_inflation_adjusted_salary(
            5000, 0.04, 35
        )

        assert adjusted == pytest.approx(19730.444971, abs=1e-5)

    def test_monthly_income(self):
        """Test monthly income is one year of growth spread over 12 months."""
        assert RetirementSimulator.calculate_monthly_income(120000, 0.06) == (
            pytest.approx(600.0)
        )

    def test_simulation_without_inflation(self):
        """Test 35 years saving 6,000 a year at 6%."""
        result = simulate_retirement(30, 65, 5000, 10, 6, 0)

        assert isinstance(result, RetirementSimulation)
        assert result.contribution_years == 35
        assert result.inflation_adjusted_salary == 5000.0
        assert result.monthly_savings == 500.0
        assert result.final_balance == 668608.68
        assert result.monthly_income_estimate == 3343.04
        assert len(result.projection) == 35

    def test_projection_rows(self):
        """Test the first and last projection rows."""
        projection = simulate_retirement(30, 65, 5000, 10, 6, 0).projection

        first = projection[0]
        assert first.year == 1
        assert first.age == 31
        assert first.balance == 6000.0
        assert first.monthly_income == 30.0
        assert first.annual_contribution == 6000.0
        assert first.cumulative_contributions == 6000.0

        last = projection[-1]
        assert last.year == 35
        assert last.age == 65
        assert last.balance == 668608.68
        assert last.monthly_income == 3343.04
        assert last.cumulative_contributions == 210000.0

    def test_simulation_with_inflation(self):
        """Test the constant contribution comes from the final-year salary."""
        result = simulate_retirement(30, 65, 5000, 10, 6, 4)

        assert result.inflation_adjusted_salary == 19730.44
        assert result.monthly_savings == 1973.04
        assert result.final_balance == 2638389.35
        assert result.monthly_income_estimate == 13191.95
        annual = {row.annual_contribution for row in result.projection}
        assert annual == {23676.53}

    def test_zero_growth(self):
        """Test zero growth accumulates contributions and estimates no income."""
        result = simulate_retirement(55, 60, 4000, 25, 0, 0)

        assert result.final_balance == 60000.0
        assert result.monthly_income_estimate == 0.0

    def test_deterministic(self):
        """Test identical inputs give identical outputs."""
        assert simulate_retirement(30, 65, 5000, 10, 6, 4) == simulate_retirement(
            30, 65, 5000, 10, 6, 4
        )
