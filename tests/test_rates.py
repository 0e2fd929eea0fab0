"""Tests for rate conversion and monetary rounding."""

import pytest

from projection_engine.models.rates import RateConverter
from projection_engine.models.rounding import round_currency


class TestRateConverter:
    """Test cases for RateConverter class."""

    def test_twelve_percent_is_one_percent_a_month(self):
        assert RateConverter.annual_percent_to_monthly_rate(12) == pytest.approx(0.01)

    def test_simple_division_not_compound_root(self):
        """Test the monthly rate is annual / 12, not the twelfth root."""
        monthly = RateConverter.annual_percent_to_monthly_rate(12.68)

        assert monthly == pytest.approx(12.68 / 12 / 100)
        assert monthly != pytest.approx((1.1268 ** (1 / 12)) - 1, abs=1e-6)

    def test_zero_and_negative_rates_pass_through(self):
        assert RateConverter.annual_percent_to_monthly_rate(0) == 0.0
        assert RateConverter.annual_percent_to_monthly_rate(-6) == pytest.approx(-0.005)

    def test_percent_to_fraction(self):
        assert RateConverter.percent_to_fraction(6.5) == pytest.approx(0.065)


class TestRoundCurrency:
    """Test cases for round_currency."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (888.487887, 888.49),
            (0.125, 0.13),
            (-0.125, -0.12),
            (1.005, 1.0),
            (-1500.0, -1500.0),
            (1e-12, 0.0),
            (-1e-12, 0.0),
        ],
    )
    def test_half_up(self, value, expected):
        assert round_currency(value) == expected
