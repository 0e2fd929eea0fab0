"""Conversions from nominal annual percentages to per-period fractional rates."""


class RateConverter:
    """Unit conversions for interest and growth rates."""

    @staticmethod
    def percent_to_fraction(percent: float) -> float:
        """Convert a percentage (e.g., 12 for 12%) to a fraction (0.12)."""
        return percent / 100

    @staticmethod
    def annual_percent_to_monthly_rate(annual_percent: float) -> float:
        """
        Convert an annual percentage to a simple monthly fractional rate.

        Uses simple division (annual / 12 / 100), not the compound
        twelfth root, so 12% a year becomes exactly 0.01 a month.

        Args:
            annual_percent: Nominal annual rate as a percentage

        Returns:
            Monthly rate as a fraction
        """
        return annual_percent / 12 / 100
