"""
Tests for ledger reader implementations.
"""

from datetime import date

import pytest

from projection_engine.ledger import (
    InMemoryLedger,
    LedgerError,
    LedgerReader,
    LedgerUnavailableError,
    PeriodTotals,
)


class TestInMemoryLedger:
    """Test cases for InMemoryLedger."""

    def test_is_ledger_reader(self):
        assert isinstance(InMemoryLedger(), LedgerReader)

    def test_recurring_income_filters_status_and_recurrence(self, populated_ledger):
        """Test only received income with a recurrence is returned."""
        items = populated_ledger.get_recurring_income(1)

        assert [item.title for item in items] == ["Salary", "Dividends"]
        assert items[1].recurrence == "quarterly"
        assert items[1].reference_date == date(2025, 3, 20)

    def test_recurring_expenses_filters_status_and_recurrence(self, populated_ledger):
        """Test only paid expenses with a recurrence are returned."""
        items = populated_ledger.get_recurring_expenses(1)

        assert [item.title for item in items] == ["Rent", "Insurance"]

    def test_period_totals(self, populated_ledger):
        """Test month totals include every record dated in the month."""
        totals = populated_ledger.get_period_totals(1, 2025, 3)

        assert isinstance(totals, PeriodTotals)
        assert totals.income == 6500.0
        assert totals.expense == 2200.0
        assert totals.investment_total == 800.0

    def test_period_totals_other_month(self, populated_ledger):
        """Test months without records total zero income and expense."""
        totals = populated_ledger.get_period_totals(1, 2025, 4)

        assert totals.income == 0
        assert totals.expense == 0
        assert totals.investment_total == 800.0

    def test_unknown_user(self, populated_ledger):
        """Test unknown users get empty snapshots."""
        assert populated_ledger.get_recurring_income(99) == []
        assert populated_ledger.get_recurring_expenses(99) == []
        assert populated_ledger.get_period_totals(99, 2025, 3) == PeriodTotals()

    def test_invalid_investment_status_rejected(self):
        """Test investment status must be active or redeemed."""
        with pytest.raises(ValueError):
            InMemoryLedger().add_investment(1, "Fund", 100.0, status="frozen")


class TestLedgerErrors:
    """Test cases for ledger exceptions."""

    def test_unavailable_is_ledger_error(self):
        assert issubclass(LedgerUnavailableError, LedgerError)

    def test_reader_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            LedgerReader()
