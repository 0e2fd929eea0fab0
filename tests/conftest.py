"""
Pytest configuration and shared fixtures for the projection engine tests.
"""

import os
from datetime import date
from unittest.mock import patch

import pytest

from projection_engine.config import Settings
from projection_engine.ledger import InMemoryLedger
from projection_engine.models.cash_flow import RecurringItem


@pytest.fixture
def settings():
    """Create settings isolated from the process environment and any .env file."""
    with patch.dict(os.environ, {}, clear=True):
        return Settings(_env_file=None)


@pytest.fixture
def salary_item():
    """Monthly salary income."""
    return RecurringItem(
        title="Salary",
        amount=5000.0,
        recurrence="monthly",
        reference_date=date(2025, 1, 5),
    )


@pytest.fixture
def rent_item():
    """Monthly rent expense."""
    return RecurringItem(
        title="Rent",
        amount=1500.0,
        recurrence="monthly",
        reference_date=date(2025, 1, 10),
    )


@pytest.fixture
def populated_ledger():
    """Create a ledger holding one user's records for March 2025."""
    ledger = InMemoryLedger()
    ledger.add_income(1, "Salary", 5000.0, date(2025, 3, 5), recurrence="monthly")
    ledger.add_income(1, "Dividends", 300.0, date(2025, 3, 20), recurrence="quarterly")
    ledger.add_income(1, "Gift", 200.0, date(2025, 3, 12))
    ledger.add_income(
        1, "Pending bonus", 1000.0, date(2025, 3, 28), recurrence="annual",
        status="pending",
    )
    ledger.add_expense(1, "Rent", 1500.0, date(2025, 3, 10), recurrence="monthly")
    ledger.add_expense(1, "Insurance", 600.0, date(2025, 3, 15), recurrence="annual")
    ledger.add_expense(
        1, "Gym", 100.0, date(2025, 3, 1), recurrence="monthly", status="pending"
    )
    ledger.add_investment(1, "Treasury bond", 800.0)
    ledger.add_investment(1, "Old fund", 5000.0, status="redeemed")
    return ledger
