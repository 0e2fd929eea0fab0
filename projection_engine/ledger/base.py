"""
Base ledger reader interface and exceptions.

This module defines the read-only contract the planning service uses to obtain
recurring-item snapshots and current-period totals from the surrounding system.
"""

from abc import ABC, abstractmethod
from typing import List

from pydantic import BaseModel, Field

from projection_engine.models.cash_flow import RecurringItem


class LedgerError(Exception):
    """Base exception for ledger-related errors."""


class LedgerUnavailableError(LedgerError):
    """Raised when the ledger backend cannot be reached."""


class PeriodTotals(BaseModel):
    """Aggregated figures for one calendar month."""

    income: float = Field(default=0.0, ge=0, description="Income received in the month")
    expense: float = Field(default=0.0, ge=0, description="Expenses due in the month")
    investment_total: float = Field(
        default=0.0, ge=0, description="Principal of active investments"
    )


class LedgerReader(ABC):
    """
    Abstract base class for ledger readers.

    Implementations return snapshots; callers never write back through this
    interface and the engine never mutates what it receives.
    """

    @abstractmethod
    def get_recurring_income(self, user_id: int) -> List[RecurringItem]:
        """
        Get the user's recurring income items.

        Args:
            user_id: Owner of the records

        Returns:
            List of received income items with a recurrence other than none

        Raises:
            LedgerError: If the snapshot cannot be obtained
        """

    @abstractmethod
    def get_recurring_expenses(self, user_id: int) -> List[RecurringItem]:
        """
        Get the user's recurring expense items.

        Args:
            user_id: Owner of the records

        Returns:
            List of paid expense items with a recurrence other than none

        Raises:
            LedgerError: If the snapshot cannot be obtained
        """

    @abstractmethod
    def get_period_totals(self, user_id: int, year: int, month: int) -> PeriodTotals:
        """
        Get aggregated totals for a calendar month.

        Args:
            user_id: Owner of the records
            year: Calendar year
            month: Calendar month (1-12)

        Returns:
            Income and expense totals for the month and active investment principal

        Raises:
            LedgerError: If the totals cannot be obtained
        """
