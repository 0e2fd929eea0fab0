"""
In-memory ledger reader implementation.

Holds income, expense and investment records in process memory. It's suitable
for tests and for callers that already loaded the user's records.
"""

from datetime import date
from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

from projection_engine.models.cash_flow import RECURRENCE_NONE, RecurringItem

from .base import LedgerReader, PeriodTotals


class LedgerEntry(BaseModel):
    """An income or expense record."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Record title")
    amount: float = Field(..., ge=0, description="Record amount")
    recurrence: str = Field(default=RECURRENCE_NONE, description="Recurrence kind")
    reference_date: date = Field(..., description="Receipt or due date")
    status: str = Field(..., description="Settlement status")

    def to_recurring_item(self) -> RecurringItem:
        return RecurringItem(
            title=self.title,
            amount=self.amount,
            recurrence=self.recurrence,
            reference_date=self.reference_date,
        )


class InvestmentEntry(BaseModel):
    """An investment position; only its principal is used."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Investment name")
    principal: float = Field(..., ge=0, description="Initial amount invested")
    status: Literal["active", "redeemed"] = Field(
        default="active", description="Position status"
    )


class InMemoryLedger(LedgerReader):
    """
    In-memory ledger reader.

    Income counts as recurring once received, expenses once paid.
    """

    INCOME_SETTLED = "received"
    EXPENSE_SETTLED = "paid"

    def __init__(self) -> None:
        self._income: Dict[int, List[LedgerEntry]] = {}
        self._expenses: Dict[int, List[LedgerEntry]] = {}
        self._investments: Dict[int, List[InvestmentEntry]] = {}

    def add_income(
        self,
        user_id: int,
        title: str,
        amount: float,
        reference_date: date,
        recurrence: str = RECURRENCE_NONE,
        status: str = INCOME_SETTLED,
    ) -> LedgerEntry:
        """Register an income record for a user."""
        entry = LedgerEntry(
            title=title,
            amount=amount,
            recurrence=recurrence,
            reference_date=reference_date,
            status=status,
        )
        self._income.setdefault(user_id, []).append(entry)
        return entry

    def add_expense(
        self,
        user_id: int,
        title: str,
        amount: float,
        reference_date: date,
        recurrence: str = RECURRENCE_NONE,
        status: str = EXPENSE_SETTLED,
    ) -> LedgerEntry:
        """Register an expense record for a user."""
        entry = LedgerEntry(
            title=title,
            amount=amount,
            recurrence=recurrence,
            reference_date=reference_date,
            status=status,
        )
        self._expenses.setdefault(user_id, []).append(entry)
        return entry

    def add_investment(
        self, user_id: int, name: str, principal: float, status: str = "active"
    ) -> InvestmentEntry:
        """Register an investment position for a user."""
        entry = InvestmentEntry(name=name, principal=principal, status=status)
        self._investments.setdefault(user_id, []).append(entry)
        return entry

    @staticmethod
    def _recurring(entries: List[LedgerEntry], status: str) -> List[RecurringItem]:
        return [
            entry.to_recurring_item()
            for entry in entries
            if entry.recurrence != RECURRENCE_NONE and entry.status == status
        ]

    @staticmethod
    def _month_total(entries: List[LedgerEntry], year: int, month: int) -> float:
        return sum(
            entry.amount
            for entry in entries
            if entry.reference_date.year == year and entry.reference_date.month == month
        )

    def get_recurring_income(self, user_id: int) -> List[RecurringItem]:
        return self._recurring(self._income.get(user_id, []), self.INCOME_SETTLED)

    def get_recurring_expenses(self, user_id: int) -> List[RecurringItem]:
        return self._recurring(self._expenses.get(user_id, []), self.EXPENSE_SETTLED)

    def get_period_totals(self, user_id: int, year: int, month: int) -> PeriodTotals:
        investments = self._investments.get(user_id, [])
        return PeriodTotals(
            income=self._month_total(self._income.get(user_id, []), year, month),
            expense=self._month_total(self._expenses.get(user_id, []), year, month),
            investment_total=sum(
                entry.principal for entry in investments if entry.status == "active"
            ),
        )
