"""
Recurring cash-flow forecasting.

Projects recurring income and expense items forward month by month. Whether an
item falls in a month depends only on its recurrence kind and the calendar
position of the month; the item's own reference date does not shift the phase,
so every quarterly item lands in January, April, July and October.
"""

import logging
from datetime import date, datetime
from typing import Any, Iterator, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .rounding import round_currency

logger = logging.getLogger(__name__)

RECURRENCE_NONE = "none"
RECURRENCE_MONTHLY = "monthly"
RECURRENCE_QUARTERLY = "quarterly"
RECURRENCE_SEMIANNUAL = "semiannual"
RECURRENCE_ANNUAL = "annual"

RECURRENCE_KINDS = (
    RECURRENCE_NONE,
    RECURRENCE_MONTHLY,
    RECURRENCE_QUARTERLY,
    RECURRENCE_SEMIANNUAL,
    RECURRENCE_ANNUAL,
)


class RecurringItem(BaseModel):
    """A recurring income or expense record supplied by the ledger."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    title: str = Field(..., min_length=1, description="Item title")
    amount: float = Field(..., ge=0, description="Amount per occurrence")
    recurrence: str = Field(
        default=RECURRENCE_NONE,
        description="Recurrence kind (none, monthly, quarterly, semiannual, annual)",
    )
    reference_date: date = Field(
        ..., description="Receipt date for income, due date for expenses"
    )


class CashFlowPeriod(BaseModel):
    """Forecast totals for one calendar month."""

    month: str = Field(..., pattern=r"^\d{4}-\d{2}$", description="Month label YYYY-MM")
    income: float = Field(..., description="Total recurring income")
    expense: float = Field(..., description="Total recurring expenses")
    balance: float = Field(..., description="Income minus expenses")


class CashFlowRequest(BaseModel):
    """Validated forecast request."""

    model_config = ConfigDict(strict=True, frozen=True)

    horizon_months: int = Field(..., ge=1, description="Number of months to forecast")
    start: date = Field(..., description="Any date within the first forecast month")

    @field_validator("start", mode="before")
    @classmethod
    def truncate_datetime(cls, v: Any) -> Any:
        if isinstance(v, datetime):
            return v.date()
        return v


def occurs_in_month(recurrence: str, month: int) -> bool:
    """
    Check whether a recurrence kind falls in a calendar month.

    Args:
        recurrence: Recurrence kind of the item
        month: Calendar month number (1-12)

    Returns:
        True if an item with this recurrence is due in the month
    """
    if recurrence == RECURRENCE_MONTHLY:
        return True
    if recurrence == RECURRENCE_QUARTERLY:
        return month % 3 == 1
    if recurrence == RECURRENCE_SEMIANNUAL:
        return month % 6 == 1
    if recurrence == RECURRENCE_ANNUAL:
        return month == 1
    return False


def iter_months(start: date, count: int) -> Iterator[Tuple[int, int]]:
    """Yield (year, month) pairs for ``count`` months from ``start``'s month."""
    for offset in range(count):
        index = start.month - 1 + offset
        yield start.year + index // 12, index % 12 + 1


class CashFlowForecaster:
    """Forecaster for recurring income and expenses."""

    @staticmethod
    def sum_for_month(items: Sequence[RecurringItem], month: int) -> float:
        """Sum the amounts of items due in a calendar month."""
        total = 0.0
        for item in items:
            if occurs_in_month(item.recurrence, month):
                total += item.amount
        return total

    @staticmethod
    def forecast(
        income_items: Sequence[RecurringItem],
        expense_items: Sequence[RecurringItem],
        request: CashFlowRequest,
    ) -> List[CashFlowPeriod]:
        """
        Forecast recurring cash flow month by month.

        Args:
            income_items: Recurring income snapshot
            expense_items: Recurring expense snapshot
            request: Validated horizon and start month

        Returns:
            One CashFlowPeriod per forecast month
        """
        periods = []
        for year, month in iter_months(request.start, request.horizon_months):
            income = CashFlowForecaster.sum_for_month(income_items, month)
            expense = CashFlowForecaster.sum_for_month(expense_items, month)
            periods.append(
                CashFlowPeriod(
                    month=f"{year:04d}-{month:02d}",
                    income=round_currency(income),
                    expense=round_currency(expense),
                    balance=round_currency(income - expense),
                )
            )

        logger.debug(
            f"Forecast {request.horizon_months} months from {periods[0].month} "
            f"with {len(income_items)} income and {len(expense_items)} expense items"
        )
        return periods


def forecast_cash_flow(
    income_items: Sequence[RecurringItem],
    expense_items: Sequence[RecurringItem],
    horizon_months: int,
    start: Optional[date] = None,
) -> List[CashFlowPeriod]:
    """
    Forecast recurring cash flow over a calendar horizon.

    Args:
        income_items: Recurring income items (read-only)
        expense_items: Recurring expense items (read-only)
        horizon_months: Number of months to forecast (>= 1)
        start: Date within the first forecast month (defaults to today); a
            datetime is truncated to its date

    Returns:
        One CashFlowPeriod per month

    Raises:
        pydantic.ValidationError: If the horizon or start date is invalid
    """
    request = CashFlowRequest(
        horizon_months=horizon_months,
        start=start if start is not None else date.today(),
    )
    return CashFlowForecaster.forecast(income_items, expense_items, request)
