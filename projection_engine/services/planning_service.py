"""
Financial planning service coordinating the projection engine.

This service wires ledger snapshots into the cash-flow forecaster and the health
scorer, delegates the standalone simulators and writes an audit summary line to
the log for every operation.
"""

import logging
from datetime import date
from typing import List, Optional

from projection_engine.config import Settings, get_global_settings
from projection_engine.ledger.base import LedgerReader
from projection_engine.models.accumulation import (
    InvestmentSimulation,
    simulate_investment,
)
from projection_engine.models.cash_flow import CashFlowPeriod, forecast_cash_flow
from projection_engine.models.financial_health import (
    HealthSnapshot,
    score_financial_health,
)
from projection_engine.models.loan_amortization import (
    AmortizationCalculator,
    LoanParameters,
    LoanSimulation,
)
from projection_engine.models.retirement import (
    RetirementSimulation,
    simulate_retirement,
)

logger = logging.getLogger(__name__)


class FinancialPlanningService:
    """Service for running financial projections on behalf of a user."""

    def __init__(self, ledger: LedgerReader, settings: Optional[Settings] = None):
        """Initialize the planning service.

        Args:
            ledger: Read-only source of recurring items and period totals
            settings: Engine settings (defaults to global settings)
        """
        self.ledger = ledger
        self.settings = settings or get_global_settings()
        self.logger = logger

    def simulate_loan(
        self,
        requested_amount: float,
        term_periods: int,
        annual_rate_percent: float,
        down_payment: float = 0.0,
    ) -> LoanSimulation:
        """Simulate a loan on the amount requested minus the down payment.

        Raises:
            pydantic.ValidationError: If the loan parameters are invalid
        """
        try:
            params = LoanParameters.from_request(
                requested_amount, down_payment, term_periods, annual_rate_percent
            )
            result = AmortizationCalculator.simulate(params)
        except Exception as e:
            self.logger.error(f"Error calculating loan: {str(e)}")
            raise

        self.logger.info(
            f"loan_simulation: installment={result.installment} "
            f"total_interest={result.total_interest}"
        )
        return result

    def simulate_investment(
        self,
        initial_amount: float,
        monthly_contribution: float,
        months: int,
        annual_rate_percent: float,
        investment_type: Optional[str] = None,
    ) -> InvestmentSimulation:
        """Simulate an investment with monthly contributions.

        Raises:
            pydantic.ValidationError: If the investment parameters are invalid
        """
        try:
            result = simulate_investment(
                initial_amount,
                monthly_contribution,
                months,
                annual_rate_percent,
                investment_type=investment_type,
            )
        except Exception as e:
            self.logger.error(f"Error calculating investment: {str(e)}")
            raise

        self.logger.info(
            f"investment_simulation: final_balance={result.final_balance} "
            f"total_return={result.total_return}"
        )
        return result

    def simulate_retirement(
        self,
        user_id: int,
        current_age: int,
        retirement_age: int,
        current_salary: float,
        savings_rate_percent: float,
        annual_growth_rate_percent: float,
        annual_inflation_rate_percent: float,
    ) -> RetirementSimulation:
        """Simulate retirement savings for a user.

        Raises:
            pydantic.ValidationError: If the retirement inputs are invalid
        """
        try:
            result = simulate_retirement(
                current_age,
                retirement_age,
                current_salary,
                savings_rate_percent,
                annual_growth_rate_percent,
                annual_inflation_rate_percent,
            )
        except Exception as e:
            self.logger.error(
                f"Error calculating retirement for user {user_id}: {str(e)}"
            )
            raise

        self.logger.info(
            f"retirement_simulation: user={user_id} "
            f"final_balance={result.final_balance}"
        )
        return result

    def analyze_cash_flow(
        self, user_id: int, months: Optional[int] = None, start: Optional[date] = None
    ) -> List[CashFlowPeriod]:
        """Forecast a user's recurring cash flow.

        Args:
            user_id: Owner of the recurring items
            months: Horizon in months (defaults to the configured horizon)
            start: Date within the first forecast month (defaults to today)

        Returns:
            One CashFlowPeriod per month

        Raises:
            ValueError: If the horizon exceeds the configured maximum
            pydantic.ValidationError: If the horizon is not a positive integer
            LedgerError: If the snapshots cannot be read
        """
        if months is None:
            months = self.settings.cashflow_default_horizon_months

        try:
            if isinstance(months, int) and months > self.settings.max_horizon_months:
                raise ValueError(
                    f"months must be <= {self.settings.max_horizon_months}, "
                    f"got {months}"
                )
            income_items = self.ledger.get_recurring_income(user_id)
            expense_items = self.ledger.get_recurring_expenses(user_id)
            result = forecast_cash_flow(
                income_items, expense_items, months, start=start
            )
        except Exception as e:
            self.logger.error(f"Error analyzing cash flow for user {user_id}: {str(e)}")
            raise

        self.logger.info(f"cashflow_analysis: user={user_id} periods={len(result)}")
        return result

    def analyze_financial_health(
        self, user_id: int, as_of: Optional[date] = None
    ) -> HealthSnapshot:
        """Score a user's financial health for the month containing ``as_of``.

        Raises:
            LedgerError: If the period totals cannot be read
        """
        as_of = as_of or date.today()

        try:
            totals = self.ledger.get_period_totals(user_id, as_of.year, as_of.month)
            result = score_financial_health(
                totals.income, totals.expense, totals.investment_total
            )
        except Exception as e:
            self.logger.error(
                f"Error analyzing financial health for user {user_id}: {str(e)}"
            )
            raise

        self.logger.info(
            f"financial_health_analysis: user={user_id} score={result.score} "
            f"label={result.label}"
        )
        return result
