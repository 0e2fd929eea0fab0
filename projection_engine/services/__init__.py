"""Services coordinating the projection engine with its collaborators."""

from .planning_service import FinancialPlanningService

__all__ = ["FinancialPlanningService"]
