"""
Ledger module supplying read-only snapshots to the projection engine.

This module provides a unified interface for reading recurring income/expense
items and current-period totals from the surrounding system.
"""

from .base import LedgerError, LedgerReader, LedgerUnavailableError, PeriodTotals
from .memory import InMemoryLedger, InvestmentEntry, LedgerEntry

__all__ = [
    "LedgerReader",
    "LedgerError",
    "LedgerUnavailableError",
    "PeriodTotals",
    "InMemoryLedger",
    "LedgerEntry",
    "InvestmentEntry",
]
