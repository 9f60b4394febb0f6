"""
Service layer for the class finance summary.

The summary is recomputed from the full transaction collection on
every call; no running totals are kept.  Transactions store
non‑negative amounts, and the ``type`` of each transaction decides
whether it counts as income or expense.

Amounts are accumulated as ``Decimal`` values built from their string
form, so sums of whole‑unit amounts are exact and the usual binary
floating point drift does not creep into the totals.  The figures are
returned as floats for JSON serialisation.

``dues_collected`` estimates how many members paid their monthly dues:
the ``dues`` income of the most recent month that has any is divided
by the per‑member fee (``settings.dues_amount``).
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

from class_portal_api.app.core.config import settings
from class_portal_api.app.core.storage import EntityType, Storage
from class_portal_api.app.schemas.transaction import FinanceSummary


logger = logging.getLogger(__name__)

DUES_CATEGORY = "dues"


class FinanceService:
    """Computes aggregate figures over the transaction collection."""

    def __init__(self, storage: Storage, dues_amount: Optional[float] = None) -> None:
        self.storage = storage
        self.dues_amount = settings.dues_amount if dues_amount is None else dues_amount

    async def summarize(self) -> FinanceSummary:
        transactions = self.storage.list(EntityType.TRANSACTION)
        total_income = Decimal(0)
        total_expense = Decimal(0)
        for tx in transactions:
            amount = Decimal(str(tx["amount"]))
            if tx["type"] == "income":
                total_income += amount
            elif tx["type"] == "expense":
                total_expense += amount
        summary = FinanceSummary(
            total_balance=float(total_income - total_expense),
            total_income=float(total_income),
            total_expense=float(total_expense),
            dues_collected=self.count_dues_payers(transactions),
        )
        logger.debug("Finance summary over %d transactions: %s", len(transactions), summary)
        return summary

    def count_dues_payers(self, transactions: Iterable[Dict[str, Any]]) -> int:
        """Number of members covered by the latest month's dues income."""
        if self.dues_amount <= 0:
            return 0
        by_month: Dict[tuple, Decimal] = {}
        for tx in transactions:
            if tx["type"] != "income" or tx["category"] != DUES_CATEGORY:
                continue
            month = (tx["date"].year, tx["date"].month)
            by_month[month] = by_month.get(month, Decimal(0)) + Decimal(str(tx["amount"]))
        if not by_month:
            return 0
        latest = by_month[max(by_month)]
        return int(latest // Decimal(str(self.dues_amount)))
