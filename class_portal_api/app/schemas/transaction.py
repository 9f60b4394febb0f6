"""
Pydantic models for class finance.

A transaction is either ``income`` or ``expense``.  The ``amount`` is
always stored as a non‑negative number; its sign is implied by the
transaction type and only applied when the finance summary is
computed.
"""

import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


TransactionType = Literal["income", "expense"]


class TransactionBase(CamelModel):
    date: datetime.date = Field(default_factory=datetime.date.today)
    description: str = Field(..., min_length=1, examples=["Monthly Class Dues"])
    category: str = Field(..., min_length=1, examples=["dues"])
    amount: float = Field(..., ge=0, allow_inf_nan=False, examples=[1900000])
    type: TransactionType = Field(..., examples=["income"])
    status: str = Field("completed", examples=["completed"])


class TransactionCreate(TransactionBase):
    """Schema for recording a transaction."""
    pass


class TransactionUpdate(CamelModel):
    date: Optional[datetime.date] = None
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    amount: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    type: Optional[TransactionType] = None
    status: Optional[str] = None


class TransactionRead(TransactionBase):
    id: int


class FinanceSummary(CamelModel):
    """Aggregated figures over all transactions."""

    total_balance: float = Field(..., examples=[1150000])
    total_income: float = Field(..., examples=[1900000])
    total_expense: float = Field(..., examples=[750000])
    dues_collected: int = Field(
        ...,
        description="Number of members whose dues were received in the latest month with dues income",
    )
