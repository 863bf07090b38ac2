"""Data models for UPI transaction analysis."""
import math
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionRecord(BaseModel):
    """Pydantic schema for one UPI log entry."""
    model_config = ConfigDict(frozen=True)

    id: Any = None
    txn_type: Literal["credit", "debit"] = Field(alias="type")
    amount: Union[int, float]
    to: Any = Field(default=None, description="Counterparty")
    category: Any = None
    date: Any = Field(default=None, description="Kept as given, not parsed")

    @field_validator("amount", mode="before")
    @classmethod
    def _positive_number(cls, value: Any) -> Union[int, float]:
        # bool is an int subclass but never an amount
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("amount must be a number")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("amount must be finite")
        if value <= 0:
            raise ValueError("amount must be positive")
        return value

    @field_validator("to", "category")
    @classmethod
    def _grouping_key(cls, value: Any) -> Hashable:
        """Unhashable values (lists, tuples holding lists) group by their text."""
        try:
            hash(value)
        except TypeError:
            return str(value)
        return value


@dataclass
class TransactionSummary:
    """Aggregated statistics over the valid transactions of a log."""
    total_credit: Union[int, float]
    total_debit: Union[int, float]
    net_balance: Union[int, float]
    transaction_count: int
    avg_transaction: Union[int, float]  # int, or inf when the total overflows a float
    highest_transaction: Any  # the caller's own record object
    category_breakdown: Dict[Hashable, Union[int, float]]
    frequent_contact: Optional[Hashable]
    all_above_100: bool
    has_large_transaction: bool

    def to_dict(self) -> Dict[str, Any]:
        """Export in the camelCase shape used by UPI tooling."""
        return {
            "totalCredit": self.total_credit,
            "totalDebit": self.total_debit,
            "netBalance": self.net_balance,
            "transactionCount": self.transaction_count,
            "avgTransaction": self.avg_transaction,
            "highestTransaction": self.highest_transaction,
            "categoryBreakdown": dict(self.category_breakdown),
            "frequentContact": self.frequent_contact,
            "allAbove100": self.all_above_100,
            "hasLargeTransaction": self.has_large_transaction,
        }
