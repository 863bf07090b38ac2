"""UPI transaction log analysis."""
import math
from collections import Counter, defaultdict
from typing import Any, List, Optional, Tuple, Union

from pydantic import ValidationError

from .models import TransactionRecord, TransactionSummary
from desikit.config import AppSettings, get_settings
from desikit.utils.logger import get_logger
from desikit.utils.exceptions import TransactionValidationError

logger = get_logger()

_LOG_EXTRA = {"operation": "upi"}

Number = Union[int, float]


def average_half_up(total: Number, count: int) -> Number:
    """
    Mean of `count` amounts summing to `total`, rounded half up (2.5 -> 3).

    Integer totals are averaged exactly, however large. A float total that
    has overflowed to inf averages to inf.
    """
    if isinstance(total, int):
        return (2 * total + count) // (2 * count)
    mean = total / count
    if not math.isfinite(mean):
        return mean
    return math.floor(mean + 0.5)


def _add(total: Number, amount: Number) -> Number:
    """Add an amount; an int total beyond float range plus a float gives inf."""
    try:
        return total + amount
    except OverflowError:
        return math.inf


def _subtract(credit: Number, debit: Number) -> Number:
    try:
        return credit - debit
    except OverflowError:
        return math.inf if credit > debit else -math.inf


class UPIAnalyzer:
    """Aggregates a UPI transaction log into summary statistics."""

    def __init__(self, settings: AppSettings = None):
        """
        Initialize analyzer.

        Args:
            settings: Settings to use; the global settings when omitted
        """
        self.settings = settings or get_settings()

    def analyze(self, transactions: Any) -> Optional[TransactionSummary]:
        """
        Summarize the valid transactions of a log.

        Records with a non-positive or non-numeric amount, or a type other
        than "credit"/"debit", are skipped.

        Args:
            transactions: List of transaction mappings

        Returns:
            TransactionSummary, or None if the log is empty or has no valid records
        """
        try:
            valid = self._validate(transactions)
        except TransactionValidationError as e:
            logger.debug(f"Nothing to analyze: {e}", extra=_LOG_EXTRA)
            return None

        summary = self._aggregate(valid)

        logger.debug(
            f"Analyzed {summary.transaction_count} of {len(transactions)} transactions "
            f"into {len(summary.category_breakdown)} categories",
            extra=_LOG_EXTRA
        )
        return summary

    def _validate(self, transactions: Any) -> List[Tuple[Any, TransactionRecord]]:
        """
        Keep the valid records, paired with the caller's original objects.

        Raises:
            TransactionValidationError: if the log is not a non-empty list or
                none of its records is valid
        """
        if not isinstance(transactions, (list, tuple)):
            raise TransactionValidationError(
                f"expected a list of transactions, got {type(transactions).__name__}"
            )
        if not transactions:
            raise TransactionValidationError("transaction list is empty")

        valid = []
        for index, raw in enumerate(transactions):
            try:
                valid.append((raw, TransactionRecord.model_validate(raw)))
            except ValidationError as e:
                logger.debug(f"Skipping transaction #{index}: {e.error_count()} invalid field(s)",
                             extra=_LOG_EXTRA)

        if not valid:
            raise TransactionValidationError(f"none of {len(transactions)} transactions is valid")

        return valid

    def _aggregate(self, valid: List[Tuple[Any, TransactionRecord]]) -> TransactionSummary:
        """Single pass over validated records."""
        total_credit = 0
        total_debit = 0
        total_amount = 0
        highest = None
        highest_amount = None
        category_breakdown = defaultdict(int)
        contact_counts = Counter()
        all_above_min = True
        has_large = False

        for raw, txn in valid:
            amount = txn.amount
            total_amount = _add(total_amount, amount)

            if txn.txn_type == "credit":
                total_credit = _add(total_credit, amount)
            else:
                total_debit = _add(total_debit, amount)

            # Strictly greater keeps the earliest of equal maxima
            if highest_amount is None or amount > highest_amount:
                highest = raw
                highest_amount = amount

            category_breakdown[txn.category] = _add(category_breakdown[txn.category], amount)
            contact_counts[txn.to] += 1

            if amount <= self.settings.upi_min_amount_exclusive:
                all_above_min = False
            if amount >= self.settings.upi_large_transaction_threshold:
                has_large = True

        count = len(valid)

        # most_common keeps first-seen order among equal counts
        frequent_contact = contact_counts.most_common(1)[0][0]

        return TransactionSummary(
            total_credit=total_credit,
            total_debit=total_debit,
            net_balance=_subtract(total_credit, total_debit),
            transaction_count=count,
            avg_transaction=average_half_up(total_amount, count),
            highest_transaction=highest,
            category_breakdown=dict(category_breakdown),
            frequent_contact=frequent_contact,
            all_above_100=all_above_min,
            has_large_transaction=has_large
        )


_default_analyzer = None


def analyze_upi_transactions(transactions: Any) -> Optional[TransactionSummary]:
    """Summarize a UPI transaction log; None if nothing valid is left."""
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = UPIAnalyzer()
    return _default_analyzer.analyze(transactions)
