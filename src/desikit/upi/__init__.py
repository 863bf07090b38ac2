"""UPI transaction analysis module."""
from .models import TransactionRecord, TransactionSummary
from .analyzer import UPIAnalyzer, analyze_upi_transactions, average_half_up

__all__ = [
    "TransactionRecord",
    "TransactionSummary",
    "UPIAnalyzer",
    "analyze_upi_transactions",
    "average_half_up"
]
