"""Utility modules."""
from .logger import get_logger
from .exceptions import (
    DesikitError,
    ConfigError,
    ValidationError,
    PassValidationError,
    MessageParseError,
    TransactionValidationError
)
from .text import to_title_case, count_words, contains_any

__all__ = [
    "get_logger",
    "DesikitError",
    "ConfigError",
    "ValidationError",
    "PassValidationError",
    "MessageParseError",
    "TransactionValidationError",
    "to_title_case",
    "count_words",
    "contains_any"
]
