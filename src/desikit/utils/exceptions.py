"""Custom exception classes for desikit."""


class DesikitError(Exception):
    """Base exception for desikit."""
    pass


class ConfigError(DesikitError):
    """Configuration-related errors."""
    pass


class ValidationError(DesikitError):
    """Input validation errors."""
    pass


class PassValidationError(ValidationError):
    """Passenger record cannot be turned into a pass."""
    pass


class MessageParseError(ValidationError):
    """Chat line does not follow the export format."""
    pass


class TransactionValidationError(ValidationError):
    """Transaction log or record is unusable."""
    pass
