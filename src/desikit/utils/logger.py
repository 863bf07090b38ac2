"""Logging infrastructure with operation context."""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional


class OperationContextFilter(logging.Filter):
    """Add operation context to log records."""

    def __init__(self, default_operation: str = "desikit"):
        super().__init__()
        self.default_operation = default_operation

    def filter(self, record):
        """Fill in operation unless the caller passed it via `extra`."""
        if not hasattr(record, "operation"):
            record.operation = self.default_operation
        return True


class DesikitLogger:
    """Centralized logging manager."""

    def __init__(self, log_level: str = "INFO", log_file: Optional[str] = None,
                 max_file_size_mb: int = 10, backup_count: int = 30):
        self.operation_filter = OperationContextFilter()

        self.logger = logging.getLogger("desikit")
        self.logger.setLevel(getattr(logging, log_level.upper()))

        # Remove existing handlers
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(operation)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(self.operation_filter)
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_file_size_mb * 1024 * 1024,
                backupCount=backup_count,
                encoding="utf-8"
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            file_handler.addFilter(self.operation_filter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[DesikitLogger] = None


def get_logger() -> logging.Logger:
    """Get or create global logger instance, configured from settings."""
    global _logger_instance
    if _logger_instance is None:
        # Imported here: settings depends on this package for its exceptions
        from desikit.config.settings import get_settings

        settings = get_settings()
        _logger_instance = DesikitLogger(
            log_level=settings.log_level,
            log_file=settings.log_file,
            max_file_size_mb=settings.log_max_file_size_mb,
            backup_count=settings.log_backup_count
        )
    return _logger_instance.get_logger()
