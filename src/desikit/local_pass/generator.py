"""Mumbai local train pass formatting."""
from typing import Any

from pydantic import ValidationError

from .models import Passenger
from desikit.config import AppSettings, get_settings
from desikit.utils.logger import get_logger
from desikit.utils.exceptions import PassValidationError
from desikit.utils.text import to_title_case

logger = get_logger()

_LOG_EXTRA = {"operation": "local_pass"}


class PassGenerator:
    """Formats passenger records into fixed-layout pass text."""

    def __init__(self, settings: AppSettings = None):
        """
        Initialize pass generator.

        Args:
            settings: Settings to use; the global settings when omitted
        """
        self.settings = settings or get_settings()

    def generate(self, passenger: Any) -> str:
        """
        Generate the pass text for a passenger.

        Args:
            passenger: Mapping with name, from, to and classType, or a Passenger

        Returns:
            Seven-line pass text, or the invalid marker ("INVALID PASS")
        """
        try:
            record = self._validate(passenger)
        except PassValidationError as e:
            logger.debug(f"Rejected passenger record: {e}", extra=_LOG_EXTRA)
            return self.settings.pass_invalid_marker

        return self._render(record)

    def _validate(self, passenger: Any) -> Passenger:
        """
        Validate raw input into a Passenger.

        Raises:
            PassValidationError: if the input is not a usable passenger record
        """
        if passenger is None:
            raise PassValidationError("passenger is missing")

        try:
            record = Passenger.model_validate(passenger)
        except ValidationError as e:
            raise PassValidationError(
                f"{e.error_count()} invalid field(s) in passenger record"
            ) from e

        if record.class_type not in self.settings.pass_classes:
            raise PassValidationError(f"unknown class type: {record.class_type!r}")

        return record

    def _render(self, record: Passenger) -> str:
        """Render a validated passenger into pass lines."""
        class_upper = record.class_type.upper()
        pass_id = self.build_pass_id(class_upper, record.from_, record.to)

        lines = [
            self.settings.pass_title,
            "---",
            f"Name: {record.name.upper()}",
            f"From: {to_title_case(record.from_)}",
            f"To: {to_title_case(record.to)}",
            f"Class: {class_upper}",
            f"Pass ID: {pass_id}",
        ]
        return "\n".join(lines)

    @staticmethod
    def build_pass_id(class_type: str, origin: str, destination: str) -> str:
        """
        Build a pass ID from class and station names.

        Class initial, then up to three letters of each station, all
        upper-cased. Short station names are not padded.

        Example: ("first", "dadar", "andheri") -> "FDADAND"
        """
        return class_type[:1].upper() + origin.upper()[:3] + destination.upper()[:3]


_default_generator = None


def generate_local_pass(passenger: Any) -> str:
    """Format a passenger record into pass text; "INVALID PASS" on bad input."""
    global _default_generator
    if _default_generator is None:
        _default_generator = PassGenerator()
    return _default_generator.generate(passenger)
