"""WhatsApp export line parsing.

Export lines look like:
    DD/MM/YYYY, HH:MM - Sender Name: Message text here

Every delimiter is matched at its first occurrence, so a sender name that
contains ": " ends early and the rest lands in the message text.
When ", " only appears after " - ", the time slice still spans the text
between the two delimiter positions, in whichever order they occur.
"""
from typing import Any, Optional, Tuple

from .models import ParsedMessage, FUNNY, LOVE, NEUTRAL
from desikit.config import AppSettings, get_settings
from desikit.utils.logger import get_logger
from desikit.utils.exceptions import MessageParseError
from desikit.utils.text import count_words, contains_any

logger = get_logger()

_LOG_EXTRA = {"operation": "chat"}

DATE_SEPARATOR = ", "
SENDER_SEPARATOR = " - "
TEXT_SEPARATOR = ": "


class WhatsAppParser:
    """Parses single chat export lines and classifies their sentiment."""

    def __init__(self, settings: AppSettings = None):
        """
        Initialize parser.

        Args:
            settings: Settings to use; the global settings when omitted
        """
        self.settings = settings or get_settings()

    def parse(self, line: Any) -> Optional[ParsedMessage]:
        """
        Parse one export line.

        Args:
            line: Raw export line

        Returns:
            ParsedMessage, or None if the line is not in export format
        """
        try:
            date, time, sender, text = self._split(line)
        except MessageParseError as e:
            logger.debug(f"Skipping unparseable line: {e}", extra=_LOG_EXTRA)
            return None

        return ParsedMessage(
            date=date,
            time=time,
            sender=sender,
            text=text,
            word_count=count_words(text),
            sentiment=self.classify(text)
        )

    def classify(self, text: str) -> str:
        """
        Classify message sentiment.

        Funny markers are checked first, so a message that is both funny
        and loving counts as funny.
        """
        if contains_any(text, self.settings.chat_funny_markers):
            return FUNNY
        if contains_any(text, self.settings.chat_love_markers):
            return LOVE
        return NEUTRAL

    def _split(self, line: Any) -> Tuple[str, str, str, str]:
        """
        Split a line into date, time, sender and text.

        Raises:
            MessageParseError: if the line is not a string or a delimiter is missing
        """
        if not isinstance(line, str):
            raise MessageParseError(f"expected str, got {type(line).__name__}")

        if SENDER_SEPARATOR not in line or TEXT_SEPARATOR not in line:
            raise MessageParseError(f"missing separators: {line!r}")

        date_end = line.find(DATE_SEPARATOR)
        if date_end == -1:
            raise MessageParseError(f"missing date separator: {line!r}")

        time_start = date_end + len(DATE_SEPARATOR)
        time_end = line.find(SENDER_SEPARATOR)

        sender_start = time_end + len(SENDER_SEPARATOR)
        sender_end = line.find(TEXT_SEPARATOR, time_end)
        if sender_end == -1:
            raise MessageParseError(f"no text separator after sender: {line!r}")

        return (
            line[:date_end],
            line[min(time_start, time_end):max(time_start, time_end)],
            line[sender_start:sender_end],
            line[sender_end + len(TEXT_SEPARATOR):]
        )


_default_parser = None


def parse_whatsapp_message(line: Any) -> Optional[ParsedMessage]:
    """Parse one chat export line; None if it is malformed."""
    global _default_parser
    if _default_parser is None:
        _default_parser = WhatsAppParser()
    return _default_parser.parse(line)
