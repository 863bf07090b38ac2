"""Data models for chat export parsing."""
from dataclasses import dataclass
from typing import Dict, Union

FUNNY = "funny"
LOVE = "love"
NEUTRAL = "neutral"


@dataclass(frozen=True)
class ParsedMessage:
    """One parsed chat export line."""
    date: str
    time: str
    sender: str
    text: str  # untrimmed, exactly as exported
    word_count: int
    sentiment: str  # FUNNY, LOVE or NEUTRAL

    def to_dict(self) -> Dict[str, Union[str, int]]:
        """Export in the camelCase shape used by chat tooling."""
        return {
            "date": self.date,
            "time": self.time,
            "sender": self.sender,
            "text": self.text,
            "wordCount": self.word_count,
            "sentiment": self.sentiment,
        }
