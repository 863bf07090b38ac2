"""Small string helpers shared by the pass formatter and the chat parser."""
from typing import Iterable


def to_title_case(value: str) -> str:
    """
    Lower-case the whole string, then upper-case its first character.

    Only the first character of the string is touched, so "navi mumbai"
    becomes "Navi mumbai".

    Args:
        value: Text to convert

    Returns:
        Title-cased text ("" stays "")
    """
    lower = value.lower()
    return lower[:1].upper() + lower[1:]


def count_words(value: str) -> int:
    """Count whitespace-separated words; blank text has zero words."""
    return len(value.split())


def contains_any(text: str, markers: Iterable[str]) -> bool:
    """
    Case-insensitive substring check against several markers.

    Args:
        text: Text to search
        markers: Substrings to look for

    Returns:
        True if any marker occurs in text
    """
    lowered = text.lower()
    return any(marker.lower() in lowered for marker in markers)
