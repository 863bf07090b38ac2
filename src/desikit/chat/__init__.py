"""Chat export parsing module."""
from .models import ParsedMessage, FUNNY, LOVE, NEUTRAL
from .parser import WhatsAppParser, parse_whatsapp_message

__all__ = ["ParsedMessage", "FUNNY", "LOVE", "NEUTRAL", "WhatsAppParser", "parse_whatsapp_message"]
