"""desikit: pass formatting, chat line parsing and UPI log analysis."""
from .local_pass import Passenger, PassGenerator, generate_local_pass
from .chat import ParsedMessage, WhatsAppParser, parse_whatsapp_message
from .upi import TransactionSummary, UPIAnalyzer, analyze_upi_transactions

__version__ = "0.1.0"

__all__ = [
    "Passenger",
    "PassGenerator",
    "generate_local_pass",
    "ParsedMessage",
    "WhatsAppParser",
    "parse_whatsapp_message",
    "TransactionSummary",
    "UPIAnalyzer",
    "analyze_upi_transactions"
]
