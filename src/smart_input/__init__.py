"""
Smart input for personal accounting.

A deterministic, testable engine that turns recognized receipt lines and
voice transcripts into transaction drafts: amount, merchant, suggested
category, note and a confidence score.
"""

from .engine import SmartInputEngine, extract_transaction_info, parse_voice_input
from .schemas import SmartInputResult

__version__ = "0.1.0"

__all__ = [
    "SmartInputEngine",
    "SmartInputResult",
    "extract_transaction_info",
    "parse_voice_input",
]
