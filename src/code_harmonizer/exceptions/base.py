"""Base exception for Code Harmonizer."""

from typing import Dict, Optional


class HarmonizerError(Exception):
    """Base exception for all Code Harmonizer errors.

    ``details`` carries structured context. A ``reason`` entry is appended
    to the message; other entries are listed in parentheses unless their
    value is already part of the message.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        text = self.message
        reason = self.details.get("reason")
        if reason:
            text = f"{text} - {reason}"
        extra = [
            f"{k}={v}" for k, v in self.details.items()
            if k != "reason" and v not in self.message
        ]
        if extra:
            text = f"{text} ({', '.join(extra)})"
        return text
