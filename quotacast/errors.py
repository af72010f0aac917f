"""
Quotacast error hierarchy.
"""

from __future__ import annotations


class QuotacastError(Exception):
    """Base error for all quotacast exceptions."""

    code = "QUOTACAST_ERROR"

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class InvalidInputError(QuotacastError, ValueError):
    """Input is malformed or empty where a comparison needs at least one value."""

    code = "INVALID_INPUT"
