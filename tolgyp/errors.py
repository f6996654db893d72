"""
Error taxonomy for the remote detection and translation calls.
"""

from typing import Optional


class TolgypError(Exception):
    """Base class for every error raised by Tolgyp."""


class DetectionError(TolgypError):
    """
    The remote language detection call could not complete.

    Raised for network failures, missing or rejected credentials, exhausted
    quota, invalid input and malformed responses alike.
    """

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message)
        self.text = text


class TranslationError(TolgypError):
    """The remote translation call could not complete."""

    def __init__(self, message: str, text: Optional[str] = None,
                 target_language: Optional[str] = None):
        super().__init__(message)
        self.text = text
        self.target_language = target_language
