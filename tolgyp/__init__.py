"""
Tolgyp - language detection and Polish/English translation
built on the Google Cloud Translation API.
"""

__version__ = "0.1.0"
__copyright__ = "Copyright (C) 2025 Softbery by Paweł Tobis"

from .errors import TolgypError, DetectionError, TranslationError
from .models import DetectionResult, TranslationOutcome, Success, Failure, DETECTION_FAILED_MESSAGE
from .core import TranslationClient
from .language import Language

__all__ = [
    'Language',
    'TranslationClient',
    'DetectionResult',
    'TranslationOutcome',
    'Success',
    'Failure',
    'DETECTION_FAILED_MESSAGE',
    'TolgypError',
    'DetectionError',
    'TranslationError',
]
