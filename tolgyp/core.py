"""
Core translation client for Google Cloud Translation (v2 API).
"""

import asyncio
import logging
from typing import Callable, Optional

from google.cloud import translate_v2 as translate

from .errors import DetectionError, TranslationError
from .models import DetectionResult, TranslationOutcome


log = logging.getLogger(__name__)


class TranslationClient:
    """
    Gateway to the detect and translate operations of Google Cloud Translation.

    The underlying `translate_v2.Client` is created on first use and reused
    until `close()`. Credentials come from the environment (Application
    Default Credentials), never from this class.

    Usage:
        with TranslationClient() as client:
            detection = client.detect_language("Witaj świecie")
            outcome = client.translate("Witaj świecie", "en")
    """

    def __init__(self, client_factory: Optional[Callable[[], object]] = None):
        """
        Initialize the translation client.

        Args:
            client_factory: Callable returning a translate_v2-compatible client
                (default: translate_v2.Client)
        """
        self.client_factory = client_factory or translate.Client
        self._handle = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def handle(self):
        """Remote client handle, created on first access."""
        if self._handle is None:
            log.debug("Creating Cloud Translation client")
            self._handle = self.client_factory()
        return self._handle

    def close(self):
        """Release the remote client handle, if one was created."""
        handle, self._handle = self._handle, None
        if handle is None:
            return
        close = getattr(handle, 'close', None)
        if callable(close):
            close()
        log.debug("Closed Cloud Translation client")

    def detect_language(self, text: str) -> DetectionResult:
        """
        Detect the language of a text.

        Args:
            text: Text to inspect

        Returns:
            Detected language code and confidence

        Raises:
            DetectionError: The remote call failed or returned no usable result
        """
        try:
            response = self.handle.detect_language(text)
        except Exception as e:
            raise DetectionError(f"Language detection failed: {e}", text=text) from e

        language = response.get('language') if isinstance(response, dict) else None
        if not language or language == 'und':
            raise DetectionError(f"Language detection returned no language for {text!r}", text=text)

        confidence = response.get('confidence')
        is_reliable = response.get('isReliable')
        log.debug("Detected %s (confidence %s)", language, confidence)
        return DetectionResult(
            language=language,
            confidence=float(confidence) if confidence is not None else 0.0,
            is_reliable=is_reliable,
            input=response.get('input', text),
        )

    def translate(self, text: str, target_language: str) -> TranslationOutcome:
        """
        Translate text into the target language.

        Args:
            text: Text to translate
            target_language: ISO-639-1 code of the target language

        Returns:
            Original and translated text

        Raises:
            TranslationError: The remote call failed or returned no translation
        """
        try:
            response = self.handle.translate(
                text,
                target_language=target_language,
                format_='text'
            )
        except Exception as e:
            raise TranslationError(
                f"Translation to '{target_language}' failed: {e}",
                text=text,
                target_language=target_language
            ) from e

        translated = response.get('translatedText') if isinstance(response, dict) else None
        if translated is None:
            raise TranslationError(
                f"Translation to '{target_language}' returned no text",
                text=text,
                target_language=target_language
            )

        return TranslationOutcome(
            original_text=response.get('input', text),
            translated_text=translated,
            target_language=target_language,
            detected_source_language=response.get('detectedSourceLanguage'),
        )

    async def detect_language_async(self, text: str) -> DetectionResult:
        """Awaitable form of `detect_language`; runs the call on a worker thread."""
        return await asyncio.to_thread(self.detect_language, text)

    async def translate_async(self, text: str, target_language: str) -> TranslationOutcome:
        """Awaitable form of `translate`; runs the call on a worker thread."""
        return await asyncio.to_thread(self.translate, text, target_language)
