"""
Language orchestrator.
Detects the language of a text and translates it between Polish and English.
"""

import logging
from typing import Optional, Union

from .config import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE, Settings
from .core import TranslationClient
from .errors import DetectionError, TranslationError
from .models import (
    DETECTION_FAILED_MESSAGE,
    DetectionResult,
    Failure,
    Success,
    TranslationOutcome,
)
from .presenter import Presenter


log = logging.getLogger(__name__)

Result = Union[Success, Failure]


class Language:
    """
    Detects the language of a text and translates it to the complementary language.

    Text detected as the source language (Polish by default) is translated to
    the target language (English by default). Text in any other language is
    translated to the source language, so French goes to Polish as well.
    Every operation has a blocking and an awaitable form.
    """

    def __init__(self, client: Optional[TranslationClient] = None,
                 presenter: Optional[Presenter] = None,
                 source_language_code: str = DEFAULT_SOURCE_LANGUAGE,
                 target_language_code: str = DEFAULT_TARGET_LANGUAGE):
        """
        Initialize the orchestrator.

        Args:
            client: Gateway client (default: a new TranslationClient)
            presenter: Console presenter (default: a new Presenter)
            source_language_code: Language whose text is translated to the target
            target_language_code: Language the source language is translated to
        """
        self._client = client or TranslationClient()
        self.presenter = presenter or Presenter()
        self._source_language_code = source_language_code
        self._target_language_code = target_language_code
        self._detection: Optional[DetectionResult] = None
        self._outcome: Optional[TranslationOutcome] = None

    @classmethod
    def from_settings(cls, settings: Settings,
                      client: Optional[TranslationClient] = None,
                      presenter: Optional[Presenter] = None) -> "Language":
        """Build an orchestrator for the language pair in `settings`."""
        return cls(
            client=client,
            presenter=presenter,
            source_language_code=settings.source_language,
            target_language_code=settings.target_language
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Release the gateway client."""
        self._client.close()

    @property
    def source_language_code(self) -> str:
        return self._source_language_code

    @source_language_code.setter
    def source_language_code(self, value: str):
        self._source_language_code = value

    @property
    def target_language_code(self) -> str:
        return self._target_language_code

    @target_language_code.setter
    def target_language_code(self, value: str):
        self._target_language_code = value

    @property
    def client(self) -> TranslationClient:
        return self._client

    @property
    def detection(self) -> Optional[DetectionResult]:
        """Result of the last successful detection, None before one or after a failure."""
        return self._detection

    @property
    def original_text(self) -> str:
        return self._outcome.original_text if self._outcome else ""

    @property
    def translated_text(self) -> str:
        return self._outcome.translated_text if self._outcome else ""

    def choose_target(self, detected_language: str) -> str:
        """
        Pick the translation target for a detected language code.

        Args:
            detected_language: Code returned by the detection call

        Returns:
            The target language code if the text is in the source language,
            otherwise the source language code
        """
        if detected_language == self._source_language_code:
            return self._target_language_code
        return self._source_language_code

    def detect(self, text: str) -> Result:
        """
        Detect the language of a text.

        Failures are written to the error log and shown on the console, never raised.

        Args:
            text: Text whose language should be detected

        Returns:
            Success with the DetectionResult, or Failure
        """
        self._detection = None
        try:
            detection = self._client.detect_language(text)
        except DetectionError as e:
            return self._detection_failed(e, "Error during language detection")
        return self._detected(detection)

    async def detect_async(self, text: str) -> Result:
        """Awaitable form of `detect`."""
        self._detection = None
        try:
            detection = await self._client.detect_language_async(text)
        except DetectionError as e:
            return self._detection_failed(e, "Error during asynchronous language detection")
        return self._detected(detection)

    def translate(self, text: str) -> Result:
        """
        Detect the language of a text and translate it to the complementary language.

        Args:
            text: Text to translate

        Returns:
            Success with the translated text; Failure carrying the sentinel
            message if detection failed, or the error summary if translation failed
        """
        self._outcome = None
        if not self.detect(text).ok:
            return Failure(DETECTION_FAILED_MESSAGE)

        target = self.choose_target(self._detection.language)
        try:
            outcome = self._client.translate(text, target)
        except TranslationError as e:
            return self._translation_failed(e)
        return self._translated(outcome)

    async def translate_async(self, text: str) -> Result:
        """Awaitable form of `translate`."""
        self._outcome = None
        detected = await self.detect_async(text)
        if not detected.ok:
            return Failure(DETECTION_FAILED_MESSAGE)

        target = self.choose_target(self._detection.language)
        try:
            outcome = await self._client.translate_async(text, target)
        except TranslationError as e:
            return self._translation_failed(e)
        return self._translated(outcome)

    def _detected(self, detection: DetectionResult) -> Success:
        self._detection = detection
        self.presenter.detection(detection.language, detection.confidence)
        return Success(detection)

    def _detection_failed(self, error: DetectionError, summary: str) -> Failure:
        log.debug("Detection failed", exc_info=error)
        message = f"{summary}: {error}"
        self.presenter.error(message, exc=error)
        return Failure(message, error)

    def _translated(self, outcome: TranslationOutcome) -> Success:
        self._outcome = outcome
        self.presenter.success(outcome.translated_text)
        return Success(outcome.translated_text)

    def _translation_failed(self, error: TranslationError) -> Failure:
        log.debug("Translation failed", exc_info=error)
        message = f"Error during translation: {error}"
        self.presenter.error(message, exc=error)
        return Failure(message, error)
