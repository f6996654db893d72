"""Shared pytest fixtures for the Tolgyp test suite.

Provides:
  - FakeRemote: stand-in for google.cloud.translate_v2.Client with call tracking
  - remote / client: a fake remote handle and a TranslationClient built on it
  - console / presenter: a presenter rendering into an in-memory console
  - language: a Language orchestrator wired to all of the above

No test talks to the real Cloud Translation API.
"""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from tolgyp.core import TranslationClient
from tolgyp.language import Language
from tolgyp.presenter import Presenter


class FakeRemote:
    """Mimics the dict-based responses of translate_v2.Client."""

    def __init__(self, language="pl", confidence=0.98, translations=None,
                 detect_error=None, translate_error=None):
        self.language = language
        self.confidence = confidence
        self.translations = translations or {}
        self.detect_error = detect_error
        self.translate_error = translate_error
        self.detect_calls = []
        self.translate_calls = []
        self.closed = False

    def detect_language(self, values):
        self.detect_calls.append(values)
        if self.detect_error:
            raise self.detect_error
        return {"language": self.language, "confidence": self.confidence, "input": values}

    def translate(self, values, target_language=None, format_=None, **kwargs):
        self.translate_calls.append((values, target_language))
        if self.translate_error:
            raise self.translate_error
        translated = self.translations.get(target_language, f"<{target_language}> {values}")
        return {
            "translatedText": translated,
            "detectedSourceLanguage": self.language,
            "input": values,
        }

    def close(self):
        self.closed = True


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def client(remote: FakeRemote) -> TranslationClient:
    return TranslationClient(client_factory=lambda: remote)


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def error_log(tmp_path):
    return tmp_path / "error.log"


@pytest.fixture
def presenter(console: Console, error_log) -> Presenter:
    return Presenter(console=console, error_log=str(error_log))


@pytest.fixture
def language(client: TranslationClient, presenter: Presenter) -> Language:
    return Language(client=client, presenter=presenter)


def output_of(console: Console) -> str:
    return console.file.getvalue()
