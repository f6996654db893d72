"""
Data classes shared by the gateway client, the orchestrator and the CLI.
"""

from dataclasses import dataclass
from typing import Any, Optional


# Returned in place of a translation when the detection step failed.
DETECTION_FAILED_MESSAGE = "[Tolgyp]: Can't translate because detection or client is null."


@dataclass(frozen=True)
class DetectionResult:
    """Most likely language of a text and the service's confidence in it."""
    language: str
    confidence: float
    is_reliable: Optional[bool] = None
    input: Optional[str] = None


@dataclass(frozen=True)
class TranslationOutcome:
    """Original and translated text of a single translation call."""
    original_text: str
    translated_text: str
    target_language: str
    detected_source_language: Optional[str] = None


@dataclass(frozen=True)
class Success:
    """Successful outcome of an orchestrator operation."""
    value: Any

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """
    Failed outcome of an orchestrator operation.

    `message` is the human-readable summary shown to the user, `error` the
    exception that caused it when there is one.
    """
    message: str
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return False
