"""
Console presenter and error log writer.

All user-facing output goes through `Presenter`, which picks the rendering
from a severity level instead of having callers set terminal colours.
"""

import logging
import traceback
from enum import Enum
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape


log = logging.getLogger(__name__)

PREFIX = "[Tolgyp]:"


class Severity(Enum):
    """How a message should be rendered."""
    NOTICE = "notice"
    DETECTION = "detection"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


STYLES = {
    Severity.NOTICE: "cyan",
    Severity.DETECTION: "yellow",
    Severity.SUCCESS: "green",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
}


class Presenter:
    """
    Renders messages on a rich console by severity.

    Args:
        console: Console to print to (default: a new stdout console)
        error_log: File receiving the full traceback of the last failure
        verbose: Also print tracebacks on the console
    """

    def __init__(self, console: Optional[Console] = None,
                 error_log: str = "error.log", verbose: bool = False):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.error_log = Path(error_log)
        self.verbose = verbose

    def show(self, severity: Severity, message: str, blank_line: bool = False):
        """Print a prefixed message in the style of its severity."""
        if blank_line:
            self.console.print()
        style = STYLES[severity]
        self.console.print(f"[{style}]{escape(PREFIX)} {escape(message)}[/{style}]")

    def notice(self, message: str):
        self.show(Severity.NOTICE, message)

    def detection(self, language: str, confidence: float):
        self.show(Severity.DETECTION, f"Language: {language}; confidence {confidence}",
                  blank_line=True)

    def success(self, translated_text: str):
        self.show(Severity.SUCCESS, f"Translated:\n{translated_text}", blank_line=True)

    def warning(self, message: str):
        self.show(Severity.WARNING, message)

    def error(self, message: str, exc: Optional[BaseException] = None):
        """
        Print an error summary and, when `exc` is given, record it in the error log.

        Args:
            message: Summary shown on the console
            exc: Exception whose traceback goes to the error log
        """
        if exc is not None:
            self.write_error_log(exc)
        self.show(Severity.ERROR, message, blank_line=True)
        if exc is not None and self.verbose:
            self.console.print(escape(format_exception(exc)), style="dim")

    def write_error_log(self, exc: BaseException) -> bool:
        """
        Overwrite the error log with the traceback of `exc`.

        Returns:
            Whether the log was written
        """
        try:
            self.error_log.write_text(format_exception(exc), encoding='utf-8')
        except OSError as e:
            log.warning("Could not write %s: %s", self.error_log, e)
            return False
        log.debug("Wrote traceback to %s", self.error_log)
        return True


def format_exception(exc: BaseException) -> str:
    """Full traceback text of an exception, including its chained causes."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
