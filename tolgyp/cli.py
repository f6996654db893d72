#!/usr/bin/env python3
"""
Tolgyp CLI - detect the language of a text and translate it between Polish and English.
"""

import sys
import asyncio
import logging
from typing import Optional, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from . import __copyright__, __version__
from .arguments import build_parser, parse_arguments
from .config import Settings
from .language import Language
from .presenter import Presenter


# Initialize Rich console
console = Console(highlight=False, soft_wrap=True)


def configure_logging(verbose: bool = False):
    """Configure logging; third-party client loggers are kept at ERROR unless verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if not verbose:
        logging.getLogger('google').setLevel(logging.ERROR)
        logging.getLogger('urllib3').setLevel(logging.ERROR)


class TolgypCLI:
    """Command-line application wiring argument parsing to the Language orchestrator."""

    def __init__(self, settings: Optional[Settings] = None,
                 language: Optional[Language] = None):
        """
        Args:
            settings: Runtime settings (default: Settings.load())
            language: Orchestrator to use (default: built from settings on demand)
        """
        self.settings = settings
        self.language = language
        self.verbose = False

    def show_help(self):
        build_parser().print_help()

    def show_version(self):
        console.print(f"Tolgyp version {__version__}")
        console.print(__copyright__)
        console.print("Uses Google Cloud Translation API.")

    def get_language(self, presenter: Presenter) -> Language:
        if self.language is None:
            self.language = Language.from_settings(self.settings, presenter=presenter)
        return self.language

    def run(self, argv: Sequence[str]) -> int:
        """
        Run one invocation.

        Args:
            argv: Arguments without the program name

        Returns:
            Process exit code
        """
        args = parse_arguments(argv)
        self.verbose = args.verbose

        if not argv or args.show_help:
            self.show_help()
            return 0

        if args.show_version:
            self.show_version()
            return 0

        if self.settings is None:
            self.settings = Settings.load()
        presenter = Presenter(console=console, error_log=self.settings.error_log,
                              verbose=self.verbose)

        text = args.text
        if text is None or not text.strip():
            presenter.error("Error: no text to translate was given.")
            self.show_help()
            return 1

        with self.get_language(presenter) as language:
            if args.detect_only:
                presenter.notice(f'Detecting language of: "{text}"')
                result = asyncio.run(language.detect_async(text))
            else:
                presenter.notice(f'Translating text: "{text}"')
                result = asyncio.run(language.translate_async(text))

        return 0 if result.ok else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point with exception handling."""
    argv = sys.argv[1:] if argv is None else list(argv)

    # Load environment variables from .env file
    load_dotenv()
    configure_logging(verbose='--verbose' in argv)

    try:
        return TolgypCLI().run(argv)
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠ Cancelled by user[/yellow]")
        return 130
    except Exception as e:
        console.print(f"[red]✗ Fatal error: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
