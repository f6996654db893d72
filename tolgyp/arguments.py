"""
Command-line argument parsing.
"""

import argparse
from dataclasses import dataclass
from typing import Optional, Sequence


PROG = 'tolgyp'

DESCRIPTION = """\
Tolgyp detects the language of a text and translates it between Polish (pl)
and English (en). Polish text is translated to English; text in any other
language is translated to Polish. Uses the Google Cloud Translation API.
"""

EPILOG = """\
Examples:
  %(prog)s "Witaj świecie, jak się masz?"          Polish to English
  %(prog)s "Hello world, how are you?"             English to Polish
  %(prog)s --detect-lang "Bonjour le monde"        detect only, no translation
  %(prog)s -h                                      show this help

Requirements:
  The environment must be able to authenticate with Google Cloud, usually by
  setting GOOGLE_APPLICATION_CREDENTIALS to a service account key file or by
  running `gcloud auth application-default login`.

Notes:
  Results are printed on standard output. Errors from the API are shown on
  the console and their full traceback is written to "error.log" in the
  current directory (overwritten on every failure).

Configuration:
  ~/.tolgyp/config.ini ([defaults] source_language, target_language, error_log)
  and the TOLGYP_SOURCE_LANGUAGE, TOLGYP_TARGET_LANGUAGE, TOLGYP_ERROR_LOG
  environment variables (a .env file in the current directory is loaded).
"""


HELP_FLAGS = {'-h', '--help'}
VERSION_FLAGS = {'-v', '--version'}
DETECT_FLAG = '--detect-lang'
VERBOSE_FLAG = '--verbose'


@dataclass
class ParsedArguments:
    show_help: bool = False
    show_version: bool = False
    detect_only: bool = False
    verbose: bool = False
    text: Optional[str] = None


def build_parser() -> argparse.ArgumentParser:
    """Argument parser describing the tolgyp command; renders the help text."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage='%(prog)s [OPTIONS] "TEXT TO TRANSLATE"',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False
    )
    parser.add_argument('text', nargs='*', metavar='TEXT',
                        help='Text to detect and translate; quote it if it contains spaces. '
                             'When several are given, the last one is used.')
    parser.add_argument('-h', '--help', action='store_true', dest='show_help',
                        help='Show this help message and exit')
    parser.add_argument('-v', '--version', action='store_true', dest='show_version',
                        help='Show version information and exit')
    parser.add_argument('--detect-lang', action='store_true', dest='detect_only',
                        help='Only detect the language of the text, do not translate it')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging and print full tracebacks')
    return parser


def parse_arguments(argv: Sequence[str]) -> ParsedArguments:
    """
    Parse the process arguments.

    The text is the last argument that does not start with "-". Options are
    matched exactly; anything else starting with "-" is ignored, so malformed
    flags such as "-vx" or "--detect-lang=1" never end the process.

    Args:
        argv: Arguments without the program name

    Returns:
        Parsed flags and text (None when no text was given)
    """
    flags = {arg for arg in argv if arg.startswith('-')}
    candidates = [arg for arg in argv if not arg.startswith('-')]

    return ParsedArguments(
        show_help=bool(flags & HELP_FLAGS),
        show_version=bool(flags & VERSION_FLAGS),
        detect_only=DETECT_FLAG in flags,
        verbose=VERBOSE_FLAG in flags,
        text=candidates[-1] if candidates else None
    )
