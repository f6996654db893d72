"""Unit tests for command-line argument parsing."""

from tolgyp.arguments import parse_arguments


def test_detect_lang_with_text() -> None:
    args = parse_arguments(["--detect-lang", "Bonjour le monde"])
    assert args.text == "Bonjour le monde"
    assert args.detect_only is True
    assert args.show_help is False
    assert args.show_version is False


def test_empty_argument_list_has_no_text() -> None:
    args = parse_arguments([])
    assert args.text is None
    assert args.detect_only is False


def test_last_non_flag_argument_wins() -> None:
    args = parse_arguments(["first", "--detect-lang", "second"])
    assert args.text == "second"


def test_flags_only() -> None:
    args = parse_arguments(["--detect-lang"])
    assert args.text is None
    assert args.detect_only is True


def test_help_and_version_flags() -> None:
    assert parse_arguments(["-h"]).show_help is True
    assert parse_arguments(["--help"]).show_help is True
    assert parse_arguments(["-v"]).show_version is True
    assert parse_arguments(["--version"]).show_version is True


def test_unknown_options_are_ignored() -> None:
    args = parse_arguments(["--colour", "Hello world", "-x"])
    assert args.text == "Hello world"


def test_abbreviated_option_is_not_expanded() -> None:
    args = parse_arguments(["--detect", "Hello"])
    assert args.detect_only is False
    assert args.text == "Hello"


def test_blank_text_is_kept_for_the_caller() -> None:
    assert parse_arguments(["   "]).text == "   "


def test_verbose_flag() -> None:
    assert parse_arguments(["--verbose", "Hello"]).verbose is True


def test_bundled_short_flags_are_ignored() -> None:
    args = parse_arguments(["-vx", "Hello"])
    assert args.text == "Hello"
    assert args.show_version is False


def test_option_with_value_is_ignored() -> None:
    args = parse_arguments(["--detect-lang=1", "Hello"])
    assert args.text == "Hello"
    assert args.detect_only is False
