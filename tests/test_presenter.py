"""Unit tests for the console presenter."""

from tests.conftest import output_of
from tolgyp.presenter import Presenter, Severity


def test_messages_are_prefixed(presenter, console) -> None:
    presenter.notice('Translating text: "Hello"')
    assert '[Tolgyp]: Translating text: "Hello"' in output_of(console)


def test_markup_in_messages_is_not_interpreted(presenter, console) -> None:
    presenter.show(Severity.WARNING, "[bold]literal[/bold]")
    assert "[bold]literal[/bold]" in output_of(console)


def test_error_without_exception_leaves_log_untouched(presenter, error_log) -> None:
    presenter.error("Error: no text to translate was given.")
    assert not error_log.exists()


def test_error_with_exception_writes_traceback(presenter, error_log) -> None:
    try:
        raise ValueError("bad input")
    except ValueError as e:
        presenter.error("failed", exc=e)
    content = error_log.read_text(encoding="utf-8")
    assert content.startswith("Traceback")
    assert "ValueError: bad input" in content


def test_unwritable_error_log_does_not_raise(console, tmp_path) -> None:
    presenter = Presenter(console=console, error_log=str(tmp_path / "missing" / "error.log"))
    assert presenter.write_error_log(RuntimeError("boom")) is False
