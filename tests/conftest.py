import pytest

from helpdoc import _fmtlib


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Render for a fixed-width terminal without styling, unless a test opts in."""
    monkeypatch.setattr(_fmtlib, "_FORCE_ANSI", False)
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setenv("TERM", "dumb")
