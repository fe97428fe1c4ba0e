import pytest

from helpdoc import _layout, _settings, _strings
from helpdoc._layout import LayoutRow


def test_compact_wraps_under_description_column() -> None:
    rows = [("--force", "Overwrite existing files"), ("-h, --help", "show help")]
    out = _layout.render_list(rows, max_width=24)
    assert out == (
        "--force     Overwrite\n"
        "            existing\n"
        "            files\n"
        "\n"
        "-h, --help  show help"
    )

    lines = out.split("\n")
    assert lines[0].index("Overwrite") == 12
    assert lines[1].index("existing") == 12
    assert lines[4].index("show") == 12


def test_compact_single_lines() -> None:
    rows = [("--force", "Overwrite existing files"), ("-h, --help", "show help")]
    assert _layout.render_list(rows, max_width=40) == (
        "--force     Overwrite existing files\n\n-h, --help  show help"
    )


def test_compact_rows_fit_width() -> None:
    rows = [
        ("-a, --all", "show everything"),
        ("-q", "quiet"),
        ("--output=output", "where to write results"),
    ]
    for line in _layout.render_list(rows, max_width=40).split("\n"):
        assert _strings.display_width(line) <= 40


def test_absent_rows_are_skipped() -> None:
    rows = [(None, None), ("a", "b"), (None, None), ("", "")]
    assert _layout.render_list(rows, max_width=80) == "a  b"
    assert _layout.render_list(rows, max_width=80, multiline=True) == "a\n    b"
    assert _layout.render_list([(None, None)], max_width=80) == ""


def test_empty_list() -> None:
    assert _layout.render_list([], max_width=80) == ""
    assert _layout.render_list([], max_width=80, multiline=True) == ""


def test_label_only_rows_stay_tight() -> None:
    rows = [("Commands:", None), ("run", "run it"), ("stop", "stop it")]
    assert _layout.render_list(rows, max_width=80) == (
        "Commands:\nrun        run it\n\nstop       stop it"
    )


def test_rows_separated_by_blank_lines() -> None:
    assert _layout.render_list([("-a", "x"), ("-b", "y")], max_width=40) == (
        "-a  x\n\n-b  y"
    )
    rows = [("a", "x"), ("b", "long desc here"), ("c", "y")]
    assert _layout.render_list(rows, max_width=10) == (
        "a  x\n\nb  long\n   desc\n   here\n\nc  y"
    )


def test_four_lines_stay_compact() -> None:
    rows = [("-a", "one"), ("--long", "w1 w2 w3 w4")]
    assert _layout.render_list(rows, max_width=12) == (
        "-a      one\n\n--long  w1\n        w2\n        w3\n        w4"
    )


def test_overflow_switches_whole_list_to_stacked() -> None:
    rows = [("-a", "one"), ("--long", "w1 w2 w3 w4 w5")]
    out = _layout.render_list(rows, max_width=12)
    assert out == "-a\n    one\n\n--long\n    w1 w2 w3\n    w4 w5"
    assert out == _layout.render_list(rows, max_width=12, multiline=True)
    assert out == _layout.layout_stacked(
        [LayoutRow(label, description) for label, description in rows], 12
    )


def test_compact_line_limit_is_tunable(monkeypatch: pytest.MonkeyPatch) -> None:
    rows = [("-a", "one"), ("--long", "w1 w2 w3 w4")]
    monkeypatch.setitem(_settings._experimental_options, "compact_line_limit", 2)
    assert _layout.render_list(rows, max_width=12) == (
        "-a\n    one\n\n--long\n    w1 w2 w3\n    w4"
    )


def test_layout_compact_reports_tallest() -> None:
    layout = _layout.layout_compact(
        [LayoutRow("a", "x"), LayoutRow("b", "long desc here"), LayoutRow("c", "")],
        max_width=10,
    )
    assert layout.tallest == 3
    assert layout.text == "a  x\n\nb  long\n   desc\n   here\n\nc"


def test_layout_stacked_partial_rows() -> None:
    rows = [LayoutRow("a", ""), LayoutRow("", "desc"), LayoutRow("", "")]
    assert _layout.layout_stacked(rows, 20) == "a\n\n    desc"


def test_no_room_for_descriptions() -> None:
    assert _layout.render_list([("--flag", "some description")], max_width=0) == (
        "--flag  some description"
    )


def test_strip_ansi() -> None:
    rows = [("\x1b[1m--force\x1b[0m", "\x1b[2mOverwrite\x1b[0m")]
    out = _layout.render_list(rows, max_width=80, strip_ansi=True)
    assert out == "--force  Overwrite"


def test_styled_labels_align_like_plain_labels() -> None:
    styled = [("\x1b[1m-f\x1b[0m", "force"), ("\x1b[1m--help\x1b[0m", "help")]
    plain = [("-f", "force"), ("--help", "help")]
    assert _strings.strip_ansi_sequences(
        _layout.render_list(styled, max_width=80)
    ) == _layout.render_list(plain, max_width=80)


def test_substitute() -> None:
    rows = [("{{name}}", None), ("--x", "{{name}}")]
    out = _layout.render_list(
        rows,
        max_width=80,
        substitute=lambda s: (s or "").replace("{{name}}", "mycli"),
    )
    assert out == "mycli\n--x    mycli"


def test_header_rows_stay_tight_after_wrapped_rows() -> None:
    rows = [("a", "long desc here"), ("Group:", None), ("b", "y")]
    assert _layout.render_list(rows, max_width=10) == (
        "a       long\n        desc\n        here\n\nGroup:\nb       y"
    )


def test_stacked_skips_blank_rows() -> None:
    rows = [("a", "x"), ("   ", None), (None, "  "), ("b", "y")]
    assert _layout.render_list(rows, max_width=40, multiline=True) == (
        "a\n    x\n\nb\n    y"
    )
