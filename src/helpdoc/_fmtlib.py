"""_fmtlib is helpdoc's internal API for wrapping and styling ANSI-formatted text."""

from __future__ import annotations

import functools
import os
import re
import shutil
import sys
from typing import Literal

import termcolor

from . import _settings, _strings

AnsiAttribute = Literal["bold", "dark", "underline"]

_FORCE_ANSI: bool = False
_RESET = "\033[0m"


def ansi_enabled() -> bool:
    """Should styling codes be written to the output?"""
    return _settings._experimental_options["ansi_codes"] and (
        _FORCE_ANSI
        or (sys.stdout.isatty() and os.environ.get("TERM") not in (None, "dumb"))
    )


def style(text: str, *attrs: AnsiAttribute) -> str:
    if not ansi_enabled() or len(attrs) == 0:
        return text
    return termcolor.colored(text, attrs=list(attrs), force_color=True)


def terminal_width() -> int:
    """Width of the terminal we're rendering for.

    `COLUMNS` takes priority; non-interactive output is laid out for 80 columns,
    and real terminals are never treated as narrower than 40."""
    columns = os.environ.get("COLUMNS", "")
    if columns.isdigit() and int(columns) > 0:
        return int(columns)
    if not sys.stdout.isatty():
        return 80
    width = shutil.get_terminal_size().columns
    if width < 1:
        return 80
    return max(width, 40)


@functools.lru_cache(maxsize=None)
def _get_sgr_pattern() -> re.Pattern:
    return re.compile(r"\x1B\[([0-9;]*)m")


def _carry_styles(rows: list[str]) -> list[str]:
    """Close styles that are still open at the end of a row, and re-open them at
    the start of the next one."""
    out: list[str] = []
    active: list[str] = []
    for i, row in enumerate(rows):
        prefix = "".join(active)
        for match in _get_sgr_pattern().finditer(row):
            if match.group(1) in ("", "0"):
                active.clear()
            else:
                active.append(match.group(0))
        suffix = _RESET if len(active) > 0 and i < len(rows) - 1 else ""
        out.append(prefix + row + suffix)
    return out


def _wrap_line(line: str, width: int, trim: bool) -> list[str]:
    if trim:
        line = line.strip()

    rows = [""]
    row_width = 0
    for i, word in enumerate(line.split(" ")):
        word_width = _strings.display_width(word)
        if i == 0:
            rows[-1] = word
            row_width = word_width
        elif row_width + 1 + word_width <= width:
            rows[-1] += " " + word
            row_width += 1 + word_width
        elif word == "":
            # Whitespace at a break point is dropped.
            continue
        elif rows[-1].strip() == "":
            # Words that can't fit anywhere go on their own (over-long) row.
            rows[-1] = word
            row_width = word_width
        else:
            rows.append(word)
            row_width = word_width

    if trim:
        rows = [row.rstrip() for row in rows]
    if len(rows) > 1:
        rows = _carry_styles(rows)
    return rows


def wrap(text: str, max_width: int, trim: bool = True) -> str:
    """Hard-wrap `text` so no line is wider than `max_width` columns.

    Lines are only broken at spaces; a single word wider than `max_width` is
    placed on its own line instead of being split. When `trim` is False,
    whitespace that doesn't sit at a break point is preserved. A non-positive
    `max_width` disables wrapping."""
    if max_width <= 0:
        return text
    return "\n".join(
        row for line in text.split("\n") for row in _wrap_line(line, max_width, trim)
    )
