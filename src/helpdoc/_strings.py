"""Utilities for measuring and reshaping strings that may contain ANSI codes."""

from __future__ import annotations

import functools
import re

from rich.cells import cell_len


@functools.lru_cache(maxsize=None)
def _get_ansi_pattern() -> re.Pattern:
    # https://stackoverflow.com/a/14693789
    return re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")


@functools.lru_cache(maxsize=None)
def _get_control_pattern() -> re.Pattern:
    return re.compile(r"[\x00-\x1f\x7f]")


def strip_ansi_sequences(x: str) -> str:
    return _get_ansi_pattern().sub("", x)


def display_width(x: str) -> int:
    """Number of terminal columns occupied by `x`.

    Escape sequences and control characters are zero-width; wide characters
    (CJK, most emoji) count as two columns."""
    visible = _get_control_pattern().sub("", strip_ansi_sequences(x))
    return cell_len(visible)


def max_line_width(x: str) -> int:
    """Display width of the widest line in `x`."""
    return max((display_width(line) for line in x.split("\n")), default=0)


def indent(x: str, count: int) -> str:
    """Indent each non-blank line of `x` by `count` spaces."""
    prefix = " " * count
    return "\n".join(
        prefix + line if line.strip() != "" else line for line in x.split("\n")
    )
