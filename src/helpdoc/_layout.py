"""Layout engine for label/description lists.

Lists are first laid out as a two-column table. If any description wraps to too
many lines, the whole list is re-rendered in a stacked format instead, with each
description indented below its label.
"""

from __future__ import annotations

from typing import Callable, NamedTuple, Optional, Sequence, Tuple

from . import _fmtlib, _settings, _strings

STACKED_INDENT = 4
COLUMN_GAP = 2


class LayoutRow(NamedTuple):
    label: str
    description: str


class CompactLayout(NamedTuple):
    text: str
    tallest: int
    """Largest number of wrapped description lines in any row."""


def _compact_row(row: LayoutRow, label_width: int, max_width: int) -> Tuple[str, int]:
    """Returns the rendered row and the number of description lines it uses."""
    if row.description == "":
        return row.label.strip(), 0

    column = label_width + COLUMN_GAP
    lines = [
        line.strip()
        for line in _fmtlib.wrap(
            row.description.strip(), max_width - column, trim=False
        ).split("\n")
    ]
    last_label_line = row.label.split("\n")[-1]
    padding = " " * (label_width - _strings.display_width(last_label_line) + COLUMN_GAP)
    out = (row.label + padding + lines[0]).rstrip()
    if len(lines) > 1:
        out += "\n" + _strings.indent("\n".join(lines[1:]), column)
    return out, len(lines)


def layout_compact(rows: Sequence[LayoutRow], max_width: int) -> CompactLayout:
    """Two-column layout, with descriptions aligned in a shared column.

    Rows are separated by blank lines, except that a row without a description
    stays directly above the row that follows it."""
    label_width = _strings.max_line_width("\n".join(row.label for row in rows))

    out = ""
    tight = False
    tallest = 0
    for row in rows:
        block, height = _compact_row(row, label_width, max_width)
        tallest = max(tallest, height)
        if block == "":
            continue
        if out != "":
            out += "\n" if tight else "\n\n"
        out += block
        tight = height == 0
    return CompactLayout(out, tallest)


def layout_stacked(rows: Sequence[LayoutRow], max_width: int) -> str:
    """Labels on their own lines, with descriptions indented underneath."""
    blocks = []
    for row in rows:
        label, description = row.label.strip(), row.description.strip()
        if label == "" and description == "":
            continue
        parts = []
        if label != "":
            parts.append(_fmtlib.wrap(label, max_width, trim=False))
        if description != "":
            parts.append(
                _strings.indent(
                    _fmtlib.wrap(
                        description,
                        max_width - STACKED_INDENT,
                        trim=False,
                    ),
                    STACKED_INDENT,
                )
            )
        blocks.append("\n".join(parts))
    return "\n\n".join(blocks)


def render_list(
    rows: Sequence[Tuple[Optional[str], Optional[str]]],
    max_width: int,
    *,
    multiline: bool = False,
    strip_ansi: bool = False,
    substitute: Optional[Callable[[Optional[str]], str]] = None,
) -> str:
    """Lay out `(label, description)` pairs in at most `max_width` columns.

    Args:
        rows: Label/description pairs. Either side may be `None`.
        max_width: Width budget, in terminal columns.
        multiline: Skip the two-column attempt and use the stacked layout.
        strip_ansi: Remove styling sequences, for targets that can't show them.
        substitute: Template substitution applied to every label and description.
    """
    if len(rows) == 0:
        return ""

    resolved = []
    for label, description in rows:
        if substitute is not None:
            label, description = substitute(label), substitute(description)
        label, description = label or "", description or ""
        if strip_ansi:
            label = _strings.strip_ansi_sequences(label)
            description = _strings.strip_ansi_sequences(description)
        resolved.append(LayoutRow(label, description))

    if multiline:
        return layout_stacked(resolved, max_width)

    compact = layout_compact(resolved, max_width)
    if compact.tallest > _settings._experimental_options["compact_line_limit"]:
        # One overflowing row is enough to switch the whole list.
        return layout_stacked(resolved, max_width)
    return compact.text
