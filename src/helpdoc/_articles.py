"""Data model for help articles."""

from __future__ import annotations

import dataclasses
from typing import Literal, Optional, Sequence, Tuple, Union

PairRow = Tuple[Optional[str], Optional[str]]


@dataclasses.dataclass(frozen=True)
class Prose:
    """A single block of prose."""

    text: str

    def is_empty(self) -> bool:
        return len(self.text) == 0


@dataclasses.dataclass(frozen=True)
class ProseLines:
    """Lines of prose. These are joined with newlines before wrapping."""

    lines: Tuple[str, ...]

    def is_empty(self) -> bool:
        return len(self.lines) == 0


@dataclasses.dataclass(frozen=True)
class PairList:
    """Label/description rows, rendered as a table. Either side can be `None`."""

    rows: Tuple[PairRow, ...]

    def is_empty(self) -> bool:
        return len(self.rows) == 0


SectionBody = Union[Prose, ProseLines, PairList]


def section_body_from_raw(
    raw: SectionBody | str | Sequence[str] | Sequence[Sequence[str | None]],
) -> SectionBody:
    """Convert a loosely-typed body into one of the body variants.

    Accepts a string (prose), a sequence of strings (prose lines), or a sequence
    of `(label, description)` pairs. An empty sequence becomes an empty
    `ProseLines`."""
    if isinstance(raw, (Prose, ProseLines, PairList)):
        return raw
    if isinstance(raw, str):
        return Prose(raw)

    items = tuple(raw)
    if all(isinstance(item, str) for item in items):
        return ProseLines(items)  # type: ignore

    rows: list[PairRow] = []
    for item in items:
        if isinstance(item, str) or len(item) not in (1, 2):
            raise TypeError(
                f"Expected a (label, description) pair in list body, got {item!r}."
            )
        row = tuple(item) + (None,) * (2 - len(item))
        for part in row:
            if part is not None and not isinstance(part, str):
                raise TypeError(
                    f"Expected a string or None in list body, got {part!r}."
                )
        rows.append(row)  # type: ignore
    return PairList(tuple(rows))


@dataclasses.dataclass(frozen=True)
class Section:
    heading: str
    body: SectionBody
    type: Literal["plain", "code"] = "plain"

    def __post_init__(self) -> None:
        if len(self.heading) == 0:
            raise ValueError("Section headings must be non-empty.")
        if self.type not in ("plain", "code"):
            raise ValueError(f"Unknown section type {self.type!r}.")

    @staticmethod
    def from_raw(
        heading: str,
        body: SectionBody | str | Sequence[str] | Sequence[Sequence[str | None]],
        type: Literal["plain", "code"] = "plain",
    ) -> Section:
        return Section(heading, section_body_from_raw(body), type)


@dataclasses.dataclass(frozen=True)
class Article:
    """A titled, ordered collection of help sections."""

    title: Optional[str] = None
    sections: Tuple[Section, ...] = ()


@dataclasses.dataclass(frozen=True)
class HelpOptions:
    format: Literal["markdown", "screen", "man"] = "screen"
    """Output target. `man` is rendered the same way as `screen`."""
    all: bool = False
    """Include hidden commands and flags."""
