"""Settings for helpdoc, read from the environment at import time.

These may change or be removed in future versions.
"""

from __future__ import annotations

import os
from typing import Any

from typing_extensions import TypedDict

_TRUE_STRINGS = ("1", "true", "yes", "on")
_FALSE_STRINGS = ("0", "false", "no", "off")


class ExperimentalOptionsDict(TypedDict):
    """Options for helpdoc rendering.

    Attributes:
        ansi_codes: Allow ANSI styling in screen output. Styling is still only
            emitted when stdout is a terminal.
        compact_line_limit: Maximum number of wrapped description lines a row
            may take up before a two-column list falls back to stacked layout.
    """

    ansi_codes: bool
    compact_line_limit: int


def read_option(str_name: str, typ: Any, default: Any) -> Any:
    if str_name not in os.environ:
        return default

    value = os.environ[str_name].strip()
    if typ is bool:
        if value.lower() in _TRUE_STRINGS:
            return True
        if value.lower() in _FALSE_STRINGS:
            return False
        raise ValueError(
            f"{str_name}={value} is not a boolean, expected one of"
            f" {_TRUE_STRINGS + _FALSE_STRINGS}"
        )
    if typ is int:
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{str_name}={value} is not an integer") from None
    return typ(value)


# Global options dictionary.
_experimental_options: ExperimentalOptionsDict = {
    "ansi_codes": read_option("PYTHON_HELPDOC_ANSI_CODES", bool, True),
    "compact_line_limit": read_option("PYTHON_HELPDOC_COMPACT_LINE_LIMIT", int, 4),
}
