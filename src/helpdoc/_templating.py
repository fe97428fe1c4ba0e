"""Named-placeholder substitution for help strings.

Strings like `"$ {{config.bin}} [COMMAND]"` are filled in from a read-only
context. Only dotted lookups are supported; there is no expression evaluation.
"""

from __future__ import annotations

import functools
import re
import warnings
from typing import Any, Mapping

from ._warnings import UnknownPlaceholderWarning

_MISSING = object()


@functools.lru_cache(maxsize=None)
def _get_placeholder_pattern() -> re.Pattern:
    return re.compile(r"\{\{\s*([A-Za-z_]\w*(?:\.[A-Za-z_]\w*)*)\s*\}\}")


def _lookup(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    if key.startswith("_"):
        return _MISSING
    return getattr(obj, key, _MISSING)


def resolve_placeholder(path: str, context: Mapping[str, Any]) -> str:
    """Resolve a dotted path like `config.bin` against `context`."""
    value: Any = context
    for key in path.split("."):
        value = _lookup(value, key)
        if value is _MISSING:
            warnings.warn(
                f"Unknown template placeholder {{{{{path}}}}}, rendering it as an"
                " empty string.",
                category=UnknownPlaceholderWarning,
                stacklevel=3,
            )
            return ""
    return "" if value is None else str(value)


def render_template(template: str | None, context: Mapping[str, Any]) -> str:
    if not template:
        return ""
    return _get_placeholder_pattern().sub(
        lambda match: resolve_placeholder(match.group(1), context), template
    )
