"""Markup-safety primitives.

A rendered fragment is either *safe* or *unsafe*:

- ``SafeText`` is the safe variant. Its content is already valid markup
  (escaped text, a highlight snippet, a generated link) and must be emitted
  as-is.
- Any other value is the unsafe variant. It is converted to text and escaped
  exactly once when it is rendered.

Only the unsafe variant is ever escaped, so escaping is idempotent.
"""

from __future__ import annotations

import html
from typing import Any, Iterable


class SafeText(str):
    """Text that is already safe to embed in HTML."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"SafeText({str.__repr__(self)})"

    def __add__(self, other: Any) -> SafeText | str:
        if isinstance(other, SafeText):
            return SafeText(str.__add__(self, other))
        return str.__add__(self, other)


def is_safe(value: Any) -> bool:
    """Return True when ``value`` is the safe variant."""
    return isinstance(value, SafeText)


def mark_safe(value: Any) -> SafeText:
    """Flag ``value`` as safe without escaping it.

    Args:
        value: Trusted markup.

    Returns:
        The same content as ``SafeText``.
    """
    if isinstance(value, SafeText):
        return value
    return SafeText("" if value is None else str(value))


def escape(value: Any) -> SafeText:
    """Escape an unsafe value; return safe values unchanged.

    Args:
        value: Value to render. ``None`` renders as empty text.

    Returns:
        Safe text.
    """
    if isinstance(value, SafeText):
        return value
    if value is None:
        return SafeText("")
    return SafeText(html.escape(str(value), quote=True))


def safe_join(values: Iterable[Any], separator: Any = "") -> SafeText:
    """Escape each value and the separator independently, then join.

    Args:
        values: Fragments to join.
        separator: Separator placed between fragments.

    Returns:
        Joined safe text.
    """
    sep = escape(separator)
    return SafeText(sep.join(escape(value) for value in values))
