"""Join resolved field values into one markup-safe string."""

from __future__ import annotations

from typing import Any, Sequence

from DocPresenter.core.fields import ENGLISH, Connectors
from DocPresenter.core.markup import SafeText, escape


def to_sentence(values: Sequence[Any], connectors: Connectors = ENGLISH) -> SafeText:
    """Escape each value and join them with list grammar.

    ``[a]`` -> ``a``; ``[a, b]`` -> ``a and b``; ``[a, b, c]`` -> ``a, b, and c``
    (with the default English connectors).

    Args:
        values: Values to join. Safe values are kept as-is, others escaped.
        connectors: Joining words.

    Returns:
        Joined safe text.
    """
    parts = [escape(value) for value in values]
    if not parts:
        return SafeText("")
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return SafeText(escape(connectors.two_words_connector).join(parts))
    head = escape(connectors.words_connector).join(parts[:-1])
    return SafeText(f"{head}{escape(connectors.last_word_connector)}{parts[-1]}")


def format_value(value: Any, connectors: Connectors = ENGLISH) -> SafeText:
    """Render a resolved value.

    Args:
        value: None, a scalar, or a list/tuple of scalars.
        connectors: Joining words for multi-valued results.

    Returns:
        Safe text; empty for absent values.
    """
    if value is None:
        return SafeText("")
    if isinstance(value, (list, tuple)):
        return to_sentence([item for item in value if item is not None], connectors)
    return escape(value)
