"""Heading and title resolution from ordered candidate fields."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from DocPresenter.core.document import DocumentAccessor

Candidates = str | Sequence[str] | None


def candidate_fields(candidates: Candidates) -> tuple[str, ...]:
    """Normalize a candidate setting into an ordered tuple of field names."""
    if candidates is None:
        return ()
    if isinstance(candidates, str):
        return (candidates,) if candidates else ()
    return tuple(candidates)


def resolve_candidates(
    document: DocumentAccessor,
    candidates: Candidates,
    fetch: Callable[[DocumentAccessor, str], Any],
) -> Any:
    """Return the value of the first present candidate field.

    Candidates are checked in order with ``document.has``; the value is read
    with ``fetch``. A fetched None moves on to the next candidate. When no
    candidate yields a value the document id is returned.

    Args:
        document: Document to read.
        candidates: One field name, ordered field names, or None.
        fetch: Reads a field value from the document.

    Returns:
        The first value found, or ``document.id``.
    """
    for field in candidate_fields(candidates):
        if not document.has(field):
            continue
        value = fetch(document, field)
        if value is not None:
            return value
    return document.id


def resolve_heading(document: DocumentAccessor, candidates: Candidates) -> Any:
    return resolve_candidates(document, candidates, lambda doc, field: doc.get(field))


def resolve_title(document: DocumentAccessor, candidates: Candidates) -> Any:
    return resolve_candidates(document, candidates, lambda doc, field: doc.get_or_default(field, None))
