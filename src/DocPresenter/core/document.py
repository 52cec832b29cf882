"""Document capability and the dict-backed index document.

`DocumentAccessor` is the narrow read-only interface the presenters consume.
`IndexDocument` implements it over a plain mapping of index fields, as
returned by a search backend, plus optional highlighting and export formats.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Iterable, Mapping, Protocol, Sequence, runtime_checkable

from DocPresenter.core.markup import SafeText, mark_safe
from DocPresenter.utils.log import log


class DocumentLoadError(RuntimeError):
    """Raised when a document file cannot be read or parsed."""


class UnknownExportFormatError(LookupError):
    """Raised when a document is asked for a format it does not export."""


@dataclass(frozen=True, slots=True)
class ExportFormat:
    """Metadata for one alternate representation of a document.

    Attributes:
        content_type: MIME type of the representation.
    """

    content_type: str


@runtime_checkable
class DocumentAccessor(Protocol):
    """Read-only view of a search-index document."""

    @property
    def id(self) -> Any:  # noqa: A003 - identity field
        ...

    def has(self, field: str) -> bool:
        ...

    def get(self, field: str) -> Any:
        ...

    def get_or_default(self, field: str, default: Any) -> Any:
        ...

    def has_highlight(self, field: str) -> bool:
        ...

    def highlight(self, field: str) -> list[SafeText] | None:
        ...

    def export_formats(self) -> Mapping[str, ExportFormat]:
        ...


Exporter = Callable[["IndexDocument"], Any]
Extension = Callable[["IndexDocument"], None]
ExtensionCondition = Callable[["IndexDocument"], bool]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return all(_is_blank(item) for item in value)
    return False


_WRAPPER_KEYS = frozenset({"fields", "highlighting", "export_formats"})


class IndexDocument:
    """Document backed by a mapping of index fields.

    Field values are stored as given: a scalar or a list of scalars. Highlight
    snippets come from the search backend and are treated as safe markup.

    Extensions registered with `use_extension` run when a document is created
    and typically register export formats via `will_export_as`.
    """

    unique_key: ClassVar[str] = "id"
    _extensions: ClassVar[tuple[tuple[Extension, ExtensionCondition | None], ...]] = ()

    def __init__(
        self,
        fields: Mapping[str, Any] | None = None,
        *,
        highlighting: Mapping[str, Sequence[str]] | None = None,
        **extra_fields: Any,
    ) -> None:
        """Initialize a document.

        Args:
            fields: Index field values.
            highlighting: Highlight snippets per field.
            **extra_fields: Additional field values, merged over ``fields``.
        """
        merged = dict(fields or {})
        merged.update(extra_fields)
        self._fields: Mapping[str, Any] = MappingProxyType(merged)
        self._highlighting: dict[str, list[SafeText]] = {
            key: [mark_safe(snippet) for snippet in as_values(snippets)]
            for key, snippets in (highlighting or {}).items()
        }
        self._export_formats: dict[str, ExportFormat] = {}
        self._exporters: dict[str, Exporter] = {}
        for extension, condition in type(self)._extensions:
            if condition is None or condition(self):
                extension(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"

    def __getitem__(self, field: str) -> Any:
        return self.get(field)

    def __contains__(self, field: object) -> bool:
        return isinstance(field, str) and self.has(field)

    @classmethod
    def use_extension(cls, extension: Extension, condition: ExtensionCondition | None = None) -> None:
        """Register an extension applied to every new document of this class.

        Args:
            extension: Callable receiving the new document.
            condition: Optional predicate; the extension only applies when it
                returns True for the document.
        """
        # Rebinds on cls; a subclass never adds to its parent's extensions.
        cls._extensions = (*cls._extensions, (extension, condition))

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> IndexDocument:
        """Build a document from a JSON-style payload.

        Accepts either a bare field mapping or an object with ``fields``,
        optional ``highlighting`` and optional ``export_formats``
        (format id -> content type). The wrapped form needs ``fields`` to be a
        mapping and no other top-level keys; anything else is a bare document,
        even when it has a field named ``fields``.

        Args:
            payload: Parsed document payload.

        Returns:
            New document.

        Raises:
            DocumentLoadError: If the payload shape is invalid.
        """
        if not isinstance(payload, Mapping):
            raise DocumentLoadError("Document payload must be an object")
        fields = payload.get("fields")
        if not isinstance(fields, Mapping) or not set(payload) <= _WRAPPER_KEYS:
            return cls(payload)

        highlighting = payload.get("highlighting") or {}
        export_formats = payload.get("export_formats") or {}
        if not isinstance(highlighting, Mapping):
            raise DocumentLoadError("document.highlighting must be an object")
        if not isinstance(export_formats, Mapping):
            raise DocumentLoadError("document.export_formats must be an object")

        document = cls(fields, highlighting=highlighting)
        for format_id, content_type in export_formats.items():
            document.will_export_as(format_id, str(content_type))
        return document

    @property
    def id(self) -> Any:  # noqa: A003 - identity field
        return self._fields.get(self.unique_key)

    @property
    def fields(self) -> Mapping[str, Any]:
        return self._fields

    def has(self, field: str, *values: Any) -> bool:
        """Check whether a field holds a non-blank value.

        Args:
            field: Field name.
            *values: When given, at least one stored value must equal one of them.

        Returns:
            True when the field is present (and matches).
        """
        value = self._fields.get(field)
        if _is_blank(value):
            return False
        if not values:
            return True
        return any(item in values for item in as_values(value))

    def get(self, field: str) -> Any:
        return self._fields.get(field)

    def get_or_default(self, field: str, default: Any) -> Any:
        value = self._fields.get(field)
        return default if value is None else value

    def has_highlight(self, field: str) -> bool:
        return bool(self._highlighting.get(field))

    def highlight(self, field: str) -> list[SafeText] | None:
        snippets = self._highlighting.get(field)
        if not snippets:
            return None
        return list(snippets)

    def will_export_as(self, format_id: str, content_type: str | None = None, exporter: Exporter | None = None) -> None:
        """Register an export format for this document.

        Args:
            format_id: Short format identifier (e.g. ``json``).
            content_type: MIME type; defaults to ``application/<format_id>``.
            exporter: Optional callable producing the representation.
        """
        self._export_formats[format_id] = ExportFormat(content_type or f"application/{format_id}")
        if exporter is not None:
            self._exporters[format_id] = exporter
        log.debug("Document %s exports %s as %s", self.id, format_id, self._export_formats[format_id].content_type)

    def export_formats(self) -> Mapping[str, ExportFormat]:
        return MappingProxyType(self._export_formats)

    def exports_as(self, format_id: str) -> bool:
        return format_id in self._export_formats

    def export_as(self, format_id: str) -> Any:
        """Produce the representation registered for ``format_id``.

        Raises:
            UnknownExportFormatError: If the format is not registered or has no exporter.
        """
        exporter = self._exporters.get(format_id)
        if exporter is None:
            raise UnknownExportFormatError(f"Document {self.id!r} cannot be exported as {format_id!r}")
        return exporter(self)


def as_values(value: Any) -> list[Any]:
    """Normalize a raw field value into a list of values."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def load_document(path: Path, document_class: type[IndexDocument] = IndexDocument) -> IndexDocument:
    """Load one document from a JSON file.

    Args:
        path: JSON file path.
        document_class: Document class to instantiate.

    Returns:
        Loaded document.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise DocumentLoadError(f"Failed to read document: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Invalid JSON in document {path}: {exc}") from exc
    return document_class.from_mapping(payload)


def load_documents(paths: Iterable[Path], document_class: type[IndexDocument] = IndexDocument) -> list[IndexDocument]:
    """Load several documents, preserving order."""
    return [load_document(path, document_class) for path in paths]
