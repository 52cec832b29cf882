"""Render context: helpers, links and URLs needed while presenting a document."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Protocol
from urllib.parse import quote

from DocPresenter.config.routes import RoutesConfig
from DocPresenter.context.search_state import SearchState, to_query_string
from DocPresenter.core.document import DocumentAccessor
from DocPresenter.core.fields import FieldConfig
from DocPresenter.core.markup import SafeText, escape
from DocPresenter.utils.log import log


class HelperNotFoundError(LookupError):
    """Raised when a field names a helper the render context does not know."""


@dataclass(frozen=True, slots=True)
class HelperArguments:
    """Everything a helper method receives about the field it renders.

    Attributes:
        document: Document being presented.
        field: Field configuration key.
        config: Field configuration.
        value: Raw values retrieved for the field.
        options: Auxiliary options (field options merged with call options).
    """

    document: DocumentAccessor
    field: str
    config: FieldConfig
    value: list[Any]
    options: Mapping[str, Any]

    def to_mapping(self) -> dict[str, Any]:
        """Flatten into one mapping; the fixed keys win over options."""
        merged = dict(self.options)
        merged.update(
            document=self.document,
            field=self.field,
            config=self.config,
            value=self.value,
        )
        return merged


Helper = Callable[[HelperArguments], Any]


class RenderContext(Protocol):
    """Capabilities the presenters need from the enclosing view layer."""

    def call_helper(self, name: str, arguments: HelperArguments) -> Any:
        ...

    def link_to(self, text: Any, href: str) -> Any:
        ...

    def search_action_path(self, facet_key: str, value: Any) -> str:
        ...

    def export_url(self, document: DocumentAccessor, format_id: str) -> str:
        ...

    def should_render_field(self, field_config: FieldConfig, document: DocumentAccessor) -> bool:
        ...

    def document_has_value(self, document: DocumentAccessor, field_config: FieldConfig) -> bool:
        ...


class UrlRenderContext:
    """Render context building URLs from `RoutesConfig`.

    One instance is created per request; it only reads its configuration.
    """

    def __init__(
        self,
        routes: RoutesConfig | None = None,
        *,
        helpers: Mapping[str, Helper] | None = None,
        facet_fields: Mapping[str, FieldConfig] | None = None,
        search_state: SearchState | None = None,
    ) -> None:
        self.routes = routes or RoutesConfig()
        self._helpers: dict[str, Helper] = dict(helpers or {})
        self.search_state = search_state or SearchState(facet_fields=facet_fields)

    @property
    def helpers(self) -> Mapping[str, Helper]:
        return MappingProxyType(self._helpers)

    def register_helper(self, name: str, helper: Helper) -> None:
        self._helpers[name] = helper

    def call_helper(self, name: str, arguments: HelperArguments) -> Any:
        """Call a named helper.

        Raises:
            HelperNotFoundError: If no helper is registered under ``name``.
        """
        helper = self._helpers.get(name)
        if helper is None:
            log.error("Field %s references unknown helper %s", arguments.field, name)
            raise HelperNotFoundError(f"Unknown helper method: {name}")
        return helper(arguments)

    def link_to(self, text: Any, href: str) -> SafeText:
        return SafeText(f'<a href="{escape(href)}">{escape(text)}</a>')

    def search_action_path(self, facet_key: str, value: Any) -> str:
        params = self.search_state.reset().add_facet_params(facet_key, value)
        query = to_query_string(params)
        return f"{self.routes.search_path}?{query}" if query else self.routes.search_path

    def document_path(self, document: DocumentAccessor, format_id: str | None = None) -> str:
        path = self.routes.document_path.format(id=quote(str(document.id), safe=""))
        return f"{path}.{format_id}" if format_id else path

    def export_url(self, document: DocumentAccessor, format_id: str) -> str:
        return f"{self.routes.base_url}{self.document_path(document, format_id)}"

    def should_render_field(self, field_config: FieldConfig, document: DocumentAccessor) -> bool:
        del document
        return field_config.enabled

    def document_has_value(self, document: DocumentAccessor, field_config: FieldConfig) -> bool:
        return bool(
            document.has(field_config.field)
            or (field_config.highlight and document.has_highlight(field_config.field))
            or field_config.accessor
            or field_config.helper_method
        )
