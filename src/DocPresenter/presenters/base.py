"""Shared presenter behavior for one document in one render context."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

from DocPresenter.config.display import DisplayConfig, ViewConfig
from DocPresenter.context.render import RenderContext
from DocPresenter.core.document import DocumentAccessor
from DocPresenter.core.fields import FieldConfig
from DocPresenter.core.markup import SafeText
from DocPresenter.presenters.formatter import format_value
from DocPresenter.presenters.links import LinkDescriptor, link_rel_alternates, render_link_rel_alternates
from DocPresenter.presenters.resolver import UNSET, FieldValueResolver
from DocPresenter.presenters.titles import resolve_heading, resolve_title


class DocumentPresenter:
    """Present one document for one view.

    Subclasses choose the view settings and the field namespace.
    """

    def __init__(self, document: DocumentAccessor, context: RenderContext, config: DisplayConfig) -> None:
        self.document = document
        self.context = context
        self.config = config
        self.resolver = FieldValueResolver(document, context, config.accessors)

    @property
    def view_config(self) -> ViewConfig:
        raise NotImplementedError

    @property
    def fields(self) -> Mapping[str, FieldConfig]:
        raise NotImplementedError

    def heading(self) -> SafeText:
        """Render the first present ``title_field`` candidate, or the document id."""
        return format_value(resolve_heading(self.document, self.view_config.title_field), self.config.separator)

    def html_title(self) -> SafeText:
        """Render the first present ``html_title_field`` candidate, or the document id."""
        candidates = self.view_config.html_title_field or self.view_config.title_field
        return format_value(resolve_title(self.document, candidates), self.config.separator)

    def field_config(self, field: FieldConfig | str) -> FieldConfig:
        """Look up a field by key in this view's namespace.

        Unconfigured keys get a default configuration.
        """
        if isinstance(field, FieldConfig):
            return field
        return self.fields.get(field) or FieldConfig(key=field)

    def field_values(self, field: FieldConfig | str, value: Any = UNSET, **options: Any) -> Any:
        """Resolve a field's value without formatting it."""
        return self.resolver.resolve(self.field_config(field), value, **options)

    def field_value(self, field: FieldConfig | str, value: Any = UNSET, **options: Any) -> SafeText:
        """Resolve and render a field's value.

        Args:
            field: Field configuration or key.
            value: Explicit value overriding every other strategy.
            **options: Auxiliary options passed to helper methods.

        Returns:
            Markup-safe text; empty when the field has no value.
        """
        field_config = self.field_config(field)
        resolved = self.resolver.resolve(field_config, value, **options)
        return format_value(resolved, self.config.connectors_for(field_config))

    def render_field(self, field: FieldConfig | str) -> bool:
        """Whether a field is enabled and the document has something to show for it."""
        field_config = self.field_config(field)
        return bool(
            self.context.should_render_field(field_config, self.document)
            and self.context.document_has_value(self.document, field_config)
        )

    def fields_to_render(self) -> Iterator[FieldConfig]:
        """Yield this view's fields that should be rendered, in configured order."""
        for field_config in self.fields.values():
            if self.render_field(field_config):
                yield field_config

    def link_rel_alternates(
        self,
        *,
        unique: bool | None = None,
        exclude: Iterable[str] | None = None,
    ) -> list[LinkDescriptor]:
        """Alternate links for the document; defaults come from the display config."""
        return link_rel_alternates(
            self.document,
            self.context,
            unique=self.config.alternates.unique if unique is None else unique,
            exclude=self.config.alternates.exclude if exclude is None else exclude,
        )

    def render_link_rel_alternates(
        self,
        *,
        unique: bool | None = None,
        exclude: Iterable[str] | None = None,
    ) -> SafeText:
        return render_link_rel_alternates(
            self.document,
            self.context,
            unique=self.config.alternates.unique if unique is None else unique,
            exclude=self.config.alternates.exclude if exclude is None else exclude,
        )
