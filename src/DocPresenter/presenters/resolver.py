"""Field value resolution.

A field's display value comes from exactly one strategy, picked in a fixed
priority order:

1. ``EXPLICIT_VALUE``    the caller passed a value
2. ``HELPER_METHOD``     a render-context helper produces it
3. ``LINK_TO_FACET``     each raw value becomes a facet-search link
4. ``HIGHLIGHT``         highlight snippets (never the raw value)
5. ``EXPLICIT_ACCESSOR`` a named accessor, or a chain of them
6. ``GENERIC_ACCESSOR``  the accessor named after the field key
7. ``RAW_LOOKUP``        the raw index value

The first strategy that applies decides the outcome. When it finds nothing
the result is None, which renders as empty text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Mapping

from DocPresenter.context.render import HelperArguments, RenderContext
from DocPresenter.core.document import DocumentAccessor, as_values
from DocPresenter.core.fields import AccessorRegistry, FieldConfig
from DocPresenter.core.markup import mark_safe
from DocPresenter.utils.log import log


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class Strategy(str, Enum):
    """Value resolution strategies, in priority order."""

    EXPLICIT_VALUE = "explicit_value"
    HELPER_METHOD = "helper_method"
    LINK_TO_FACET = "link_to_facet"
    HIGHLIGHT = "highlight"
    EXPLICIT_ACCESSOR = "explicit_accessor"
    GENERIC_ACCESSOR = "generic_accessor"
    RAW_LOOKUP = "raw_lookup"


_CHECKS: tuple[tuple[Strategy, Callable[[FieldConfig], bool]], ...] = (
    (Strategy.HELPER_METHOD, lambda config: bool(config.helper_method)),
    (Strategy.LINK_TO_FACET, lambda config: bool(config.link_to_facet)),
    (Strategy.HIGHLIGHT, lambda config: bool(config.highlight)),
    (Strategy.EXPLICIT_ACCESSOR, lambda config: bool(config.accessor) and config.accessor is not True),
    (Strategy.GENERIC_ACCESSOR, lambda config: config.accessor is True),
)


def select_strategy(field_config: FieldConfig, value: Any = UNSET) -> Strategy:
    """Pick the strategy that resolves ``field_config``.

    Args:
        field_config: Field configuration.
        value: Explicit value, or ``UNSET``.

    Returns:
        The first applicable strategy.
    """
    if value is not UNSET:
        return Strategy.EXPLICIT_VALUE
    for strategy, applies in _CHECKS:
        if applies(field_config):
            return strategy
    return Strategy.RAW_LOOKUP


class FieldValueResolver:
    """Resolve field values for one document within one render context."""

    def __init__(
        self,
        document: DocumentAccessor,
        context: RenderContext,
        accessors: AccessorRegistry | None = None,
    ) -> None:
        self.document = document
        self.context = context
        self.accessors = accessors if accessors is not None else AccessorRegistry()
        self._handlers: Mapping[Strategy, Callable[[FieldConfig, Any, Mapping[str, Any]], Any]] = {
            Strategy.EXPLICIT_VALUE: self._explicit_value,
            Strategy.HELPER_METHOD: self._helper_method,
            Strategy.LINK_TO_FACET: self._link_to_facet,
            Strategy.HIGHLIGHT: self._highlight,
            Strategy.EXPLICIT_ACCESSOR: self._explicit_accessor,
            Strategy.GENERIC_ACCESSOR: self._generic_accessor,
            Strategy.RAW_LOOKUP: self._raw_lookup,
        }

    def resolve(self, field_config: FieldConfig, value: Any = UNSET, **options: Any) -> Any:
        """Resolve the display value of a field.

        Args:
            field_config: Field configuration.
            value: Explicit value overriding every other strategy.
            **options: Auxiliary options passed to helper methods.

        Returns:
            A scalar, a list of scalars, or None.

        Raises:
            AccessorNotFoundError: If the field names an unknown accessor.
            HelperNotFoundError: If the field names an unknown helper.
        """
        strategy = select_strategy(field_config, value)
        log.debug("Resolving %s via %s", field_config.key, strategy.value)
        return self._handlers[strategy](field_config, value, options)

    def retrieve_values(self, field_config: FieldConfig) -> list[Any]:
        """Retrieve a field's values, ignoring helper and link settings.

        Uses the first applicable of the highlight, accessor and raw lookup
        strategies.
        """
        if field_config.highlight:
            found = self._highlight(field_config, UNSET, {})
        elif field_config.accessor is True:
            found = self._generic_accessor(field_config, UNSET, {})
        elif field_config.accessor:
            found = self._explicit_accessor(field_config, UNSET, {})
        else:
            found = self._raw_lookup(field_config, UNSET, {})
        return as_values(found)

    def helper_arguments(self, field_config: FieldConfig, **options: Any) -> HelperArguments:
        """Build the argument record passed to a helper method."""
        merged = dict(field_config.options)
        merged.update(options)
        return HelperArguments(
            document=self.document,
            field=field_config.key,
            config=field_config,
            value=self.retrieve_values(field_config),
            options=merged,
        )

    def _explicit_value(self, field_config: FieldConfig, value: Any, options: Mapping[str, Any]) -> Any:
        del field_config, options
        return value

    def _helper_method(self, field_config: FieldConfig, value: Any, options: Mapping[str, Any]) -> Any:
        del value
        arguments = self.helper_arguments(field_config, **options)
        return self.context.call_helper(str(field_config.helper_method), arguments)

    def _link_to_facet(self, field_config: FieldConfig, value: Any, options: Mapping[str, Any]) -> Any:
        del value, options
        values = as_values(self.document.get(field_config.field))
        if not values:
            return None
        link_to_facet = field_config.link_to_facet
        facet_key = link_to_facet if isinstance(link_to_facet, str) else field_config.key
        return [
            self.context.link_to(item, self.context.search_action_path(facet_key, item))
            for item in values
        ]

    def _highlight(self, field_config: FieldConfig, value: Any, options: Mapping[str, Any]) -> Any:
        del value, options
        snippets = self.document.highlight(field_config.field)
        if not snippets:
            return None
        return [mark_safe(snippet) for snippet in snippets]

    def _explicit_accessor(self, field_config: FieldConfig, value: Any, options: Mapping[str, Any]) -> Any:
        del value, options
        return self.accessors.invoke(field_config.accessor, self.document, field_config.key)

    def _generic_accessor(self, field_config: FieldConfig, value: Any, options: Mapping[str, Any]) -> Any:
        del value, options
        return self.accessors.invoke(field_config.key, self.document, field_config.key)

    def _raw_lookup(self, field_config: FieldConfig, value: Any, options: Mapping[str, Any]) -> Any:
        del value, options
        return self.document.get(field_config.field)
