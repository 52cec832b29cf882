"""Field configuration entries and the accessor registry."""

from __future__ import annotations

import dataclasses
import importlib
import inspect
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Sequence

from DocPresenter.utils.log import log


class AccessorNotFoundError(LookupError):
    """Raised when a field names an accessor that cannot be invoked."""


@dataclass(frozen=True, slots=True)
class Connectors:
    """Words used to join multi-valued fields into one sentence.

    Attributes:
        words_connector: Between all but the last two items.
        two_words_connector: Between exactly two items.
        last_word_connector: Before the last of three or more items.
    """

    words_connector: str = ", "
    two_words_connector: str = " and "
    last_word_connector: str = ", and "


ENGLISH = Connectors()


@dataclass(frozen=True, slots=True)
class FieldConfig:
    """Rendering policy for one document field.

    Attributes:
        key: Configuration key, also the default index field name.
        field: Index field name; defaults to ``key``.
        label: Display label; defaults to a title-cased ``key``.
        helper_method: Name of a render-context helper producing the value.
        link_to_facet: True to link each value to a search on this field's
            facet, or the key of another facet to constrain instead.
        highlight: Read the value from highlighting instead of the raw field.
        accessor: True to call the accessor named ``key``, an accessor name,
            or a sequence of names invoked as a chain.
        separator: Connectors overriding the display default for this field.
        enabled: When False the field is never rendered.
        options: Auxiliary options passed through to helper methods.
    """

    key: str
    field: str = ""
    label: str = ""
    helper_method: str | None = None
    link_to_facet: bool | str = False
    highlight: bool = False
    accessor: bool | str | tuple[str, ...] | None = None
    separator: Connectors | None = None
    enabled: bool = True
    options: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.field:
            object.__setattr__(self, "field", self.key)
        if not self.label:
            object.__setattr__(self, "label", self.key.replace("_", " ").title())
        if isinstance(self.accessor, list):
            object.__setattr__(self, "accessor", tuple(self.accessor))
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


@dataclass(frozen=True, slots=True)
class Accessor:
    """A registered accessor.

    Attributes:
        name: Identifier used in field configuration.
        func: Callable receiving the target object, plus the field key when
            ``takes_field`` is True.
        takes_field: Whether the field key is passed as a second argument.
    """

    name: str
    func: Callable[..., Any]
    takes_field: bool = False

    def __call__(self, target: Any, field_key: str) -> Any:
        if self.takes_field:
            return self.func(target, field_key)
        return self.func(target)


def _required_positional_count(func: Callable[..., Any]) -> int:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 1
    kinds = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in kinds and param.default is inspect.Parameter.empty
    )


def document_method(method_name: str, *, takes_field: bool = False) -> Callable[..., Any]:
    """Build an accessor function calling a method on the target object.

    Args:
        method_name: Method name looked up on the target.
        takes_field: Whether the method receives the field key.

    Returns:
        Function suitable for `AccessorRegistry.register`.
    """

    def call(target: Any, *args: Any) -> Any:
        method = getattr(target, method_name, None)
        if method is None or not callable(method):
            raise AccessorNotFoundError(f"{type(target).__name__} has no method {method_name!r}")
        return method(*args)

    if takes_field:
        return lambda target, field_key: call(target, field_key)
    return lambda target: call(target)


def import_callable(path: str) -> Callable[..., Any]:
    """Import a callable from a ``module:attribute`` path.

    Raises:
        AccessorNotFoundError: If the module or attribute cannot be loaded.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise AccessorNotFoundError(f"Import path must look like 'module:function': {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise AccessorNotFoundError(f"Cannot import module {module_name!r}") from exc
    func = getattr(module, attr, None)
    if func is None or not callable(func):
        raise AccessorNotFoundError(f"{module_name!r} has no callable {attr!r}")
    return func


class AccessorRegistry:
    """Named accessors, resolved when configuration is loaded.

    The arity of each accessor is recorded at registration: a function with
    one required positional parameter receives only the target, one with two
    also receives the field key.
    """

    def __init__(self) -> None:
        self._accessors: dict[str, Accessor] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._accessors

    def __iter__(self) -> Iterator[str]:
        return iter(self._accessors)

    def __len__(self) -> int:
        return len(self._accessors)

    def register(self, name: str, func: Callable[..., Any], *, takes_field: bool | None = None) -> Accessor:
        """Register an accessor.

        Args:
            name: Identifier used in field configuration.
            func: Accessor function.
            takes_field: Override the arity detected from ``func``'s signature.

        Returns:
            The registered accessor.
        """
        if takes_field is None:
            takes_field = _required_positional_count(func) >= 2
        accessor = Accessor(name=name, func=func, takes_field=takes_field)
        if name in self._accessors:
            log.warning("Accessor %s re-registered", name)
        self._accessors[name] = accessor
        return accessor

    def register_method(self, name: str, *, method_name: str | None = None, takes_field: bool = False) -> Accessor:
        """Register an accessor that calls a method on the target object."""
        func = document_method(method_name or name, takes_field=takes_field)
        return self.register(name, func, takes_field=takes_field)

    def get(self, name: str) -> Accessor:
        """Return a registered accessor.

        Raises:
            AccessorNotFoundError: If ``name`` is not registered.
        """
        accessor = self._accessors.get(name)
        if accessor is None:
            raise AccessorNotFoundError(f"Unknown accessor: {name}")
        return accessor

    def invoke(self, names: str | Sequence[str], target: Any, field_key: str) -> Any:
        """Invoke one accessor, or a chain of accessors, on ``target``.

        Each accessor in a chain receives the previous result. A ``None``
        result ends the chain.

        Args:
            names: Accessor name or ordered names.
            target: Object passed to the first accessor (the document).
            field_key: Configured field key.

        Returns:
            Result of the last accessor, or None.

        Raises:
            AccessorNotFoundError: If any name is not registered.
        """
        chain = (names,) if isinstance(names, str) else tuple(names)
        accessors = [self.get(name) for name in chain]
        result = target
        for accessor in accessors:
            result = accessor(result, field_key)
            if result is None:
                log.debug("Accessor %s returned nothing for %s", accessor.name, field_key)
                return None
        return result
