"""Display domain configuration: field namespaces, view settings, accessors."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from DocPresenter.config.common import (
    expect_bool,
    expect_mapping,
    expect_optional_str,
    expect_str,
    expect_str_list,
    expect_str_or_str_list,
    get_optional_value,
    get_required_value,
    get_section,
)
from DocPresenter.core.fields import (
    ENGLISH,
    AccessorNotFoundError,
    AccessorRegistry,
    Connectors,
    FieldConfig,
    import_callable,
)
from DocPresenter.utils.log import log

_FIELD_OPTION_KEYS = {
    "key",
    "field",
    "label",
    "helper_method",
    "link_to_facet",
    "highlight",
    "accessor",
    "separator",
    "enabled",
    "options",
}
_CONNECTOR_KEYS = ("words_connector", "two_words_connector", "last_word_connector")


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """Per-view settings.

    Attributes:
        title_field: Candidate fields for the page heading, in order.
        html_title_field: Candidate fields for the HTML ``<title>``, in order.
    """

    title_field: tuple[str, ...] = ()
    html_title_field: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AlternatesConfig:
    """Defaults for alternate-link generation."""

    unique: bool = False
    exclude: tuple[str, ...] = ()


class DisplayConfig:
    """Field configuration for presenting documents.

    Field namespaces (``show_fields``, ``index_fields``, ``facet_fields``) are
    ordered by insertion. Fields are added during setup, then only read.
    """

    def __init__(
        self,
        *,
        show: ViewConfig | None = None,
        index: ViewConfig | None = None,
        separator: Connectors = ENGLISH,
        alternates: AlternatesConfig | None = None,
        accessors: AccessorRegistry | None = None,
        helpers: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        self.show = show or ViewConfig()
        self.index = index or ViewConfig()
        self.separator = separator
        self.alternates = alternates or AlternatesConfig()
        self.accessors = accessors if accessors is not None else AccessorRegistry()
        self.helpers: Mapping[str, Callable[..., Any]] = MappingProxyType(dict(helpers or {}))
        self._show_fields: dict[str, FieldConfig] = {}
        self._index_fields: dict[str, FieldConfig] = {}
        self._facet_fields: dict[str, FieldConfig] = {}

    @property
    def show_fields(self) -> Mapping[str, FieldConfig]:
        return MappingProxyType(self._show_fields)

    @property
    def index_fields(self) -> Mapping[str, FieldConfig]:
        return MappingProxyType(self._index_fields)

    @property
    def facet_fields(self) -> Mapping[str, FieldConfig]:
        return MappingProxyType(self._facet_fields)

    def add_show_field(self, key: str, **options: Any) -> FieldConfig:
        """Add a field to the show view; see `FieldConfig` for options."""
        return _add_field(self._show_fields, key, options)

    def add_index_field(self, key: str, **options: Any) -> FieldConfig:
        """Add a field to the index (results list) view."""
        return _add_field(self._index_fields, key, options)

    def add_facet_field(self, key: str, **options: Any) -> FieldConfig:
        """Add a facet field."""
        return _add_field(self._facet_fields, key, options)

    def connectors_for(self, field_config: FieldConfig) -> Connectors:
        return field_config.separator or self.separator


def _add_field(namespace: dict[str, FieldConfig], key: str, options: Mapping[str, Any]) -> FieldConfig:
    field_config = FieldConfig(key=key, **options)
    if key in namespace:
        log.warning("Field %s redefined", key)
    namespace[key] = field_config
    return field_config


def load_display(raw: Mapping[str, Any]) -> DisplayConfig:
    """Load display configuration from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed display configuration with accessors and helpers imported.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing, fields are duplicated, or an
            accessor or helper import path cannot be loaded.
    """
    section = get_section(raw, "display", required=True)
    alternates = get_section(section, "alternates", required=False)

    config = DisplayConfig(
        show=_load_view(section, "show"),
        index=_load_view(section, "index"),
        separator=_load_connectors(
            get_optional_value(section, "separator", {}), "display.separator", ENGLISH
        ),
        alternates=AlternatesConfig(
            unique=expect_bool(get_optional_value(alternates, "unique", False), "display.alternates.unique"),
            exclude=tuple(
                expect_str_list(get_optional_value(alternates, "exclude", []), "display.alternates.exclude")
            ),
        ),
        accessors=_load_accessors(get_optional_value(section, "accessors", {})),
        helpers=_load_helpers(get_optional_value(section, "helpers", {})),
    )

    for namespace, add in (
        ("show_fields", config.add_show_field),
        ("index_fields", config.add_index_field),
        ("facet_fields", config.add_facet_field),
    ):
        entries = get_optional_value(section, namespace, [])
        if not isinstance(entries, list):
            raise TypeError(f"display.{namespace} must be a list")
        seen: set[str] = set()
        for idx, entry in enumerate(entries):
            config_key = f"display.{namespace}[{idx}]"
            key, options = _load_field(entry, config_key)
            if key in seen:
                raise ValueError(f"{config_key}.key duplicates field {key!r}")
            seen.add(key)
            add(key, **options)
    return config


def check_display(config: DisplayConfig) -> None:
    """Validate display domain constraints.

    Raises:
        ValueError: If a field references an accessor or helper that is not registered.
    """
    for namespace, fields in (
        ("show_fields", config.show_fields),
        ("index_fields", config.index_fields),
        ("facet_fields", config.facet_fields),
    ):
        for key, field_config in fields.items():
            config_key = f"display.{namespace}.{key}"
            for name in _accessor_names(field_config):
                if name not in config.accessors:
                    raise ValueError(f"{config_key}.accessor references unknown accessor {name!r}")
            if field_config.helper_method and field_config.helper_method not in config.helpers:
                raise ValueError(f"{config_key}.helper_method references unknown helper {field_config.helper_method!r}")
            facet = field_config.link_to_facet
            if isinstance(facet, str) and facet not in config.facet_fields:
                log.warning("%s.link_to_facet names %r, which is not a configured facet", config_key, facet)


def _accessor_names(field_config: FieldConfig) -> tuple[str, ...]:
    accessor = field_config.accessor
    if accessor is True:
        return (field_config.key,)
    if not accessor:
        return ()
    if isinstance(accessor, str):
        return (accessor,)
    return tuple(accessor)


def _load_view(section: Mapping[str, Any], name: str) -> ViewConfig:
    view = get_section(section, name, required=False)
    config_key = f"display.{name}"
    return ViewConfig(
        title_field=expect_str_or_str_list(get_optional_value(view, "title_field", []), f"{config_key}.title_field"),
        html_title_field=expect_str_or_str_list(
            get_optional_value(view, "html_title_field", []),
            f"{config_key}.html_title_field",
        ),
    )


def _load_connectors(value: Any, config_key: str, default: Connectors) -> Connectors:
    section = expect_mapping(value, config_key)
    unknown = set(section) - set(_CONNECTOR_KEYS)
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")
    return Connectors(
        **{
            name: expect_str(get_optional_value(section, name, getattr(default, name)), f"{config_key}.{name}")
            for name in _CONNECTOR_KEYS
        }
    )


def _load_field(entry: Any, config_key: str) -> tuple[str, dict[str, Any]]:
    if isinstance(entry, str):
        return entry, {}
    section = expect_mapping(entry, config_key)
    unknown = set(section) - _FIELD_OPTION_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    key = expect_str(get_required_value(section, "key", f"{config_key}.key"), f"{config_key}.key")
    if not key.strip():
        raise ValueError(f"{config_key}.key must not be empty")

    options: dict[str, Any] = {}
    for name in ("field", "label"):
        if name in section:
            options[name] = expect_str(section[name], f"{config_key}.{name}")
    if "helper_method" in section:
        options["helper_method"] = expect_optional_str(section["helper_method"], f"{config_key}.helper_method")
    if "link_to_facet" in section:
        link = section["link_to_facet"]
        if not isinstance(link, (bool, str)):
            raise TypeError(f"{config_key}.link_to_facet must be a boolean or a facet key")
        options["link_to_facet"] = link
    for name in ("highlight", "enabled"):
        if name in section:
            options[name] = expect_bool(section[name], f"{config_key}.{name}")
    if "accessor" in section:
        accessor = section["accessor"]
        if isinstance(accessor, bool):
            options["accessor"] = accessor or None
        else:
            names = expect_str_or_str_list(accessor, f"{config_key}.accessor")
            options["accessor"] = names[0] if isinstance(accessor, str) else names
    if "separator" in section:
        options["separator"] = _load_connectors(section["separator"], f"{config_key}.separator", ENGLISH)
    if "options" in section:
        options["options"] = dict(expect_mapping(section["options"], f"{config_key}.options"))
    return key, options


def _load_accessors(value: Any) -> AccessorRegistry:
    """Build the accessor registry.

    Each entry maps a name to either a ``module:function`` import path or an
    object ``{method: <name>, takes_field: <bool>}`` calling a document method.
    """
    section = expect_mapping(value, "display.accessors")
    registry = AccessorRegistry()
    for name, entry in section.items():
        config_key = f"display.accessors.{name}"
        if isinstance(entry, str):
            registry.register(name, _import(entry, config_key))
            continue
        entry = expect_mapping(entry, config_key)
        if "path" in entry:
            takes_field = entry.get("takes_field")
            if takes_field is not None:
                takes_field = expect_bool(takes_field, f"{config_key}.takes_field")
            path = expect_str(entry["path"], f"{config_key}.path")
            registry.register(name, _import(path, f"{config_key}.path"), takes_field=takes_field)
        elif "method" in entry:
            registry.register_method(
                name,
                method_name=expect_str(entry["method"], f"{config_key}.method"),
                takes_field=expect_bool(get_optional_value(entry, "takes_field", False), f"{config_key}.takes_field"),
            )
        else:
            raise ValueError(f"{config_key} must define 'path' or 'method'")
    return registry


def _load_helpers(value: Any) -> dict[str, Callable[..., Any]]:
    section = expect_mapping(value, "display.helpers")
    helpers: dict[str, Callable[..., Any]] = {}
    for name, path in section.items():
        config_key = f"display.helpers.{name}"
        helpers[name] = _import(expect_str(path, config_key), config_key)
    return helpers


def _import(path: str, config_key: str) -> Callable[..., Any]:
    try:
        return import_callable(path)
    except AccessorNotFoundError as exc:
        raise ValueError(f"{config_key}: {exc}") from exc
