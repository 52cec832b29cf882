"""Search state used to build facet-search links."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Mapping
from urllib.parse import urlencode

from DocPresenter.core.fields import FieldConfig

_RESET_KEYS = ("page", "counter")


class SearchState:
    """Immutable view over the current search parameters.

    Facet constraints are kept under ``params["f"]`` as a mapping of index
    field name to the list of selected values.
    """

    def __init__(
        self,
        params: Mapping[str, Any] | None = None,
        facet_fields: Mapping[str, FieldConfig] | None = None,
    ) -> None:
        self._params: dict[str, Any] = deepcopy(dict(params or {}))
        self._facet_fields: Mapping[str, FieldConfig] = facet_fields or {}

    @property
    def params(self) -> dict[str, Any]:
        return deepcopy(self._params)

    def reset(self, params: Mapping[str, Any] | None = None) -> SearchState:
        """Return a state with the given (default: empty) parameters."""
        return SearchState(params, self._facet_fields)

    def facet_field_name(self, facet_key: str) -> str:
        """Map a facet key to its index field name."""
        facet = self._facet_fields.get(facet_key)
        return facet.field if facet is not None else facet_key

    def add_facet_params(self, facet_key: str, value: Any) -> dict[str, Any]:
        """Return parameters with one more facet constraint applied.

        Paging keys are dropped, since the result set changes.

        Args:
            facet_key: Facet configuration key.
            value: Facet value to constrain on.

        Returns:
            New parameter mapping.
        """
        params = self.params
        for key in _RESET_KEYS:
            params.pop(key, None)
        field_name = self.facet_field_name(facet_key)
        facets = params.setdefault("f", {})
        selected = facets.setdefault(field_name, [])
        if value not in selected:
            selected.append(value)
        return params

    def has_facet(self, facet_key: str, value: Any) -> bool:
        selected = self._params.get("f", {}).get(self.facet_field_name(facet_key), [])
        return value in selected


def to_query_string(params: Mapping[str, Any]) -> str:
    """Encode search parameters as a URL query string.

    Facet constraints are encoded as ``f[<field>][]=<value>``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if key == "f" and isinstance(value, Mapping):
            for field_name, values in value.items():
                pairs.extend((f"f[{field_name}][]", str(item)) for item in values)
        elif isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", str(item)) for item in value)
        elif value is not None:
            pairs.append((key, str(value)))
    return urlencode(pairs)
