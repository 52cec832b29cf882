"""Routes domain configuration (URL shapes used by the render context)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DocPresenter.config.common import expect_str, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class RoutesConfig:
    """URL shapes for generated links.

    Attributes:
        base_url: Absolute prefix for export URLs.
        search_path: Path of the search action.
        document_path: Document path template; ``{id}`` is the document id.
    """

    base_url: str = "http://localhost:3000"
    search_path: str = "/catalog"
    document_path: str = "/catalog/{id}"


def load_routes(raw: Mapping[str, Any]) -> RoutesConfig:
    """Load routes configuration; the section is optional.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed routes configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "routes", required=False)
    defaults = RoutesConfig()
    return RoutesConfig(
        base_url=expect_str(get_optional_value(section, "base_url", defaults.base_url), "routes.base_url").rstrip("/"),
        search_path=expect_str(get_optional_value(section, "search_path", defaults.search_path), "routes.search_path"),
        document_path=expect_str(
            get_optional_value(section, "document_path", defaults.document_path),
            "routes.document_path",
        ),
    )


def check_routes(config: RoutesConfig) -> None:
    """Validate routes constraints.

    Raises:
        ValueError: If a path is malformed.
    """
    if not config.search_path.startswith("/"):
        raise ValueError("routes.search_path must start with '/'")
    if not config.document_path.startswith("/"):
        raise ValueError("routes.document_path must start with '/'")
    if "{id}" not in config.document_path:
        raise ValueError("routes.document_path must contain '{id}'")
