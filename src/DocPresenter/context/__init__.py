"""Render context used by presenters to call helpers and build URLs."""

from __future__ import annotations

from DocPresenter.context.render import (
    Helper,
    HelperArguments,
    HelperNotFoundError,
    RenderContext,
    UrlRenderContext,
)
from DocPresenter.context.search_state import SearchState, to_query_string

__all__ = [
    "Helper",
    "HelperArguments",
    "HelperNotFoundError",
    "RenderContext",
    "SearchState",
    "UrlRenderContext",
    "to_query_string",
]
