"""DocPresenter: field rendering for search-result detail pages."""

from __future__ import annotations

__version__ = "0.1.0"
