"""Presenter for a document within a result list."""

from __future__ import annotations

from typing import Mapping

from DocPresenter.config.display import ViewConfig
from DocPresenter.core.fields import FieldConfig
from DocPresenter.core.markup import SafeText
from DocPresenter.presenters.base import DocumentPresenter


class IndexPresenter(DocumentPresenter):
    """Uses ``config.index`` and the index fields."""

    @property
    def view_config(self) -> ViewConfig:
        return self.config.index

    @property
    def fields(self) -> Mapping[str, FieldConfig]:
        return self.config.index_fields

    def label(self) -> SafeText:
        """Link text for the document in a result list."""
        return self.heading()
