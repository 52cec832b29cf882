"""Presenter for a document's detail (show) page."""

from __future__ import annotations

from typing import Mapping

from DocPresenter.config.display import ViewConfig
from DocPresenter.core.fields import FieldConfig
from DocPresenter.presenters.base import DocumentPresenter


class ShowPresenter(DocumentPresenter):
    """Uses ``config.show`` and the show fields."""

    @property
    def view_config(self) -> ViewConfig:
        return self.config.show

    @property
    def fields(self) -> Mapping[str, FieldConfig]:
        return self.config.show_fields
