"""Command implementations for the DocPresenter CLI.

Business logic for commands, separated from CLI parameter handling and output
formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from DocPresenter.config import AppConfig
from DocPresenter.context.render import RenderContext, UrlRenderContext
from DocPresenter.core.document import DocumentAccessor
from DocPresenter.presenters.base import DocumentPresenter
from DocPresenter.presenters.index import IndexPresenter
from DocPresenter.presenters.show import ShowPresenter
from DocPresenter.renderers import OutputWriter
from DocPresenter.renderers.mapper import map_presenter_to_view
from DocPresenter.utils.log import log

PRESENTERS: dict[str, type[DocumentPresenter]] = {
    "show": ShowPresenter,
    "index": IndexPresenter,
}


def build_render_context(config: AppConfig) -> UrlRenderContext:
    """Create a fresh render context for one request."""
    return UrlRenderContext(
        config.routes,
        helpers=config.display.helpers,
        facet_fields=config.display.facet_fields,
    )


@dataclass(slots=True)
class PresentCommand:
    """Render documents with one presenter type and hand them to the writer."""

    config: AppConfig
    output_writer: OutputWriter
    view: str = "show"
    context_factory: Callable[[AppConfig], RenderContext] = build_render_context

    def execute(self, documents: Sequence[DocumentAccessor]) -> None:
        """Present every document in order.

        Each document gets its own render context and presenter.

        Raises:
            ValueError: If ``view`` is not a known presenter.
        """
        presenter_class = PRESENTERS.get(self.view)
        if presenter_class is None:
            raise ValueError(f"Unknown view: {self.view}")

        for idx, document in enumerate(documents, start=1):
            log.debug("Presenting document %d/%d id=%s", idx, len(documents), document.id)
            presenter = presenter_class(document, self.context_factory(self.config), self.config.display)
            self.output_writer.write_document(map_presenter_to_view(presenter))
        log.info("Presented %d document(s)", len(documents))
