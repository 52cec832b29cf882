"""Console text output.

Renders `DocumentView` objects into human-friendly text written through the
logger.
"""

from __future__ import annotations

from typing import Iterable

from DocPresenter.renderers.base import OutputWriter
from DocPresenter.renderers.view_models import DocumentView
from DocPresenter.utils.log import log


def render_text(views: Iterable[DocumentView]) -> str:
    """Render documents into a readable text block.

    Args:
        views: Rendered documents.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, view in enumerate(views, start=1):
        lines.append(f"{idx}. {view.heading}")
        if view.html_title and view.html_title != view.heading:
            lines.append(f"   Title: {view.html_title}")
        lines.append(f"   Id: {view.id}")
        for field in view.fields:
            lines.append(f"   {field.label}: {field.value}")
        for link in view.alternates:
            lines.append(f"   [{link.title}] {link.content_type} {link.href}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write documents to the console via logging."""

    def write_document(self, view: DocumentView) -> None:
        for line in render_text([view]).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
