"""JSON output.

Renders `DocumentView` objects into JSON-serializable mappings and writes them
to a timestamped file on finalize.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable

from DocPresenter.renderers.base import OutputWriter
from DocPresenter.renderers.view_models import DocumentView
from DocPresenter.utils.log import log


class OutputError(RuntimeError):
    """Raised when output cannot be written."""


def render_json(views: Iterable[DocumentView]) -> list[dict]:
    """Render documents into JSON-serializable Python objects."""
    return [
        {
            "id": view.id,
            "heading": view.heading,
            "html_title": view.html_title,
            "fields": [{"key": f.key, "label": f.label, "value": f.value} for f in view.fields],
            "alternates": [
                {"rel": link.rel, "title": link.title, "type": link.content_type, "href": link.href}
                for link in view.alternates
            ],
        }
        for view in views
    ]


class JsonFileWriter(OutputWriter):
    """Accumulate documents and write them to one JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        self.output_dir = Path(base_dir) / "json"
        self.views: list[DocumentView] = []

    def write_document(self, view: DocumentView) -> None:
        self.views.append(view)

    def finalize(self, action: str) -> None:
        """Write accumulated documents to ``<base_dir>/json/<action>_<ts>.json``.

        Raises:
            OutputError: If the directory or file cannot be written.
        """
        if not self.views:
            log.debug("No documents to write as JSON")
            return
        payload = json.dumps(render_json(self.views), ensure_ascii=False, indent=2)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            output_path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Failed to write JSON file: {output_path}") from exc
        log.info("JSON saved to %s", output_path)
