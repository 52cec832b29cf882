"""Base classes for output writers.

Separates command control flow from output logic for testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from DocPresenter.renderers.view_models import DocumentView


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_document(self, view: DocumentView) -> None:
        """Write one rendered document.

        Args:
            view: Rendered document.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated documents to file).

        Args:
            action: The CLI command name (e.g., 'show').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_document(self, view: DocumentView) -> None:
        for writer in self.writers:
            writer.write_document(view)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
