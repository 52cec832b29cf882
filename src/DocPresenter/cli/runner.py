"""Command runner coordinating CLI execution.

Handles logging configuration, component creation, and error handling at the
command boundary.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from DocPresenter.cli.commands import PresentCommand
from DocPresenter.config import AppConfig
from DocPresenter.core.document import load_documents
from DocPresenter.renderers import create_output_writer
from DocPresenter.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def run_present(self, action: str, paths: Sequence[Path], *, view: str = "show") -> None:
        """Load documents and present them.

        Args:
            action: The CLI command name (e.g., 'show').
            paths: Document JSON files.
            view: Presenter type, ``show`` or ``index``.

        Raises:
            click.Abort: When presenting fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            documents = load_documents(paths)
            output_writer = create_output_writer(self.config.output)
            command = PresentCommand(config=self.config, output_writer=output_writer, view=view)
            command.execute(documents)
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e
