"""Output writers for rendered documents.

Exports the OutputWriter base class, the console and JSON writers, and a
factory building writers from configuration.
"""

from __future__ import annotations

from DocPresenter.config import OutputConfig
from DocPresenter.renderers.base import MultiOutputWriter, OutputWriter
from DocPresenter.renderers.console import ConsoleOutputWriter, render_text
from DocPresenter.renderers.json import JsonFileWriter, OutputError, render_json


def create_output_writer(config: OutputConfig) -> OutputWriter:
    """Create the output writer for the configured formats.

    Raises:
        ValueError: If no known format is configured.
    """
    writers: list[OutputWriter] = []
    if "console" in config.formats:
        writers.append(ConsoleOutputWriter())
    if "json" in config.formats:
        writers.append(JsonFileWriter(config.base_dir))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "OutputError",
    "OutputWriter",
    "create_output_writer",
    "render_json",
    "render_text",
]
