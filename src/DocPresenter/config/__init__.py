"""Public configuration API for DocPresenter."""

from __future__ import annotations

from DocPresenter.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
    parse_yaml,
)
from DocPresenter.config.display import AlternatesConfig, DisplayConfig, ViewConfig
from DocPresenter.config.output import OutputConfig
from DocPresenter.config.routes import RoutesConfig
from DocPresenter.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AlternatesConfig",
    "AppConfig",
    "DisplayConfig",
    "OutputConfig",
    "RoutesConfig",
    "RuntimeConfig",
    "ViewConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_yaml",
]
