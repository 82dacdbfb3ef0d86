"""Configuration package for Mission Control.

This package provides Pydantic configuration models and loading utilities.
"""

from mission_control.core.config.loader import (
    check_unexpanded_vars,
    expand_env_vars,
    expand_env_vars_recursive,
    load_config,
    load_config_or_default,
)
from mission_control.core.config.models import (
    ApiConfig,
    Config,
    DatabaseConfig,
    LoggingConfig,
)

__all__ = [
    # Models
    "ApiConfig",
    "Config",
    "DatabaseConfig",
    "LoggingConfig",
    # Loaders
    "check_unexpanded_vars",
    "expand_env_vars",
    "expand_env_vars_recursive",
    "load_config",
    "load_config_or_default",
]
