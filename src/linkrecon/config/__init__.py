"""Application configuration helpers."""

from __future__ import annotations

from .apstra import ApstraConfig, get_apstra_config
from .env import optional_env_var, optional_float_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging

__all__ = [
    "ApstraConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_apstra_config",
    "optional_env_var",
    "optional_float_env_var",
    "require_env_vars",
]
