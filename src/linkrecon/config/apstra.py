"""Apstra controller configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from linkrecon.domain.parsing import parse_bool

from .env import optional_env_var, optional_float_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_APSTRA_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class ApstraConfig:
    base_url: str
    username: str
    password: str = field(repr=False)
    resilience: ResilienceConfig


def get_apstra_config() -> ApstraConfig:
    values = require_env_vars(("APSTRA_BASE_URL", "APSTRA_USERNAME", "APSTRA_PASSWORD"))
    base_url = values["APSTRA_BASE_URL"].rstrip("/")
    if not base_url.startswith(("https://", "http://")):
        raise ConfigurationError(
            f"APSTRA_BASE_URL must be an http(s) URL, got {base_url!r}",
            variables=["APSTRA_BASE_URL"],
        )
    # Controllers usually run with self-signed certificates.
    verify_tls = parse_bool(optional_env_var("APSTRA_VERIFY_TLS"))
    timeout = optional_float_env_var(
        "APSTRA_TIMEOUT_SECONDS",
        default=DEFAULT_APSTRA_TIMEOUT_SECONDS,
    )
    if timeout <= 0:
        raise ConfigurationError(
            f"APSTRA_TIMEOUT_SECONDS must be positive, got {timeout}",
            variables=["APSTRA_TIMEOUT_SECONDS"],
        )

    resilience = ResilienceConfig(
        name="apstra",
        base_url=base_url,
        timeout_seconds=timeout,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        retry=RetryPolicy(total=3),
        default_headers={"Accept": "application/json"},
        verify_tls=verify_tls,
    )

    return ApstraConfig(
        base_url=base_url,
        username=values["APSTRA_USERNAME"],
        password=values["APSTRA_PASSWORD"],
        resilience=resilience,
    )
