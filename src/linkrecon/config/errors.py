"""Errors raised while reading controller and CLI settings from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """An environment variable is present but unusable."""

    def __init__(self, message: str, *, variables: Iterable[str] = ()) -> None:
        super().__init__(message)
        self.variables: tuple[str, ...] = tuple(sorted(variables))


class MissingConfigurationError(ConfigurationError):
    """One or more required environment variables are absent or blank."""

    def __init__(self, variables: Iterable[str]) -> None:
        names = sorted(variables)
        super().__init__(f"Missing configuration for: {', '.join(names)}", variables=names)
