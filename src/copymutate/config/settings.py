"""Configuration settings using Pydantic Settings.

Usage:
    from copymutate.config import CopyMutateSettings, get_settings

    # Load from environment variables (COPYMUTATE_*)
    settings = get_settings()

    # Or override with explicit values
    settings = CopyMutateSettings(warn_on_discarded_return=False)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from copymutate.core.mutation.models import CopyStrategy


class CopyMutateSettings(BaseSettings):  # type: ignore[misc]
    """Process-wide defaults for copy-and-mutate operations.

    Attributes:
        default_strategy: Copy strategy used when a call passes none.
        warn_on_discarded_return: Emit DiscardedReturnWarning when a mutating
            transformation returns a value.
        warn_on_missing_return: Emit MissingReturnWarning when copy_update
            gets None back for a non-None value.

    Environment Variables:
        COPYMUTATE_DEFAULT_STRATEGY
        COPYMUTATE_WARN_ON_DISCARDED_RETURN
        COPYMUTATE_WARN_ON_MISSING_RETURN
    """

    model_config = SettingsConfigDict(
        env_prefix="COPYMUTATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    default_strategy: CopyStrategy = CopyStrategy.DEEP
    warn_on_discarded_return: bool = True
    warn_on_missing_return: bool = True


# Module-level settings instance, loaded on first use
_settings: CopyMutateSettings | None = None


def get_settings() -> CopyMutateSettings:
    """Access the process-wide settings.

    Returns:
        The active CopyMutateSettings, read from the environment on first call.
    """
    global _settings
    if _settings is None:
        _settings = CopyMutateSettings()
    return _settings


def set_settings(settings: CopyMutateSettings | None) -> None:
    """Replace the process-wide settings.

    Args:
        settings: New settings, or None to reload from the environment on next use.
    """
    global _settings
    _settings = settings
