"""Configuration module using Pydantic Settings.

Provides typed process-wide defaults with environment variable support.

Usage:
    from copymutate.config import CopyMutateSettings, set_settings

    set_settings(CopyMutateSettings(default_strategy="shallow"))
"""

from copymutate.config.settings import CopyMutateSettings, get_settings, set_settings

__all__ = [
    "CopyMutateSettings",
    "get_settings",
    "set_settings",
]
