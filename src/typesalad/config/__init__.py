"""Configuration module using Pydantic Settings.

Provides typed configuration for the registry and packages with environment
variable support.

Usage:
    from typesalad.config import FilesSettings, SystemSettings

    settings = SystemSettings(warn_on_new_key=False)
    files = FilesSettings(json_indent=4)
"""

from typesalad.config.settings import FilesSettings, SystemSettings

__all__ = [
    "SystemSettings",
    "FilesSettings",
]
