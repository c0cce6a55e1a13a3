"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
system registry and the file package.

Usage:
    from typesalad.config import FilesSettings, SystemSettings

    # Load from environment variables (TYPESALAD_*, SALADFILES_*)
    system_settings = SystemSettings()
    files_settings = FilesSettings()

    # Or override with explicit values
    files_settings = FilesSettings(json_indent=4)
"""

from __future__ import annotations

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install typesalad"
    ) from e


class SystemSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the System registry.

    Attributes:
        warn_on_new_key: Emit a UserWarning when a storage key is written for the first time.
        allow_untyped_storage: Accept untyped values as the first write to a key.

    Environment Variables:
        TYPESALAD_WARN_ON_NEW_KEY
        TYPESALAD_ALLOW_UNTYPED_STORAGE
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPESALAD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    warn_on_new_key: bool = True
    allow_untyped_storage: bool = True


class FilesSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the SaladFiles package.

    Attributes:
        encoding: Text encoding for reads and writes.
        json_indent: Indentation used by write_json.
        type_scalars: Wrap JSON numbers and booleans as typed values on read.
            Off by default: only strings, arrays and objects are wrapped.

    Environment Variables:
        SALADFILES_ENCODING
        SALADFILES_JSON_INDENT
        SALADFILES_TYPE_SCALARS
    """

    model_config = SettingsConfigDict(
        env_prefix="SALADFILES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    encoding: str = Field("utf-8", min_length=1)
    json_indent: int = Field(2, ge=0)
    type_scalars: bool = False
