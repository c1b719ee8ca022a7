"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the writer.

Usage:
    from structcopy.config import WriterSettings

    # Load from environment variables (STRUCTCOPY_*)
    settings = WriterSettings()

    # Or override with explicit values
    settings = WriterSettings(skip_unset_fields=True)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from structcopy.core.transfer import TransferMode


class WriterSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for ObjectWriter.

    Attributes:
        copy_public_fields: Copy public fields at the first level of a copy.
            Ancestor levels never copy public fields.
        skip_unset_fields: Skip source fields with no value (empty slots,
            missing attributes) instead of failing the copy.
        default_transfer: Transfer strategy used when none is injected.

    Environment Variables:
        STRUCTCOPY_COPY_PUBLIC_FIELDS
        STRUCTCOPY_SKIP_UNSET_FIELDS
        STRUCTCOPY_DEFAULT_TRANSFER (shallow or deep)
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    copy_public_fields: bool = True
    skip_unset_fields: bool = False
    default_transfer: TransferMode = TransferMode.SHALLOW
