"""Configuration module using Pydantic Settings.

Usage:
    from structcopy.config import WriterSettings

    settings = WriterSettings(default_transfer="deep")
"""

from structcopy.config.settings import WriterSettings

__all__ = [
    "WriterSettings",
]
