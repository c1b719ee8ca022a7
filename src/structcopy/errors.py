"""Exceptions raised by structcopy."""

from __future__ import annotations


class StructCopyError(Exception):
    """Base class for structcopy errors."""

    pass


class IntrospectionError(StructCopyError, TypeError):
    """Raised when field metadata cannot be produced for a type."""

    pass


class CopyError(StructCopyError, RuntimeError):
    """Raised when a field read or write fails during a copy.

    The original failure is chained as ``__cause__``. Fields copied before the
    failure are left in place; copies are not transactional.

    Args:
        common_type: Type whose fields were being copied when the failure occurred.
    """

    def __init__(self, common_type: type) -> None:
        super().__init__(f"Unable to copy fields from {common_type.__qualname__}")
        self.common_type = common_type

    def __reduce__(self) -> tuple[type[CopyError], tuple[type]]:
        return (type(self), (self.common_type,))
