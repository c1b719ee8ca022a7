"""Transfer models: strategy signature and built-in modes."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from structcopy.core.accessor import BoundAccessor

TransferFunction: TypeAlias = "Callable[[BoundAccessor, BoundAccessor, int], None]"
"""Signature: (bound_source, bound_destination, field_index) -> None"""


class TransferMode(Enum):
    """Built-in single-field transfer strategies."""

    SHALLOW = "shallow"  # Copy value or reference unchanged
    DEEP = "deep"  # Copy a deepcopy of the value

    def get_strategy(self) -> TransferFunction:
        """Get the transfer function for this mode.

        Returns:
            Pure function implementing the transfer.
        """
        # Late import to avoid circular dependency
        from structcopy.core.transfer import operations

        strategies = {
            TransferMode.SHALLOW: operations.transfer_shallow,
            TransferMode.DEEP: operations.transfer_deep,
        }
        return strategies[self]
