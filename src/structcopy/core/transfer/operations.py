"""Pure functions for single-field transfer strategies.

Each strategy reads one field from the bound source and writes it to the
same index on the bound destination.
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from typing import Any

from structcopy.core.accessor import BoundAccessor
from structcopy.core.transfer.models import TransferFunction


def transfer_shallow(source: BoundAccessor, destination: BoundAccessor, index: int) -> None:
    """Copy the value unchanged. Referenced objects are shared, not cloned.

    Args:
        source: Accessor bound to the object being read.
        destination: Accessor bound to the object being written.
        index: Field index.
    """
    destination.write(index, source.read(index))


def transfer_deep(source: BoundAccessor, destination: BoundAccessor, index: int) -> None:
    """Copy a deep clone of the value.

    Args:
        source: Accessor bound to the object being read.
        destination: Accessor bound to the object being written.
        index: Field index.
    """
    destination.write(index, copy.deepcopy(source.read(index)))


def transform_values(fn: Callable[[Any], Any]) -> TransferFunction:
    """Build a strategy that passes every value through `fn` in flight.

    Args:
        fn: Value transformation applied between read and write.

    Returns:
        Transfer function usable by ObjectWriter.
    """

    def transfer(source: BoundAccessor, destination: BoundAccessor, index: int) -> None:
        destination.write(index, fn(source.read(index)))

    return transfer
