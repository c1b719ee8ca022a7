"""Transfer functionality: single-field copy strategies."""

from structcopy.core.transfer.models import TransferFunction, TransferMode
from structcopy.core.transfer.operations import transfer_deep, transfer_shallow, transform_values

__all__ = [
    "TransferFunction",
    "TransferMode",
    "transfer_shallow",
    "transfer_deep",
    "transform_values",
]
