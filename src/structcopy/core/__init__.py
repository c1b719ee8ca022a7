"""Core functionalities: stateless protocols and primitives.

Architecture Note:
    core/ contains pure building blocks with no shared mutable state, apart
    from the registrations a FamilyRegistry holds for its own family.
    For the accessor caches, see cache/. For the copy engine, see writer/.
"""

from structcopy.core.accessor import (
    AccessorProvider,
    BoundAccessor,
    FieldAccessorSet,
    FieldSpec,
    build_accessor_set,
)
from structcopy.core.family import FamilyLookup, FamilyMemberMeta, FamilyRegistry
from structcopy.core.transfer import (
    TransferFunction,
    TransferMode,
    transfer_deep,
    transfer_shallow,
    transform_values,
)

__all__ = [
    # Accessor
    "FieldSpec",
    "FieldAccessorSet",
    "BoundAccessor",
    "AccessorProvider",
    "build_accessor_set",
    # Family
    "FamilyRegistry",
    "FamilyMemberMeta",
    "FamilyLookup",
    # Transfer
    "TransferFunction",
    "TransferMode",
    "transfer_shallow",
    "transfer_deep",
    "transform_values",
]
