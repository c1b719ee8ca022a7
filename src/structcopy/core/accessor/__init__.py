"""Field accessor functionality: metadata, accessor sets, and the default provider."""

from structcopy.core.accessor.core import BoundAccessor, FieldAccessorSet, build_accessor_set
from structcopy.core.accessor.models import AccessorProvider, FieldSpec

__all__ = [
    # Models
    "FieldSpec",
    "AccessorProvider",
    # Core
    "FieldAccessorSet",
    "BoundAccessor",
    "build_accessor_set",
]
