"""structcopy: type-driven field-by-field object copying.

Usage:
    from structcopy import ObjectWriter

    @dataclass
    class Header:
        length: int
        _checksum: int = 0

    @dataclass
    class Handshake(Header):
        version: int = 0

    source = Handshake(length=4, version=3)
    destination = Handshake(length=0)
    ObjectWriter().copy_to(source, destination, Handshake)
"""

__version__ = "0.1.0"

# Cache
from structcopy.cache import (
    AccessorCache,
    StructureLookup,
    StructureRegistry,
    get_accessor_cache,
)

# Config
from structcopy.config import WriterSettings

# Core primitives
from structcopy.core import (
    AccessorProvider,
    BoundAccessor,
    FamilyLookup,
    FamilyMemberMeta,
    FamilyRegistry,
    FieldAccessorSet,
    FieldSpec,
    TransferFunction,
    TransferMode,
    build_accessor_set,
    transfer_deep,
    transfer_shallow,
    transform_values,
)

# Errors
from structcopy.errors import CopyError, IntrospectionError, StructCopyError

# Writer
from structcopy.writer import ObjectWriter, clone, copy_to, get_writer

__all__ = [
    # Version
    "__version__",
    # Core
    "FieldSpec",
    "FieldAccessorSet",
    "BoundAccessor",
    "AccessorProvider",
    "build_accessor_set",
    "FamilyRegistry",
    "FamilyMemberMeta",
    "FamilyLookup",
    "TransferFunction",
    "TransferMode",
    "transfer_shallow",
    "transfer_deep",
    "transform_values",
    # Cache
    "AccessorCache",
    "get_accessor_cache",
    "StructureRegistry",
    "StructureLookup",
    # Writer
    "ObjectWriter",
    "get_writer",
    "copy_to",
    "clone",
    # Config
    "WriterSettings",
    # Errors
    "StructCopyError",
    "IntrospectionError",
    "CopyError",
]
