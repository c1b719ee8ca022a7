"""Accessor caches: per-type memoization and per-identifier family structures.

Usage:
    from structcopy.cache import AccessorCache, StructureRegistry

    cache = AccessorCache()
    accessors = cache.resolve(MyType)
"""

from structcopy.cache.accessor_cache import AccessorCache, get_accessor_cache
from structcopy.cache.structure import StructureLookup, StructureRegistry

__all__ = [
    "AccessorCache",
    "get_accessor_cache",
    "StructureLookup",
    "StructureRegistry",
]
