"""Accessor cache: resolves a type to a reusable accessor set.

Entries are created on first request and never evicted or replaced. When a
family is configured, registered members of that family are resolved through
the per-identifier structure registry and never enter the local cache.

Usage:
    cache = AccessorCache(family=packets, structures=StructureRegistry(packets))
    accessors = cache.resolve(Handshake)

Thread Safety:
    Lookups are plain dict reads. Installation uses `dict.setdefault`, so when
    two threads build a candidate for the same type, the first to install wins
    and the other candidate is discarded. Providers must be free of side
    effects for this to be safe.
"""

from __future__ import annotations

import structlog

from structcopy.cache.structure import StructureLookup
from structcopy.core.accessor import AccessorProvider, FieldAccessorSet, build_accessor_set
from structcopy.core.family import FamilyLookup

logger = structlog.get_logger()


class AccessorCache:
    """Memoizes accessor sets per runtime type.

    Args:
        provider: Builds accessor sets for uncached types (default: build_accessor_set).
        family: Optional family whose members are delegated.
        structures: Per-identifier registry used for delegated members.
    """

    def __init__(
        self,
        provider: AccessorProvider = build_accessor_set,
        family: FamilyLookup | None = None,
        structures: StructureLookup | None = None,
    ) -> None:
        if (family is None) != (structures is None):
            raise ValueError("family and structures must be configured together")
        self._provider = provider
        self._family = family
        self._structures = structures
        self._cache: dict[type, FieldAccessorSet] = {}

    def _delegated(self, cls: type) -> FieldAccessorSet | None:
        """Resolve a registered family member through the structure registry."""
        if self._family is None or self._structures is None:
            return None
        base = self._family.base
        if cls is base or not isinstance(cls, type) or not issubclass(cls, base):
            return None
        # Unregistered subclasses of the base fall back to local caching
        identifier = self._family.get_identifier(cls)
        if identifier is None:
            return None
        logger.debug("accessor set delegated", type=cls.__qualname__, identifier=identifier)
        return self._structures.get_structure(identifier)

    def resolve(self, cls: type) -> FieldAccessorSet:
        """Get the accessor set for a type, building it on first request.

        Args:
            cls: Type whose directly declared fields are needed.

        Returns:
            Cached (or delegated) accessor set.

        Raises:
            Exception: Whatever the provider or structure registry raises; not wrapped.
        """
        delegated = self._delegated(cls)
        if delegated is not None:
            return delegated

        accessors = self._cache.get(cls)
        if accessors is None:
            candidate = self._provider(cls)
            accessors = self._cache.setdefault(cls, candidate)
            if accessors is candidate:
                logger.debug("accessor set built", type=cls.__qualname__, fields=candidate.size())
                if candidate.size() == 0 and cls is not object:
                    logger.debug("accessor set empty", type=cls.__qualname__)
            else:
                logger.debug("accessor set discarded", type=cls.__qualname__)
        return accessors

    def is_cached(self, cls: type) -> bool:
        """Check if a type has an entry in the local cache."""
        return cls in self._cache

    def clear(self) -> None:
        """Drop every local entry. Intended for tests."""
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


# Module-level cache instance
_cache = AccessorCache()


def get_accessor_cache() -> AccessorCache:
    """Access the global accessor cache.

    Returns:
        The process-local AccessorCache instance.
    """
    return _cache
