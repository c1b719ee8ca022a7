"""Per-identifier accessor registry for family members.

Holds the canonical accessor set of every registered family member, keyed by
the member's semantic identifier rather than by its runtime type.

Usage:
    structures = StructureRegistry(packets)
    accessors = structures.get_structure(packets.get_identifier(Handshake))
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import structlog

from structcopy.core.accessor import AccessorProvider, FieldAccessorSet, build_accessor_set
from structcopy.core.family import FamilyRegistry

logger = structlog.get_logger()


@runtime_checkable
class StructureLookup(Protocol):
    """Returns the canonical accessor set for a family member identifier."""

    def get_structure(self, identifier: int) -> FieldAccessorSet: ...


class StructureRegistry:
    """Lazily built accessor sets for the members of one family.

    Args:
        family: Registry that resolves identifiers back to member types.
        provider: Builds accessor sets (default: build_accessor_set).
    """

    def __init__(
        self, family: FamilyRegistry, provider: AccessorProvider = build_accessor_set
    ) -> None:
        self._family = family
        self._provider = provider
        self._structures: dict[int, FieldAccessorSet] = {}

    def get_structure(self, identifier: int) -> FieldAccessorSet:
        """Get the accessor set for a member identifier.

        Args:
            identifier: Identifier assigned by the family registry.

        Returns:
            Canonical accessor set for the member type.

        Raises:
            KeyError: If no member is registered under the identifier.
        """
        structure = self._structures.get(identifier)
        if structure is not None:
            return structure

        member_type = self._family.get_type(identifier)
        if member_type is None:
            raise KeyError(f"No family member registered with identifier {identifier}")

        candidate = self._provider(member_type)
        structure = self._structures.setdefault(identifier, candidate)
        if structure is candidate:
            logger.debug(
                "structure built",
                member=member_type.__qualname__,
                identifier=identifier,
                fields=structure.size(),
            )
        return structure

    def __len__(self) -> int:
        return len(self._structures)
