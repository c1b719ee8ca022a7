"""Family registry and member decorator.

A family is a distinguished base type plus the subclasses registered as its
members. Each member gets a semantic identifier that stays the same across
processes running the same code.

Usage:
    class Packet:
        pass

    packets = FamilyRegistry(Packet)

    @packets.member
    @dataclass
    class Handshake(Packet):
        version: int
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import overload

from structcopy.core.family.models import FamilyMemberMeta


def _stable_member_identifier(cls: type) -> int:
    """Generate deterministic ID from fully qualified class name.

    Args:
        cls: Member class to generate ID for.

    Returns:
        Deterministic integer ID derived from class name hash.
    """
    fqn = f"{cls.__module__}.{cls.__qualname__}"
    return int(hashlib.sha256(fqn.encode()).hexdigest()[:16], 16)


class FamilyRegistry:
    """Process-local registry mapping family member types to identifiers.

    Maintains bidirectional mapping between member types and identifiers.
    Unregistered subclasses of the base have no identifier.

    Args:
        base: Distinguished base type of the family.
    """

    def __init__(self, base: type) -> None:
        """Initialize empty family registry."""
        self.base = base
        self._by_type: dict[type, FamilyMemberMeta] = {}
        self._by_identifier: dict[int, type] = {}

    def register(self, cls: type) -> FamilyMemberMeta:
        """Register a member type and return its metadata.

        Args:
            cls: Strict subclass of the family base.

        Returns:
            Member metadata including identifier and type name.

        Raises:
            TypeError: If cls is not a strict subclass of the base.
            RuntimeError: If the identifier collides with another registered type.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        if cls is self.base or not issubclass(cls, self.base):
            raise TypeError(
                f"{cls.__qualname__} is not a strict subclass of {self.base.__qualname__}"
            )

        identifier = _stable_member_identifier(cls)

        if identifier in self._by_identifier:
            existing = self._by_identifier[identifier]
            raise RuntimeError(
                f"Member ID collision: {cls} and {existing} hash to {identifier}"
            )

        meta = FamilyMemberMeta(
            identifier=identifier,
            type_name=f"{cls.__module__}.{cls.__qualname__}",
        )
        self._by_type[cls] = meta
        self._by_identifier[identifier] = cls
        return meta

    def get_identifier(self, cls: type) -> int | None:
        """Get the identifier of a registered member.

        Args:
            cls: Class to look up.

        Returns:
            Identifier if registered, None otherwise.
        """
        meta = self._by_type.get(cls)
        return meta.identifier if meta is not None else None

    def get_meta(self, cls: type) -> FamilyMemberMeta | None:
        """Get metadata for a registered member type."""
        return self._by_type.get(cls)

    def get_type(self, identifier: int) -> type | None:
        """Get member type by its identifier."""
        return self._by_identifier.get(identifier)

    def is_registered(self, cls: type) -> bool:
        """Check if a type is a registered member."""
        return cls in self._by_type

    @overload
    def member(self, cls: type) -> type: ...

    @overload
    def member(self, cls: None = None) -> Callable[[type], type]: ...

    def member(self, cls: type | None = None) -> type | Callable[[type], type]:
        """Register a class as a family member.

        Supports both forms:
            @family.member      # bare decorator
            @family.member()    # parenthesized

        Args:
            cls: The class to register, or None if called with parentheses.

        Returns:
            Decorated class or decorator function.
        """

        def decorator(c: type) -> type:
            meta = self.register(c)
            c.__family_meta__ = meta  # type: ignore
            return c

        if cls is None:
            return decorator
        else:
            return decorator(cls)
