"""Family models: member metadata and lookup protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(slots=True, frozen=True)
class FamilyMemberMeta:
    """Metadata for a registered family member."""

    identifier: int
    type_name: str


@runtime_checkable
class FamilyLookup(Protocol):
    """Maps a runtime type to the semantic identifier of a family member.

    `base` is the distinguished base type of the family. Only strict
    subclasses of `base` are ever looked up.
    """

    base: type

    def get_identifier(self, cls: type) -> int | None: ...
