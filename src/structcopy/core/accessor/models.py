"""Field accessor models: field metadata and provider protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from structcopy.core.accessor.core import FieldAccessorSet


@dataclass(slots=True, frozen=True)
class FieldSpec:
    """Static metadata for one directly declared field."""

    index: int
    name: str
    declaring_type: type
    is_static: bool = False  # ClassVar, lives on the class
    is_public: bool = True  # No leading underscore


@runtime_checkable
class AccessorProvider(Protocol):
    """Builds the accessor set for a type's directly declared fields.

    Implementations must be free of side effects: the cache may build a
    candidate more than once for the same type and discard all but one.
    """

    def __call__(self, cls: type) -> FieldAccessorSet: ...
