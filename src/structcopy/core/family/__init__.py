"""Family functionality: member registry, identifiers, and decorator."""

from structcopy.core.family.core import FamilyRegistry
from structcopy.core.family.models import FamilyLookup, FamilyMemberMeta

__all__ = [
    "FamilyMemberMeta",
    "FamilyLookup",
    "FamilyRegistry",
]
