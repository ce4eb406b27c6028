"""Kinds of filesystem records in a project file."""

from enum import Enum
from typing import Optional


class FSReferenceKind(Enum):
    """Record kind of an FSReference, valued by its project-file isa."""
    FILE = "PBXFileReference"
    GROUP = "PBXGroup"
    VARIANT_GROUP = "PBXVariantGroup"
    VERSION_GROUP = "XCVersionGroup"

    @property
    def isa(self) -> str:
        return self.value

    @property
    def is_file(self) -> bool:
        return self is FSReferenceKind.FILE

    @property
    def is_group(self) -> bool:
        """Group, VariantGroup and VersionGroup may own children."""
        return self is not FSReferenceKind.FILE

    @classmethod
    def from_isa(cls, isa: str) -> Optional['FSReferenceKind']:
        """Return the kind for an isa string, or None for non-filesystem records."""
        try:
            return cls(isa)
        except ValueError:
            return None
