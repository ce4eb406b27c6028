"""
ObjectCollection: the flat identifier-addressed table of project-file records.

A loaded project owns exactly one collection. Every record the project file
holds lives here under its opaque identifier. Filesystem records are stored as
FSReference instances. Any other record (targets, build phases, the project
record itself) is kept as the raw mapping it was read from.

FSReference nodes only hold a weak handle to their collection. Dropping the
last strong reference to the collection tears the tree down; any node that is
still used after that raises DanglingCollectionError.

Thread safety: Not thread-safe (all operations expected on one thread).
"""

import logging
import weakref
from typing import Any, Dict, Iterator, List, Optional, Tuple

from pbxtree.fs_reference import FSReference
from pbxtree.kind import FSReferenceKind

logger = logging.getLogger(__name__)


class ObjectCollection:
    """Identifier -> record table shared by every node of one project."""

    def __init__(self) -> None:
        self._objects: Dict[str, Any] = {}

    @classmethod
    def from_dict(cls, objects: Dict[str, Dict[str, Any]]) -> 'ObjectCollection':
        """Populate a collection from the parsed 'objects' section of a project file.

        Records whose isa is a filesystem kind become FSReference nodes.
        Everything else is stored unchanged. Parent back-references are
        assigned before returning.
        """
        collection = cls()
        for identifier, record in objects.items():
            if isinstance(record, dict) and FSReferenceKind.from_isa(record.get('isa')) is not None:
                record = FSReference.from_dict(record)
            collection.insert(identifier, record)
        collection.assign_parents()
        logger.debug(f"Loaded {len(collection)} objects ({len(collection.fs_references())} filesystem references)")
        return collection

    def handle(self) -> 'weakref.ref[ObjectCollection]':
        return weakref.ref(self)

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def insert(self, identifier: str, record: Any) -> None:
        """Store a record under identifier, binding FSReference nodes to this collection."""
        if identifier in self._objects:
            logger.warning(f"Overwriting existing object for identifier: {identifier}")

        self._objects[identifier] = record
        if isinstance(record, FSReference):
            record.bind_collection(self)
        logger.debug(f"Inserted object: identifier={identifier}, type={type(record).__name__}")

    def remove(self, identifier: str) -> Optional[Any]:
        """Remove and return the record stored under identifier, or None."""
        record = self._objects.pop(identifier, None)
        if isinstance(record, FSReference):
            record.bind_collection(None)
        return record

    def get(self, identifier: str) -> Optional[Any]:
        return self._objects.get(identifier)

    @staticmethod
    def as_fs_reference(record: Any) -> Optional[FSReference]:
        """Narrow a record to FSReference, or None if it is some other kind."""
        return record if isinstance(record, FSReference) else None

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[str]:
        return iter(self._objects)

    def items(self) -> List[Tuple[str, Any]]:
        return list(self._objects.items())

    # ------------------------------------------------------------------
    # Filesystem views
    # ------------------------------------------------------------------

    def fs_references(self) -> List[Tuple[str, FSReference]]:
        return [(k, v) for k, v in self._objects.items() if isinstance(v, FSReference)]

    def groups(self) -> List[Tuple[str, FSReference]]:
        """All group-like records (Group, VariantGroup, VersionGroup)."""
        return [(k, v) for k, v in self.fs_references() if v.is_group()]

    def files(self) -> List[Tuple[str, FSReference]]:
        return [(k, v) for k, v in self.fs_references() if v.is_file()]

    def get_group_by_name_or_path(self, name: str) -> Optional[Tuple[str, FSReference]]:
        """Find the first group anywhere in the table whose name or path equals name."""
        for identifier, group in self.groups():
            if group.name == name or group.path == name:
                return identifier, group
        return None

    def identifier_of(self, node: FSReference) -> Optional[str]:
        """Reverse lookup by identity, not by structural equality."""
        for identifier, record in self._objects.items():
            if record is node:
                return identifier
        return None

    def root_groups(self) -> List[Tuple[str, FSReference]]:
        """Groups that no other group lists as a child (normally the main group)."""
        referenced = set()
        for _, group in self.groups():
            referenced.update(group.children_references or ())
        return [(k, v) for k, v in self.groups() if k not in referenced]

    def assign_parents(self) -> None:
        """Recompute every parent back-reference from the child identifier sets."""
        roots = self.root_groups()
        for _, root in roots:
            root.set_parent(None)
            root.assign_parent_to_children()
        logger.debug(f"Assigned parents from {len(roots)} root group(s)")
