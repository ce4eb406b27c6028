"""
FSReference: the filesystem node of a project file.

One record type covers PBXFileReference, PBXGroup, PBXVariantGroup and
XCVersionGroup. The kind field tells them apart. Kind-specific attributes are
simply left as None on the kinds they do not apply to.

The project file stores these records flat, keyed by opaque identifiers. A
group only knows the identifiers of its children. This module turns those
identifiers back into a tree on demand:

- children() resolves identifiers through the owning ObjectCollection
- get_subgroup() / get_file() search the resolved children
- assign_parent_to_children() stamps every descendant with a weak reference
  to its parent, derived from the child identifier sets

Ownership:
- The ObjectCollection owns every node. Nodes hold only weak references to
  the collection and to their parent, so no reference cycles are created.
- children_references is the single source of truth for the tree shape.
  The parent link is derived from it and is never consulted for equality.
"""

import logging
import weakref
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, TYPE_CHECKING, Union

from pbxtree.errors import DanglingCollectionError, UnknownKindError
from pbxtree.kind import FSReferenceKind
from pbxtree.source_tree import SourceTreeValue, format_source_tree, parse_source_tree

if TYPE_CHECKING:
    from pbxtree.collection import ObjectCollection

logger = logging.getLogger(__name__)

ParentHandle = Union['FSReference', 'weakref.ref[FSReference]', None]


def _to_bool(value: Any) -> Optional[bool]:
    # Project files store booleans as 0/1 (sometimes YES/NO), usually as strings
    if value is None or isinstance(value, bool):
        return value
    return str(value).strip().lower() in ('1', 'yes', 'true')


def _to_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(value)


@dataclass
class FSReference:
    """Abstraction over PBXFileReference, PBXGroup, PBXVariantGroup and XCVersionGroup.

    Every content attribute is optional. None means the attribute is not
    serialized, not that it has a default value.

    Equality is structural: two nodes are equal when their kind and content
    attributes are equal, wherever they sit in the tree.
    """
    kind: FSReferenceKind
    source_tree: Optional[SourceTreeValue] = None
    path: Optional[str] = None
    name: Optional[str] = None
    include_in_index: Optional[bool] = None
    uses_tabs: Optional[bool] = None
    indent_width: Optional[int] = None
    tab_width: Optional[int] = None
    wraps_lines: Optional[bool] = None
    # Group-like kinds only
    children_references: Optional[Set[str]] = None
    # PBXFileReference only
    file_encoding: Optional[int] = None
    explicit_file_type: Optional[str] = None
    last_known_file_type: Optional[str] = None  # e.g. "sourcecode.swift" for foo.swift
    line_ending: Optional[int] = None
    language_specification_identifier: Optional[str] = None
    xc_language_specification_identifier: Optional[str] = None
    plist_structure_definition_identifier: Optional[str] = None
    # XCVersionGroup only
    current_version_reference: Optional[str] = None
    version_group_type: Optional[str] = None

    _parent: Optional['weakref.ref[FSReference]'] = field(
        default=None, init=False, repr=False, compare=False
    )
    _objects: Optional['weakref.ref[ObjectCollection]'] = field(
        default=None, init=False, repr=False, compare=False
    )

    # Serialized key -> attribute, for from_dict/to_dict
    _KEYS = {
        'path': 'path',
        'name': 'name',
        'includeInIndex': 'include_in_index',
        'usesTabs': 'uses_tabs',
        'indentWidth': 'indent_width',
        'tabWidth': 'tab_width',
        'wrapsLines': 'wraps_lines',
        'fileEncoding': 'file_encoding',
        'explicitFileType': 'explicit_file_type',
        'lastKnownFileType': 'last_known_file_type',
        'lineEnding': 'line_ending',
        'languageSpecificationIdentifier': 'language_specification_identifier',
        'xcLanguageSpecificationIdentifier': 'xc_language_specification_identifier',
        'plistStructureDefinitionIdentifier': 'plist_structure_definition_identifier',
        'currentVersion': 'current_version_reference',
        'versionGroupType': 'version_group_type',
    }
    _BOOL_ATTRS = frozenset({'include_in_index', 'uses_tabs', 'wraps_lines'})
    _INT_ATTRS = frozenset({'indent_width', 'tab_width', 'file_encoding', 'line_ending'})

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def is_file(self) -> bool:
        return self.kind.is_file

    def is_group(self) -> bool:
        """True for Group, VariantGroup and VersionGroup."""
        return self.kind.is_group

    def display_name(self) -> Optional[str]:
        """Name shown in the project navigator: name, falling back to path."""
        return self.name if self.name is not None else self.path

    # ------------------------------------------------------------------
    # Collection and parent handles
    # ------------------------------------------------------------------

    def bind_collection(self, objects: Optional['ObjectCollection']) -> None:
        """Point this node at the collection that owns it (weakly)."""
        self._objects = weakref.ref(objects) if objects is not None else None

    def _collection(self) -> 'ObjectCollection':
        objects = self._objects() if self._objects is not None else None
        if objects is None:
            raise DanglingCollectionError(
                f"{self.kind.isa} {self.display_name()!r} has no live ObjectCollection; "
                f"the node outlived the collection that owns it"
            )
        return objects

    def parent(self) -> Optional['FSReference']:
        """Return the parent node, or None if unset or already collected."""
        return self._parent() if self._parent is not None else None

    def set_parent(self, parent: ParentHandle) -> None:
        """Set the parent back-reference.

        Accepts a node, a weak reference to one, or None. Only a weak
        reference is stored. The caller keeps children_references of the old
        and new parent in sync.
        """
        if parent is None or isinstance(parent, weakref.ref):
            self._parent = parent
        else:
            self._parent = weakref.ref(parent)

    # ------------------------------------------------------------------
    # Tree resolution
    # ------------------------------------------------------------------

    def children(self) -> List['FSReference']:
        """Resolve children_references into live nodes.

        Returns an empty list for File nodes and for groups without child
        references. Identifiers with no record, or with a record that is not
        an FSReference, are skipped.

        Raises:
            DanglingCollectionError: the owning collection no longer exists.
        """
        if self.is_file() or self.children_references is None:
            return []

        objects = self._collection()
        resolved = []
        for identifier in sorted(self.children_references):
            child = objects.as_fs_reference(objects.get(identifier))
            if child is None:
                logger.debug(f"Skipping child {identifier} of {self.display_name()!r}: not a filesystem record")
                continue
            resolved.append(child)
        return resolved

    def get_subgroup(self, name: str) -> Optional['FSReference']:
        """Get the first child group whose path, or name when path is unset, matches.

        Returns None if self is a file or nothing matches.
        """
        if self.is_file():
            return None

        for child in self.children():
            if not child.is_group():
                continue
            if child.path is not None:
                if child.path == name:
                    return child
            elif child.name is not None and child.name == name:
                return child
        return None

    def get_file(self, name: str) -> Optional['FSReference']:
        """Get the first child file whose name, or path when name is unset, matches.

        Name is checked before path, the opposite order to get_subgroup().
        Returns None if self is a file or nothing matches.
        """
        for child in self.children():
            if not child.is_file():
                continue
            if child.name is not None:
                if child.name == name:
                    return child
            elif child.path is not None and child.path == name:
                return child
        return None

    # ------------------------------------------------------------------
    # Parent linkage
    # ------------------------------------------------------------------

    def assign_parent_to_children(self, this: ParentHandle = None) -> None:
        """Recursively stamp every descendant with its parent.

        Args:
            this: Handle to record as the parent of self's children.
                  Defaults to self.

        The child identifier sets must not form a cycle.
        """
        if not self.is_group():
            return
        if this is None:
            this = self
        for child in self.children():
            child.set_parent(this)
            child.assign_parent_to_children(child)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def full_path(self, source_root: Optional[str] = None) -> str:
        """Absolute path of this node. See pbxtree.full_path.full_path."""
        from pbxtree.full_path import full_path
        return full_path(self, source_root)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any], objects: Optional['ObjectCollection'] = None) -> 'FSReference':
        """Build a node from a parsed project-file record.

        Args:
            data: Record mapping with project-file keys ('isa', 'children',
                  'sourceTree', 'path', ...).
            objects: Collection to bind the node to, if any.

        Raises:
            UnknownKindError: data['isa'] is not a filesystem kind.
        """
        kind = FSReferenceKind.from_isa(data.get('isa'))
        if kind is None:
            raise UnknownKindError(f"Not a filesystem record: isa={data.get('isa')!r}")

        values: Dict[str, Any] = {}
        for key, attr in cls._KEYS.items():
            if key not in data:
                continue
            value = data[key]
            if attr in cls._BOOL_ATTRS:
                value = _to_bool(value)
            elif attr in cls._INT_ATTRS:
                value = _to_int(value)
            values[attr] = value

        if kind.is_group and data.get('children') is not None:
            values['children_references'] = set(data['children'])

        node = cls(kind=kind, source_tree=parse_source_tree(data.get('sourceTree')), **values)
        if objects is not None:
            node.bind_collection(objects)
        return node

    def to_dict(self) -> Dict[str, Any]:
        """Render as a project-file record, omitting unset attributes.

        Booleans are written as 0/1 and children as a sorted list.
        """
        data: Dict[str, Any] = {'isa': self.kind.isa}
        if self.children_references is not None:
            data['children'] = sorted(self.children_references)
        for key, attr in self._KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            data[key] = int(value) if attr in self._BOOL_ATTRS else value
        if self.source_tree is not None:
            data['sourceTree'] = format_source_tree(self.source_tree)
        return data
