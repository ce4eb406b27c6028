"""
Filesystem tree model for Xcode project files.

A project file stores its file references and groups as a flat table of
records keyed by opaque identifiers. This package rebuilds a navigable tree
from that table on demand, without the nodes owning one another.

Key Features:
- One FSReference type for files, groups, variant groups and version groups
- Lazy child resolution through a shared ObjectCollection
- Weak parent back-references derived from the child identifier sets
- Name/path lookup of subgroups and files
- Structural equality independent of tree position
- Full path resolution from source trees and build settings

Quick Start:
    >>> from pbxtree import ObjectCollection
    >>>
    >>> objects = ObjectCollection.from_dict(parsed_project['objects'])
    >>> _, main_group = objects.root_groups()[0]
    >>> source = main_group.get_subgroup("Source")
    >>> log = source.get_file("Log.swift")
    >>> log.parent() is source
    True

Modules:
    - fs_reference: FSReference entity, tree resolution and parent linkage
    - collection: ObjectCollection, the identifier-addressed record table
    - kind: FSReferenceKind and isa mapping
    - source_tree: SourceTree values
    - full_path: Full path resolution
    - settings: Thread-local build settings
    - errors: Exception taxonomy
"""

from pbxtree.errors import (
    PBXTreeError,
    DanglingCollectionError,
    UnknownKindError,
    FullPathError,
)
from pbxtree.kind import FSReferenceKind
from pbxtree.source_tree import SourceTree, parse_source_tree, format_source_tree
from pbxtree.fs_reference import FSReference
from pbxtree.collection import ObjectCollection
from pbxtree.full_path import full_path
from pbxtree.settings import (
    BuildSettings,
    set_build_settings,
    get_build_settings,
    clear_build_settings,
    build_settings,
)

__all__ = [
    # Errors
    'PBXTreeError',
    'DanglingCollectionError',
    'UnknownKindError',
    'FullPathError',
    # Model
    'FSReferenceKind',
    'SourceTree',
    'parse_source_tree',
    'format_source_tree',
    'FSReference',
    'ObjectCollection',
    # Paths
    'full_path',
    # Settings
    'BuildSettings',
    'set_build_settings',
    'get_build_settings',
    'clear_build_settings',
    'build_settings',
]

__version__ = '0.1.0'
