"""
Full filesystem path of an FSReference.

A node's path is relative to whatever its source tree names:

    <absolute>          path is already absolute
    <group>             relative to the parent group's full path
                        (the source root for a node without a parent)
    SOURCE_ROOT         relative to the project's source root
    BUILT_PRODUCTS_DIR  relative to the configured build variable
    SDKROOT             (same)
    DEVELOPER_DIR       (same)

<group> resolution walks the parent back-references, so run
assign_parent_to_children() (or ObjectCollection.assign_parents()) first.
"""

from pathlib import PurePosixPath
from typing import Optional, TYPE_CHECKING

from pbxtree.errors import FullPathError
from pbxtree.settings import get_build_settings
from pbxtree.source_tree import SourceTree

if TYPE_CHECKING:
    from pbxtree.fs_reference import FSReference


def _join(root: str, path: Optional[str]) -> str:
    if not path:
        return str(PurePosixPath(root))
    return str(PurePosixPath(root) / path)


def full_path(node: 'FSReference', source_root: Optional[str] = None) -> str:
    """Resolve node's full path.

    Args:
        node: Node to resolve.
        source_root: Project source root. Defaults to the configured
                     BuildSettings.source_root.

    Raises:
        FullPathError: the source tree is missing, custom or unconfigured,
                       or an <absolute> node has no path.
    """
    settings = get_build_settings()
    if source_root is None:
        source_root = settings.source_root

    source_tree = node.source_tree
    if source_tree is None:
        raise FullPathError(f"{node.display_name()!r} has no source tree")

    if source_tree is SourceTree.ABSOLUTE:
        if node.path is None:
            raise FullPathError(f"{node.display_name()!r} is <absolute> but has no path")
        return node.path

    if source_tree is SourceTree.GROUP:
        parent = node.parent()
        if parent is not None:
            return _join(full_path(parent, source_root), node.path)
        if source_root is None:
            raise FullPathError(f"No source root to resolve top-level {node.display_name()!r} against")
        return _join(source_root, node.path)

    if source_tree is SourceTree.SOURCE_ROOT:
        if source_root is None:
            raise FullPathError(f"No source root configured for {node.display_name()!r}")
        return _join(source_root, node.path)

    root = settings.root_for(source_tree)
    if root is None:
        raise FullPathError(f"Can't get full path of {node.display_name()!r} from source tree {source_tree!r}")
    return _join(root, node.path)
