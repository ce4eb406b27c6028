"""
Exception taxonomy for the filesystem tree model.

Absent data (no children, a lookup miss, a File node asked for children) is
never an exception here. It comes back as an empty list or None. The classes
below cover the conditions that callers must not ignore.
"""


class PBXTreeError(Exception):
    """Base class for all pbxtree errors."""


class DanglingCollectionError(PBXTreeError, RuntimeError):
    """Raised when a node needs its ObjectCollection but the collection is gone.

    The node was kept alive past the collection that owns it, or it was never
    inserted into one. This is a lifetime bug in the caller, not missing data.
    """


class UnknownKindError(PBXTreeError, ValueError):
    """Raised when a record's isa is not one of the filesystem kinds."""


class FullPathError(PBXTreeError, ValueError):
    """Raised when a node's full path cannot be derived."""
