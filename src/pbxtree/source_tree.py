"""
Source tree values for filesystem records.

A source tree tells Xcode what a record's path is relative to. The well-known
values map onto SourceTree members. Anything else (a custom build variable
such as ``$(MY_ROOT)``) is kept verbatim as a plain string so it survives a
round trip.
"""

from enum import Enum
from typing import Optional, Union


class SourceTree(Enum):
    ABSOLUTE = "<absolute>"
    GROUP = "<group>"
    SOURCE_ROOT = "SOURCE_ROOT"
    BUILT_PRODUCTS_DIR = "BUILT_PRODUCTS_DIR"
    SDK_ROOT = "SDKROOT"
    DEVELOPER_DIR = "DEVELOPER_DIR"


SourceTreeValue = Union[SourceTree, str]


def parse_source_tree(value: Optional[str]) -> Optional[SourceTreeValue]:
    """Parse a serialized sourceTree value.

    Known values become SourceTree members, unknown ones stay strings.
    """
    if value is None:
        return None
    try:
        return SourceTree(value)
    except ValueError:
        return value


def format_source_tree(value: Optional[SourceTreeValue]) -> Optional[str]:
    if isinstance(value, SourceTree):
        return value.value
    return value
