"""
Build-setting configuration for path resolution.

Provides thread-local storage for the build settings that anchor source trees
(SOURCE_ROOT, BUILT_PRODUCTS_DIR, SDKROOT, DEVELOPER_DIR). full_path() reads
them when the caller does not pass a source root explicitly.

Typical use:
    set_build_settings(BuildSettings(source_root="/work/App"))

or, scoped to a block:
    with build_settings(BuildSettings(source_root="/work/App")):
        node.full_path()
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Generator, Optional

from pbxtree.source_tree import SourceTree, SourceTreeValue


@dataclass(frozen=True)
class BuildSettings:
    """Filesystem roots a project's source trees resolve against."""
    source_root: Optional[str] = None
    built_products_dir: Optional[str] = None
    sdk_root: Optional[str] = None
    developer_dir: Optional[str] = None

    def root_for(self, source_tree: SourceTreeValue) -> Optional[str]:
        """Return the configured root for a build-variable source tree.

        Returns None for source trees that have no configured root,
        including <group>, <absolute> and custom values.
        """
        return {
            SourceTree.SOURCE_ROOT: self.source_root,
            SourceTree.BUILT_PRODUCTS_DIR: self.built_products_dir,
            SourceTree.SDK_ROOT: self.sdk_root,
            SourceTree.DEVELOPER_DIR: self.developer_dir,
        }.get(source_tree)


_build_settings_context = threading.local()


def set_build_settings(settings: BuildSettings) -> None:
    """Set the build settings for the current thread."""
    _build_settings_context.value = settings


def get_build_settings() -> BuildSettings:
    """Get the build settings for the current thread.

    Returns an empty BuildSettings when none were set.
    """
    return getattr(_build_settings_context, 'value', None) or BuildSettings()


def clear_build_settings() -> None:
    if hasattr(_build_settings_context, 'value'):
        del _build_settings_context.value


@contextmanager
def build_settings(settings: BuildSettings) -> Generator[BuildSettings, None, None]:
    """Install settings for the duration of a with-block, then restore the previous ones."""
    previous = getattr(_build_settings_context, 'value', None)
    set_build_settings(settings)
    try:
        yield settings
    finally:
        if previous is None:
            clear_build_settings()
        else:
            set_build_settings(previous)
