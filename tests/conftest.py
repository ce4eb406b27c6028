"""Pytest configuration and shared fixtures."""
import pytest

from pbxtree import ObjectCollection, clear_build_settings


# Trimmed 'objects' section of a small iOS app project:
#
#   main group (G0)
#   ├── Source (A1)
#   │   ├── Log.swift (F1)
#   │   ├── AppDelegate.swift (F2)
#   │   └── Localizable.strings (V1)
#   │       └── en.lproj/Localizable.strings (F3)
#   ├── Model.xcdatamodeld (X1)
#   │   └── Model.xcdatamodel (F4)
#   └── Products (P0)
#       └── Demo.app (F5)
DEMO_OBJECTS = {
    "G0": {"isa": "PBXGroup", "children": ["A1", "X1", "P0"], "sourceTree": "<group>"},
    "A1": {"isa": "PBXGroup", "children": ["F1", "F2", "V1"], "path": "Source", "sourceTree": "<group>"},
    "F1": {
        "isa": "PBXFileReference",
        "lastKnownFileType": "sourcecode.swift",
        "name": "Log.swift",
        "sourceTree": "<group>",
    },
    "F2": {
        "isa": "PBXFileReference",
        "fileEncoding": "4",
        "lastKnownFileType": "sourcecode.swift",
        "path": "AppDelegate.swift",
        "sourceTree": "<group>",
    },
    "V1": {"isa": "PBXVariantGroup", "children": ["F3"], "name": "Localizable.strings", "sourceTree": "<group>"},
    "F3": {
        "isa": "PBXFileReference",
        "lastKnownFileType": "text.plist.strings",
        "name": "en",
        "path": "en.lproj/Localizable.strings",
        "sourceTree": "<group>",
    },
    "X1": {
        "isa": "XCVersionGroup",
        "children": ["F4"],
        "currentVersion": "F4",
        "path": "Model.xcdatamodeld",
        "sourceTree": "<group>",
        "versionGroupType": "wrapper.xcdatamodel",
    },
    "F4": {
        "isa": "PBXFileReference",
        "lastKnownFileType": "wrapper.xcdatamodel",
        "path": "Model.xcdatamodel",
        "sourceTree": "<group>",
    },
    "P0": {"isa": "PBXGroup", "children": ["F5"], "name": "Products", "sourceTree": "<group>"},
    "F5": {
        "isa": "PBXFileReference",
        "explicitFileType": "wrapper.application",
        "includeInIndex": "0",
        "path": "Demo.app",
        "sourceTree": "BUILT_PRODUCTS_DIR",
    },
    "T0": {"isa": "PBXNativeTarget", "name": "Demo", "productReference": "F5"},
}


@pytest.fixture(autouse=True)
def reset_build_settings():
    """Reset thread-local build settings before and after each test."""
    clear_build_settings()
    yield
    clear_build_settings()


@pytest.fixture
def objects():
    """Provide the demo project's object collection, parents already linked by loading."""
    return ObjectCollection.from_dict(DEMO_OBJECTS)


@pytest.fixture
def main_group(objects):
    """Provide the demo project's main group."""
    return objects.get("G0")
