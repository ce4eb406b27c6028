"""Tests for assign_parent_to_children() and incremental parent edits."""

import gc
import weakref

from pbxtree import FSReference, FSReferenceKind, ObjectCollection


def test_every_resolved_child_points_at_its_group(objects, main_group):
    main_group.assign_parent_to_children()

    for _, group in objects.groups():
        for child in group.children():
            assert child.parent() is group


def test_recurses_into_nested_groups(objects, main_group):
    main_group.assign_parent_to_children()

    assert objects.get("F3").parent() is objects.get("V1")
    assert objects.get("V1").parent() is objects.get("A1")
    assert objects.get("A1").parent() is main_group


def test_root_is_left_untouched(main_group):
    main_group.assign_parent_to_children()
    assert main_group.parent() is None


def test_idempotent(objects, main_group):
    main_group.assign_parent_to_children()
    first = {k: v.parent() for k, v in objects.fs_references()}
    main_group.assign_parent_to_children()
    second = {k: v.parent() for k, v in objects.fs_references()}

    assert first.keys() == second.keys()
    assert all(first[k] is second[k] for k in first)


def test_explicit_weak_handle(objects):
    source = objects.get("A1")
    source.assign_parent_to_children(weakref.ref(source))
    assert objects.get("F1").parent() is source


def test_file_is_a_no_op():
    objects = ObjectCollection()
    log = FSReference(FSReferenceKind.FILE, name="Log.swift", children_references={"G0"})
    objects.insert("F1", log)
    objects.insert("G0", FSReference(FSReferenceKind.GROUP, name="Other"))

    log.assign_parent_to_children()

    assert objects.get("G0").parent() is None


def test_parents_are_weak(objects):
    objects.assign_parents()
    child = objects.get("F3")

    removed = objects.remove("V1")
    assert child.parent() is removed
    del removed
    gc.collect()

    assert child.parent() is None


def test_move_file_between_groups(objects, main_group):
    main_group.assign_parent_to_children()
    source, products = objects.get("A1"), objects.get("P0")
    delegate = objects.get("F2")

    source.children_references.discard("F2")
    products.children_references.add("F2")
    delegate.set_parent(products)

    assert source.get_file("AppDelegate.swift") is None
    assert products.get_file("AppDelegate.swift") is delegate
    assert delegate.parent() is products

    main_group.assign_parent_to_children()
    assert delegate.parent() is products


def test_subgroup_parent_scenario(main_group):
    """G0 -> A1 (path "Source"): the subgroup's parent is G0 after linkage."""
    source = main_group.get_subgroup("Source")
    main_group.assign_parent_to_children()

    parent = source.parent()
    assert parent == main_group
    assert parent.children_references == main_group.children_references


def test_file_lookup_scenario():
    """G0 -> F1 (name "Log.swift", no path)."""
    objects = ObjectCollection()
    objects.insert("F1", FSReference(FSReferenceKind.FILE, name="Log.swift"))
    root = FSReference(FSReferenceKind.GROUP, children_references={"F1"})
    objects.insert("G0", root)

    assert root.get_file("Log.swift") is objects.get("F1")
    assert root.get_file("nonexistent") is None


def test_empty_group_scenario():
    objects = ObjectCollection()
    group = FSReference(FSReferenceKind.GROUP, name="Empty", children_references=None)
    objects.insert("G0", group)

    assert group.children() == []
    assert group.get_subgroup("Empty") is None
    assert group.get_file("Empty") is None
