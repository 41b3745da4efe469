import pytest

from tree_node_model.models.node import TreeNode
from tree_node_model.tree_helpers import (
    find_by_row_key,
    find_child_of_type,
    iter_depth_first,
    row_key_path,
    sort_children,
)


class SubTableNode(TreeNode):
    """Marker type for a nested table declaration."""


# -------------------------
# find_by_row_key()
# -------------------------

def test_find_by_row_key_resolves_every_node(tree):
    root = tree["root"]
    for node in iter_depth_first(root):
        if node is not root:
            assert find_by_row_key(root, node.row_key) is node


@pytest.mark.parametrize("row_key", ["", None, "3", "0_1", "x", "0__0", "-1", "01", "0_00", "\u0663", "+1", " 1"])
def test_find_by_row_key_misses(tree, row_key):
    assert find_by_row_key(tree["root"], row_key) is None


def test_row_key_path_of_root_is_none(tree):
    assert row_key_path(tree["root"]) is None
    assert row_key_path(tree["a00"]) == "0_0_0"


# -------------------------
# iter_depth_first()
# -------------------------

def test_iter_depth_first_is_pre_order(tree):
    assert [node.data for node in iter_depth_first(tree["root"])] == [
        "root", "a", "a0", "a00", "b", "c", "c0"
    ]


# -------------------------
# find_child_of_type()
# -------------------------

def test_find_child_of_type():
    table = TreeNode()
    TreeNode(data="column", parent=table)
    sub_table = SubTableNode(data="details", parent=table)
    SubTableNode(data="other", parent=table)

    assert find_child_of_type(table, SubTableNode) is sub_table


def test_find_child_of_type_absent(tree):
    assert find_child_of_type(tree["root"], SubTableNode) is None
    assert find_child_of_type(tree["b"], SubTableNode) is None


# -------------------------
# sort_children()
# -------------------------

def make_unsorted():
    root = TreeNode(data="root")
    for name in ["c", "a", "b"]:
        node = TreeNode(data=name, parent=root)
        for child_name in ["2", "1"]:
            TreeNode(data=name + child_name, parent=node)
    return root


def test_sort_children_updates_keys():
    root = make_unsorted()

    sort_children(root)

    assert [node.data for node in root.children] == ["a", "b", "c"]
    assert [node.row_key for node in root.children] == ["0", "1", "2"]
    # only the top level was sorted
    assert [(node.data, node.row_key) for node in root.children[0].children] == [("a2", "0_0"), ("a1", "0_1")]
    for node in iter_depth_first(root):
        if node is not root:
            assert node.get_parent().get_children().count(node) == 1


def test_sort_children_reverse_with_key():
    root = make_unsorted()

    sort_children(root, key=lambda node: node.data, reverse=True)

    assert [node.data for node in root.children] == ["c", "b", "a"]


def test_sort_children_recursive():
    root = make_unsorted()

    sort_children(root, recursive=True)

    assert [(node.data, node.row_key) for node in iter_depth_first(root) if node is not root] == [
        ("a", "0"), ("a1", "0_0"), ("a2", "0_1"),
        ("b", "1"), ("b1", "1_0"), ("b2", "1_1"),
        ("c", "2"), ("c1", "2_0"), ("c2", "2_1"),
    ]
