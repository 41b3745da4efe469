import pytest

from tree_node_model.config import TreeConfig, set_tree_config
from tree_node_model.models.node import TreeNode


@pytest.fixture(autouse=True)
def default_tree_config():
    set_tree_config(TreeConfig())
    yield
    set_tree_config(TreeConfig())


@pytest.fixture
def tree():
    """
    root
    ├── a        "0"
    │   └── a0   "0_0"
    │       └── a00  "0_0_0"
    ├── b        "1"
    └── c        "2"
        └── c0   "2_0"
    """
    root = TreeNode(data="root")
    nodes = {"root": root}
    nodes["a"] = TreeNode(data="a", parent=root)
    nodes["b"] = TreeNode(data="b", parent=root)
    nodes["c"] = TreeNode(data="c", parent=root)
    nodes["a0"] = TreeNode(data="a0", parent=nodes["a"])
    nodes["a00"] = TreeNode(data="a00", parent=nodes["a0"])
    nodes["c0"] = TreeNode(data="c0", parent=nodes["c"])
    return nodes
