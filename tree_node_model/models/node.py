import weakref

from traits.api import Any, Bool, HasTraits, Int, Property, Str, provides

from tree_node_model.consts import DEFAULT_NODE_TYPE
from tree_node_model.interfaces.i_tree_node import ITreeNode
from tree_node_model.models.children import TreeNodeChildren


@provides(ITreeNode)
class TreeNode(HasTraits):
    """
    A row of a tree or tree table.

    The children list is the only owning edge of the tree; parent is a weak back
    reference maintained by TreeNodeChildren. Attach nodes through the children of
    their new parent (or the parent argument of the constructor), never by assigning
    parent directly.
    """

    type = Str(DEFAULT_NODE_TYPE)
    data = Any()

    # str once placed in a tree, None before that and again after removal
    row_key = Any(None)

    expanded = Bool(False)
    selected = Bool(False)
    selectable = Bool(True)
    partial_selected = Bool(False)

    parent = Property()
    children = Property()
    child_count = Property(Int)
    is_leaf = Property(Bool)
    is_root = Property(Bool)

    _parent_ref = Any()
    _children = Any()

    def __init__(self, type=DEFAULT_NODE_TYPE, data=None, parent=None, **traits):
        super().__init__(type=type, data=data, **traits)
        if parent is not None:
            parent.get_children().append(self)

    # ------------------------------------------------------------------
    # ITreeNode interface
    # ------------------------------------------------------------------

    def get_parent(self):
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def set_parent(self, parent):
        old = self.get_parent()
        self._parent_ref = None if parent is None else weakref.ref(parent)
        if old is not parent:
            self.trait_property_changed("parent", old, parent)

    def clear_parent(self):
        self.set_parent(None)
        self.row_key = None

    def get_children(self):
        if self._children is None:
            self._children = TreeNodeChildren(self)
        return self._children

    def get_child_count(self):
        return 0 if self._children is None else len(self._children)

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def add_child(self, node):
        """Append node to this node's children and return it for chaining."""
        self.get_children().append(node)
        return node

    def _get_parent(self):
        return self.get_parent()

    def _get_children(self):
        return self.get_children()

    def _get_child_count(self):
        return self.get_child_count()

    def _get_is_leaf(self):
        return self.get_child_count() == 0

    def _get_is_root(self):
        return self.get_parent() is None

    def __repr__(self):
        return f"{type(self).__name__}(type={self.type!r}, data={self.data!r}, row_key={self.row_key!r})"
