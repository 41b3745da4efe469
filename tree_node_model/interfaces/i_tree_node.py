from traits.api import Any, Bool, Interface, Str


class ITreeNode(Interface):
    type = Str
    data = Any
    row_key = Any  # str, or None while the node is not positioned in a tree
    expanded = Bool
    selected = Bool

    def get_parent(self):
        """Return the node owning this one, or None for a root"""

    def set_parent(self, parent):
        """Point the back reference at parent without touching any collection"""

    def clear_parent(self):
        """Drop the back reference and forget the row key"""

    def get_children(self):
        """Return the collection of children owned by this node"""

    def get_child_count(self) -> int:
        """Number of direct children"""
