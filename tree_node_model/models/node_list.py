from collections.abc import MutableSequence


class TreeNodeList(MutableSequence):
    """
    Ordered list of tree nodes.

    Membership and lookups compare nodes by identity, two nodes carrying equal data are
    still different rows. Subclasses add ownership rules on top of the plain list
    operations kept here.
    """

    def __init__(self, nodes=()):
        self._nodes = list(nodes)

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        return iter(self._nodes)

    def __getitem__(self, index):
        if isinstance(index, slice):
            # slices are detached snapshots, never views on the live list
            return list(self._nodes[index])
        return self._nodes[index]

    def __setitem__(self, index, node):
        self._nodes[index] = node

    def __delitem__(self, index):
        del self._nodes[index]

    def insert(self, index, node):
        self._nodes.insert(index, node)

    def __contains__(self, node):
        return any(item is node for item in self._nodes)

    def index(self, node, start=0, stop=None):
        stop = len(self._nodes) if stop is None else stop
        for i in range(start, min(stop, len(self._nodes))):
            if self._nodes[i] is node:
                return i
        raise ValueError(f"{node!r} is not in list")

    def count(self, node):
        return sum(1 for item in self._nodes if item is node)

    def index_of(self, node):
        """Position of node, or -1 when it is not a member."""
        try:
            return self.index(node)
        except ValueError:
            return -1

    def __eq__(self, other):
        if isinstance(other, TreeNodeList):
            other = other._nodes
        if not isinstance(other, list):
            return NotImplemented
        return len(self._nodes) == len(other) and all(a is b for a, b in zip(self._nodes, other))

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self._nodes!r})"
