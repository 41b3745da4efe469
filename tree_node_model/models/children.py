from logger.logger_service import get_logger

from tree_node_model.config import get_tree_config
from tree_node_model.exceptions import InvalidNodeError, NodeIndexError
from tree_node_model.models.node_list import TreeNodeList

logger = get_logger(__name__)


class TreeNodeChildren(TreeNodeList):
    """
    Children of one tree node.

    Every mutation keeps two things true for the nodes held here: their parent is the
    owner of this collection (a node added here is first removed from wherever it was),
    and their row key is the owner's row key joined with their position. Only the
    positions a mutation touched are recomputed, and a child whose key comes out
    unchanged keeps its whole subtree untouched.
    """

    def __init__(self, owner):
        super().__init__()
        self.owner = owner

    # ------------------------------------------------------------------
    # Guards
    # ------------------------------------------------------------------

    def _check_node(self, node):
        if node is None:
            raise InvalidNodeError("tree node children cannot hold None")

        # a node below itself would make the key recompute walk forever
        ancestor = self.owner
        while ancestor is not None:
            if ancestor is node:
                raise InvalidNodeError(f"{node!r} cannot become a child of its own subtree")
            ancestor = ancestor.get_parent()

    def _check_index(self, index, size):
        if not 0 <= index < size:
            raise NodeIndexError(f"index {index} out of range for {len(self._nodes)} children")

    @staticmethod
    def _erase_parent(node):
        parent = node.get_parent()
        if parent is not None:
            # recomputes the old parent's keys before the node lands anywhere else
            parent.get_children().remove(node)
            node.clear_parent()

    # ------------------------------------------------------------------
    # Adding
    # ------------------------------------------------------------------

    def append(self, node):
        self._check_node(node)
        self._erase_parent(node)

        # taken after the erase, the node may have come from this very list
        old_size = len(self._nodes)
        self._nodes.append(node)
        node.set_parent(self.owner)
        self._update_row_keys(old_size)
        return True

    def insert(self, index, node):
        """
        Insert node at index, 0 <= index <= len(self).

        A node moved within this list leaves it first, so index is a position in the
        list without it (clamped to the end).
        """
        self._check_node(node)
        self._check_index(index, len(self._nodes) + 1)
        self._erase_parent(node)

        index = min(index, len(self._nodes))
        self._nodes.insert(index, node)
        node.set_parent(self.owner)
        self._update_row_keys(index)

    def extend(self, nodes):
        """
        Append every node of nodes, recomputing keys once at the end.

        Not transactional: a None element raises InvalidNodeError and the nodes before it
        stay appended, with row keys left stale until update_row_keys() is called.

        Returns:
            whether anything was appended
        """
        nodes = list(nodes)
        changed = False
        anchor = len(self._nodes)

        for position, node in enumerate(nodes):
            try:
                self._check_node(node)
            except InvalidNodeError:
                logger.debug(f"Batch append rejected element {position}, {position} node(s) kept")
                raise

            self._erase_parent(node)
            anchor = min(anchor, len(self._nodes))
            self._nodes.append(node)
            node.set_parent(self.owner)
            changed = True

        if changed:
            self._update_row_keys(anchor)

        return changed

    def insert_all(self, index, nodes):
        """
        Insert nodes one after the other starting at index, recomputing keys once at the
        end. Same partial-commit behaviour as extend().
        """
        nodes = list(nodes)
        self._check_index(index, len(self._nodes) + 1)
        changed = False
        cursor = anchor = index

        for position, node in enumerate(nodes):
            try:
                self._check_node(node)
            except InvalidNodeError:
                logger.debug(f"Batch insert at {index} rejected element {position}, {position} node(s) kept")
                raise

            self._erase_parent(node)
            cursor = min(cursor, len(self._nodes))
            anchor = min(anchor, cursor)
            self._nodes.insert(cursor, node)
            node.set_parent(self.owner)
            cursor += 1
            changed = True

        if changed:
            self._update_row_keys(anchor)

        return changed

    # ------------------------------------------------------------------
    # Replacing
    # ------------------------------------------------------------------

    def set(self, index, node):
        """
        Replace the child at index with node and return the displaced child.

        The displaced child loses its parent unless it still sits at another position of
        this list (as happens halfway through swapping two siblings). Replacing a child
        with itself changes nothing.
        """
        self._check_node(node)
        self._check_index(index, len(self._nodes))

        if node.get_parent() is not self.owner:
            self._erase_parent(node)

        previous = self._nodes[index]
        if previous is node:
            return previous

        self._nodes[index] = node
        if previous not in self:
            previous.clear_parent()
        node.set_parent(self.owner)
        self._update_row_keys(index, index + 1)
        return previous

    def set_sibling(self, index, node):
        """
        Optimized set to be used in sorting.

        Neither clears the displaced child's parent nor recomputes any key; callers
        reordering many siblings finish with a single update_row_keys().
        """
        self._check_node(node)
        self._check_index(index, len(self._nodes))

        if node.get_parent() is not self.owner:
            self._erase_parent(node)

        previous = self._nodes[index]
        self._nodes[index] = node
        node.set_parent(self.owner)
        return previous

    def __setitem__(self, index, node):
        if isinstance(index, slice):
            raise TypeError("slice assignment is not supported on tree node children")
        self.set(index, node)

    def reverse(self):
        nodes = list(reversed(self._nodes))
        for i, node in enumerate(nodes):
            self.set_sibling(i, node)
        self.update_row_keys()

    # ------------------------------------------------------------------
    # Removing
    # ------------------------------------------------------------------

    def remove_at(self, index):
        self._check_index(index, len(self._nodes))

        node = self._nodes[index]
        node.clear_parent()
        del self._nodes[index]
        self._update_row_keys(index)
        return node

    def remove(self, node):
        """
        Remove node if it is a child here.

        Returns:
            False, without touching anything, when node is not a child here
        """
        if node is None:
            raise InvalidNodeError("tree node children cannot hold None")

        index = self.index_of(node)
        if index == -1:
            return False

        self.remove_at(index)
        return True

    def __delitem__(self, index):
        if isinstance(index, slice):
            raise TypeError("slice deletion is not supported on tree node children")
        self.remove_at(index)

    def pop(self, index=-1):
        if index < 0:
            index += len(self._nodes)
        return self.remove_at(index)

    def clear(self):
        while self._nodes:
            self.remove_at(len(self._nodes) - 1)

    # ------------------------------------------------------------------
    # Row keys
    # ------------------------------------------------------------------

    def update_row_keys(self):
        """Recompute the row keys of every child (and, where they change, below)."""
        self._update_row_keys(0)

    def _update_row_keys(self, begin, end=None):
        if end is None:
            end = len(self._nodes)
        if end <= begin:
            return

        separator = get_tree_config().row_key_separator
        updated = 0

        # explicit stack of (parent, remaining positions), visiting in the same order as
        # a recursive walk without being bounded by the recursion limit
        stack = [(self.owner, iter(range(begin, end)))]
        while stack:
            parent, positions = stack[-1]
            position = next(positions, None)
            if position is None:
                stack.pop()
                continue

            child = parent.get_children()[position]
            if parent.get_parent() is None:
                row_key = str(position)
            else:
                row_key = f"{parent.row_key}{separator}{position}"

            if row_key != child.row_key:
                child.row_key = row_key
                updated += 1
                stack.append((child, iter(range(child.get_child_count()))))

        if updated:
            logger.debug(f"Updated {updated} row key(s) under {self.owner!r} from position {begin}")
