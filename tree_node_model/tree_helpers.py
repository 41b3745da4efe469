from logger.logger_service import get_logger

from tree_node_model.config import get_tree_config

logger = get_logger(__name__)


def row_key_path(node):
    """
    Compute the row key node should have from its actual position chain, walking up to
    the root. Returns None for a root, which has no position.
    """
    if node.get_parent() is None:
        return None

    positions = []
    current = node
    while current.get_parent() is not None:
        parent = current.get_parent()
        positions.append(str(parent.get_children().index(current)))
        current = parent

    return get_tree_config().row_key_separator.join(reversed(positions))


def find_by_row_key(root, row_key):
    """
    Resolve a row key to the node it addresses under root, following the positions it
    is made of. Returns None if the key is malformed or points past the tree.
    """
    if not row_key:
        return None

    node = root
    for part in row_key.split(get_tree_config().row_key_separator):
        # only the canonical spelling str(position) addresses a row
        if not (part.isascii() and part.isdigit()):
            return None
        position = int(part)
        if str(position) != part:
            return None
        if position >= node.get_child_count():
            return None
        node = node.get_children()[position]

    return node


def iter_depth_first(node):
    """Yield node and then its descendants, pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        if current.get_child_count():
            stack.extend(reversed(current.get_children()[:]))


def find_child_of_type(node, klass):
    """First direct child of node that is an instance of klass, or None."""
    if not node.get_child_count():
        return None

    for child in node.get_children():
        if isinstance(child, klass):
            return child

    return None


def sort_children(node, key=None, reverse=False, recursive=False):
    """
    Stable sort of node's children by key(child) (by default the child's data).

    Children are put back with set_sibling and the row keys recomputed once at the
    end, so the cost does not multiply with the number of moved children.
    """
    if key is None:
        key = _data_key

    nodes = [node] if not recursive else list(iter_depth_first(node))
    for parent in nodes:
        if parent.get_child_count() < 2:
            continue

        children = parent.get_children()
        ordered = sorted(children, key=key, reverse=reverse)
        for i, child in enumerate(ordered):
            children.set_sibling(i, child)
        children.update_row_keys()

    logger.debug(f"Sorted children of {len(nodes)} node(s) under {node!r}")


def _data_key(node):
    return node.data
