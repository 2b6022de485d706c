"""
Key collection over a forest of nodes.

Every traversal in the package goes through ``iter_nodes``, a pre-order walk
driven by an explicit stack so that deep trees never hit the recursion limit.
"""

from typing import Iterator, List, Optional

from treeselect.model import Forest, Node, as_forest


def iter_nodes(forest: Optional[Forest]) -> Iterator[Node]:
    """Yield every node reachable through ``children``, in pre-order."""
    stack: List[Node] = list(reversed(as_forest(forest)))
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        if node.children:
            # Reversed so the first child is popped next
            stack.extend(reversed(list(node.children)))


def collect_all_node_keys(forest: Optional[Forest]) -> List[str]:
    """
    Collect the keys of every node in the forest.

    Nodes without a key are skipped, but their children are still visited.
    Keys are not deduplicated: a duplicate key is a data error of the caller.

    Returns:
        Normalized keys in pre-order. Empty for an empty or ``None`` forest.
    """
    keys: List[str] = []
    for node in iter_nodes(forest):
        key = node.normalized_key
        if key is not None:
            keys.append(key)
    return keys
