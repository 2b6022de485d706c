"""
Example forests for demos and tests.

Builds a small two-root category tree, and a deep single-chain tree used to
show that traversal does not depend on the recursion limit.
"""
from treeselect.model import Node


def build_example_forest():
    """
    Two roots: "1" with leaves "1-1" and "1-2", and leaf "2".
    """
    return [
        Node(
            key="1",
            label="A",
            children=(
                Node(key="1-1", label="A1"),
                Node(key="1-2", label="A2"),
            ),
        ),
        Node(key="2", label="B"),
    ]


def build_category_forest():
    """A three-level product category tree with integer keys."""
    return [
        Node(
            key=10,
            label="Electronics",
            children=(
                Node(
                    key=11,
                    label="Computers",
                    children=(
                        Node(key=111, label="Laptops"),
                        Node(key=112, label="Desktops"),
                    ),
                ),
                Node(key=12, label="Phones"),
            ),
        ),
        Node(
            key=20,
            label="Books",
            children=(
                Node(key=21, label="Fiction"),
                Node(key=22, label="Non-fiction"),
            ),
        ),
        Node(key=30, label="Gift cards"),
    ]


def build_chain_forest(depth: int = 5000):
    """A single chain of ``depth`` nodes keyed "0" .. str(depth - 1)."""
    node = Node(key=str(depth - 1), label=f"Level {depth - 1}")
    for level in range(depth - 2, -1, -1):
        node = Node(key=str(level), label=f"Level {level}", children=(node,))
    return [node]
