"""
Test the example forests used by the demo.
"""

from treeselect.examples import build_category_forest, build_chain_forest, build_example_forest
from treeselect.traversal import collect_all_node_keys


def test_example_forest_structure():
    forest = build_example_forest()
    assert len(forest) == 2
    assert [child.key for child in forest[0].children] == ["1-1", "1-2"]
    assert forest[1].is_leaf


def test_category_forest_uses_integer_keys():
    forest = build_category_forest()
    assert forest[0].key == 10
    assert "111" in collect_all_node_keys(forest)


def test_chain_forest_depth():
    forest = build_chain_forest(depth=10)
    node = forest[0]
    depth = 1
    while node.children:
        node = node.children[0]
        depth += 1
    assert depth == 10
    assert node.key == "9"
