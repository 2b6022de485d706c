"""
Tests for the expansion planner.
"""

from treeselect.examples import build_category_forest, build_chain_forest, build_example_forest
from treeselect.expansion import plan_expansion, toggle_expansion
from treeselect.model import Node
from treeselect.traversal import iter_nodes


class TestPlanExpansion:
    """Test plan_expansion."""

    def test_example_forest(self):
        assert plan_expansion(build_example_forest()) == {"1": True}

    def test_exactly_internal_nodes(self):
        forest = build_category_forest()
        expected = {node.normalized_key for node in iter_nodes(forest) if node.children}
        assert set(plan_expansion(forest)) == expected
        assert expected == {"10", "11", "20"}

    def test_leaves_never_included(self):
        forest = [Node(key="a"), Node(key="b", children=[])]
        assert plan_expansion(forest) == {}

    def test_empty_and_none(self):
        assert plan_expansion([]) == {}
        assert plan_expansion(None) == {}

    def test_keyless_internal_node_skipped(self):
        forest = [Node(key=None, children=(Node(key="c", children=(Node(key="d"),)),))]
        assert plan_expansion(forest) == {"c": True}

    def test_deterministic(self):
        forest = build_category_forest()
        first = plan_expansion(forest)
        second = plan_expansion(forest)
        assert first == second
        assert first is not second

    def test_deep_chain(self):
        assert len(plan_expansion(build_chain_forest(depth=3000))) == 2999


class TestToggleExpansion:
    """Test toggle_expansion."""

    def test_expand_adds_key(self):
        assert toggle_expansion({}, 1, True) == {"1": True}

    def test_collapse_removes_key(self):
        assert toggle_expansion({"1": True, "2": True}, "1", False) == {"2": True}

    def test_input_not_mutated(self):
        expanded = {"1": True}
        toggle_expansion(expanded, "1", False)
        assert expanded == {"1": True}

    def test_none_map(self):
        assert toggle_expansion(None, "x", True) == {"x": True}
