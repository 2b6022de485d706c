"""
Tests for the tree select field controller.

Tests verify that the field:
    - Seeds expansion state from is_expand
    - Delegates checkbox clicks to the cascade engine
    - Gates mark-all and cascade on its options
    - Passes non-checkbox values through untouched
"""

import pytest
from treeselect.examples import build_category_forest, build_example_forest
from treeselect.field import (
    DEFAULT_PLACEHOLDER,
    SelectionMode,
    TreeSelectError,
    TreeSelectField,
    TreeSelectOptions,
)
from treeselect.model import SelectionState
from treeselect.selection import AggregateState, is_node_checked


class TestExpansionSeeding:
    """Test expanded_keys at mount and on data change."""

    def test_not_expanded_by_default(self):
        field = TreeSelectField(build_example_forest())
        assert field.expanded_keys is None

    def test_is_expand_plans_on_mount(self):
        field = TreeSelectField(build_example_forest(), TreeSelectOptions(is_expand=True))
        assert field.expanded_keys == {"1": True}

    def test_new_forest_replaces_wholesale(self):
        field = TreeSelectField(build_example_forest(), TreeSelectOptions(is_expand=True))
        field.on_toggle("extra", True)
        field.set_forest(build_category_forest())
        assert field.expanded_keys == {"10": True, "11": True, "20": True}

    def test_same_forest_is_noop(self):
        """User expand/collapse state survives re-passing the same tree."""
        forest = build_example_forest()
        field = TreeSelectField(forest, TreeSelectOptions(is_expand=True))
        field.on_toggle("1", False)
        field.set_forest(forest)
        assert field.expanded_keys == {}

    def test_forest_arriving_later(self):
        field = TreeSelectField(None, TreeSelectOptions(is_expand=True))
        assert field.expanded_keys is None
        field.set_forest(build_example_forest())
        assert field.expanded_keys == {"1": True}


class TestCheckboxMode:
    """Test cascading selection through the field."""

    def test_initial_value_empty_map(self):
        field = TreeSelectField(build_example_forest())
        assert field.value == {}
        assert field.aggregate_state is AggregateState.NONE

    def test_check_cascades(self):
        forest = build_example_forest()
        field = TreeSelectField(forest)
        value = field.check(forest[0], True)
        assert value is field.value
        assert set(value) == {"1", "1-1", "1-2"}
        assert field.aggregate_state is AggregateState.PARTIAL

    def test_value_replaced_not_mutated(self):
        forest = build_example_forest()
        field = TreeSelectField(forest)
        before = field.value
        field.check(forest[1], True)
        assert before == {}

    def test_initial_value_kept(self):
        forest = build_example_forest()
        initial = {"2": SelectionState(checked=True)}
        field = TreeSelectField(forest, value=initial)
        field.check(forest[0], True)
        assert field.all_selected

    def test_mark_all(self):
        forest = build_example_forest()
        field = TreeSelectField(forest, TreeSelectOptions(show_mark_all_header=True))
        field.mark_all(True)
        assert field.all_selected
        assert field.aggregate_state is AggregateState.ALL
        field.mark_all(False)
        assert field.value == {}

    def test_mark_all_requires_header(self):
        field = TreeSelectField(build_example_forest())
        with pytest.raises(TreeSelectError):
            field.mark_all(True)

    def test_disabled_rejects_changes(self):
        forest = build_example_forest()
        field = TreeSelectField(forest, TreeSelectOptions(disabled=True))
        with pytest.raises(TreeSelectError):
            field.check(forest[0], True)
        with pytest.raises(TreeSelectError):
            field.set_value({})
        assert not is_node_checked(field.value, "1")


class TestPassThroughModes:
    """Test single and multiple modes, which the engine does not manage."""

    def test_single_mode_value_opaque(self):
        field = TreeSelectField(build_example_forest(), TreeSelectOptions(selection_mode=SelectionMode.SINGLE))
        assert field.value is None
        field.set_value("1-2")
        assert field.value == "1-2"

    def test_single_mode_rejects_cascade(self):
        forest = build_example_forest()
        field = TreeSelectField(forest, TreeSelectOptions(selection_mode=SelectionMode.SINGLE))
        with pytest.raises(TreeSelectError):
            field.check(forest[0], True)

    def test_mark_all_hidden_outside_checkbox_mode(self):
        options = TreeSelectOptions(selection_mode=SelectionMode.MULTIPLE, show_mark_all_header=True)
        field = TreeSelectField(build_example_forest(), options)
        assert not field.show_mark_all_header
        assert not field.all_selected
        with pytest.raises(TreeSelectError):
            field.mark_all(True)


def test_placeholder_default():
    assert TreeSelectField([]).placeholder == DEFAULT_PLACEHOLDER
    assert TreeSelectField([], TreeSelectOptions(placeholder="Pick")).placeholder == "Pick"
