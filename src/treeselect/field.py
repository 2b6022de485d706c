"""
Tree Select Field: host-side state holder for one form field.

The field owns the two mutable values a tree-select widget renders:
    - value: the selection map (checkbox mode) or an opaque value
    - expanded_keys: which internal nodes are rendered expanded

The UI layer only translates input events into calls on this object:
    checkbox click      -> check(node, checked)
    mark-all header     -> mark_all(checked)
    expand/collapse     -> on_toggle(key, expanded)
    new option data     -> set_forest(forest)

All subtree logic lives in the selection and expansion modules.

Thread Safety: drive a field from a single thread only. No internal locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from treeselect.expansion import plan_expansion, toggle_expansion
from treeselect.model import ExpansionMap, Forest, Node, as_forest
from treeselect.selection import (
    AggregateState,
    aggregate_state,
    clear_all,
    is_all_selected,
    select_all,
    toggle_node,
)

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "Select"


class TreeSelectError(Exception):
    """Raised when the host drives a field in a way its options forbid."""
    pass


class SelectionMode(Enum):
    """Selection modes of a tree-select widget. Only CHECKBOX cascades."""
    SINGLE = "single"
    MULTIPLE = "multiple"
    CHECKBOX = "checkbox"


@dataclass
class TreeSelectOptions:
    """
    Configuration of one tree-select field.

    Properties:
        label: Field label shown by the host
        placeholder: Empty-state text; None falls back to DEFAULT_PLACEHOLDER
        selection_mode: See SelectionMode
        is_expand: Expand every internal node whenever the tree changes
        show_mark_all_header: Offer the select-all / clear-all header
        filter: Offer the filter box (host concern, carried through)
        disabled: Reject every value change
        required: Carried through for the host's validation layer
    """

    label: str = ""
    placeholder: Optional[str] = None
    selection_mode: SelectionMode = SelectionMode.CHECKBOX
    is_expand: bool = False
    show_mark_all_header: bool = False
    filter: bool = True
    disabled: bool = False
    required: bool = False

    @property
    def cascades(self) -> bool:
        return self.selection_mode is SelectionMode.CHECKBOX


class TreeSelectField:
    """
    Holds the current value and expansion state of a tree-select field.

    Every change replaces ``value`` (or ``expanded_keys``) with a new object
    computed by the engine; previous values are never modified.
    """

    def __init__(
        self,
        forest: Optional[Forest] = None,
        options: Optional[TreeSelectOptions] = None,
        value: Any = None,
    ) -> None:
        self.options = options or TreeSelectOptions()
        if value is None and self.options.cascades:
            value = clear_all()
        self.value: Any = value
        self.expanded_keys: Optional[ExpansionMap] = None
        self._forest: Optional[Forest] = None
        self._forest_set = False
        self.set_forest(forest)

    @property
    def forest(self) -> Forest:
        return as_forest(self._forest)

    @property
    def placeholder(self) -> str:
        return self.options.placeholder or DEFAULT_PLACEHOLDER

    @property
    def show_mark_all_header(self) -> bool:
        return self.options.cascades and self.options.show_mark_all_header

    @property
    def all_selected(self) -> bool:
        if not self.options.cascades:
            return False
        return is_all_selected(self._forest, self.value)

    @property
    def aggregate_state(self) -> AggregateState:
        if not self.options.cascades:
            return AggregateState.NONE
        return aggregate_state(self._forest, self.value)

    def set_forest(self, forest: Optional[Forest]) -> None:
        """
        Replace the option tree.

        When ``is_expand`` is set, the expansion map is recomputed and
        replaces the previous one wholesale. Passing the forest object that
        is already held does nothing.
        """
        if self._forest_set and forest is self._forest:
            return
        self._forest = forest
        self._forest_set = True
        if forest is not None and self.options.is_expand:
            self.expanded_keys = plan_expansion(forest)
            logger.debug("Expanded %d internal nodes", len(self.expanded_keys))

    def set_value(self, value: Any) -> None:
        """Store a host-supplied value unchanged."""
        self._ensure_enabled()
        self.value = value

    def check(self, node: Optional[Node], checked: bool) -> Any:
        """Apply a checkbox click on ``node`` and return the new value."""
        self._ensure_enabled()
        if not self.options.cascades:
            raise TreeSelectError(
                f"Cascading check requires checkbox mode, field is {self.options.selection_mode.value}"
            )
        self.value = toggle_node(node, self.value, checked)
        logger.debug(
            "Node %r set to %s, %d keys selected",
            None if node is None else node.key, checked, len(self.value),
        )
        return self.value

    def mark_all(self, checked: bool) -> Any:
        """Select or clear every node from the mark-all header."""
        self._ensure_enabled()
        if not self.show_mark_all_header:
            raise TreeSelectError("Mark-all header is not enabled for this field")
        self.value = select_all(self._forest) if checked else clear_all()
        logger.debug("Mark all set to %s, %d keys selected", checked, len(self.value))
        return self.value

    def on_toggle(self, key: Any, expanded: bool) -> ExpansionMap:
        """Record an expand/collapse event from the widget."""
        self.expanded_keys = toggle_expansion(self.expanded_keys, key, expanded)
        return self.expanded_keys

    def _ensure_enabled(self) -> None:
        if self.options.disabled:
            raise TreeSelectError("Field is disabled")
