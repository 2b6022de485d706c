"""
Selection Engine: cascading checkbox selection over a forest.

Every operation here is a pure function. It receives the current selection
map by reference, never modifies it, and returns a new map.

INVARIANT (full subtree):
    A key present with checked=True that names an internal node implies every
    descendant key is present with checked=True.

The engine upholds the invariant for the subtree it is asked to change. It
does not repair inconsistencies elsewhere in the map.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from treeselect.model import CHECKED, Forest, Node, SelectionMap, normalize_key
from treeselect.traversal import collect_all_node_keys


class AggregateState(Enum):
    """Summary of a selection against its forest (mark-all header state)."""
    NONE = "none"
    PARTIAL = "partial"
    ALL = "all"


def entry_is_checked(entry: Any) -> bool:
    """Read ``checked`` from a SelectionState or a plain host mapping."""
    if entry is None:
        return False
    if isinstance(entry, Mapping):
        return bool(entry.get("checked"))
    return bool(getattr(entry, "checked", False))


def entry_is_partial(entry: Any) -> bool:
    """Read the pass-through partial marker (``partialChecked`` in mappings)."""
    if entry is None:
        return False
    if isinstance(entry, Mapping):
        return bool(entry.get("partialChecked"))
    return bool(getattr(entry, "partial_checked", False))


def toggle_node(
    node: Optional[Node],
    current_selection: Optional[Mapping[str, Any]],
    checked: bool,
) -> SelectionMap:
    """
    Apply a checkbox change to ``node`` and its whole subtree.

    Args:
        node: The node being toggled. ``None`` is a no-op.
        current_selection: The current selection map (``None`` is empty)
        checked: Target state

    Returns:
        A new selection map. Checking writes a checked, non-partial entry
        for the node and every descendant; unchecking deletes them.
    """
    next_selection = dict(current_selection or {})
    if node is None:
        return next_selection

    subtree_keys = collect_all_node_keys([node])
    if checked:
        for key in subtree_keys:
            next_selection[key] = CHECKED
    else:
        for key in subtree_keys:
            next_selection.pop(key, None)

    return next_selection


def select_all(forest: Optional[Forest]) -> SelectionMap:
    """Select every node of the forest. Replaces any prior selection."""
    return {key: CHECKED for key in collect_all_node_keys(forest)}


def clear_all() -> SelectionMap:
    """Return an empty selection map."""
    return {}


def count_checked(selection: Optional[Mapping[str, Any]]) -> int:
    """Count the entries whose ``checked`` field is truthy."""
    if not selection:
        return 0
    return sum(1 for entry in selection.values() if entry_is_checked(entry))


def is_all_selected(forest: Optional[Forest], selection: Optional[Mapping[str, Any]]) -> bool:
    """
    True iff every node of a non-empty forest is checked.

    An empty forest is never "all selected", so a mark-all checkbox over an
    empty tree is not shown as checked.
    """
    total = len(collect_all_node_keys(forest))
    return total > 0 and count_checked(selection) == total


def is_node_checked(selection: Optional[Mapping[str, Any]], key: Any) -> bool:
    """
    Whether ``key`` is checked in ``selection``.

    A missing or malformed entry is unchecked; absence is the normal
    representation of "unchecked" and never an error.
    """
    normalized = normalize_key(key)
    if normalized is None or not selection:
        return False
    return entry_is_checked(selection.get(normalized))


def aggregate_state(forest: Optional[Forest], selection: Optional[Mapping[str, Any]]) -> AggregateState:
    if is_all_selected(forest, selection):
        return AggregateState.ALL
    if count_checked(selection) == 0:
        return AggregateState.NONE
    return AggregateState.PARTIAL
