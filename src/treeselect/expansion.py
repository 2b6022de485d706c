"""
Expansion Planner: initial "expand all" state for tree display.

This is a derived value computed once per forest, not an incrementally
maintained one. Recomputing for an unchanged forest yields an equal map.
"""

from typing import Any, Mapping, Optional

from treeselect.model import ExpansionMap, Forest, normalize_key
from treeselect.traversal import iter_nodes


def plan_expansion(forest: Optional[Forest]) -> ExpansionMap:
    """
    Mark every internal node as expanded.

    Every node with a non-empty ``children`` sequence is included, at any
    depth. Leaves and keyless nodes never appear in the result.
    """
    expanded: ExpansionMap = {}
    for node in iter_nodes(forest):
        key = node.normalized_key
        if node.children and key is not None:
            expanded[key] = True
    return expanded


def toggle_expansion(
    expanded: Optional[Mapping[str, bool]],
    key: Any,
    expanded_state: bool,
) -> ExpansionMap:
    """Return a copy of ``expanded`` with ``key`` expanded or collapsed."""
    next_expanded = dict(expanded or {})
    normalized = normalize_key(key)
    if normalized is None:
        return next_expanded
    if expanded_state:
        next_expanded[normalized] = True
    else:
        next_expanded.pop(normalized, None)
    return next_expanded
