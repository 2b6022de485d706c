"""
Forest Analyzer — diagnostics and inventory of a forest and its selection.

This module provides lightweight analysis of option trees:
    - Node inventory (internal / leaf / keyless)
    - Duplicate key detection
    - Selection consistency against the full-subtree invariant
    - Warning flags for data-integrity problems

IMPORTANT: The engine recovers silently from malformed input. This module
is where a caller goes to find out what was recovered from. It does NOT
modify the forest or the selection. It only produces read-only reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Set, Tuple

from treeselect.model import Forest, Node, as_forest
from treeselect.selection import (
    AggregateState,
    aggregate_state,
    count_checked,
    entry_is_checked,
    entry_is_partial,
)
from treeselect.traversal import collect_all_node_keys


def _walk_with_depth(forest: Optional[Forest]) -> List[Tuple[Node, int]]:
    """Pre-order list of (node, depth) pairs; roots have depth 1."""
    visited: List[Tuple[Node, int]] = []
    stack = [(node, 1) for node in reversed(as_forest(forest))]
    while stack:
        node, depth = stack.pop()
        if node is None:
            continue
        visited.append((node, depth))
        stack.extend((child, depth + 1) for child in reversed(list(node.children or ())))
    return visited


@dataclass
class ForestReport:
    """Analysis report for a forest and (optionally) a selection."""

    total_nodes: int = 0
    internal_nodes: int = 0
    leaf_nodes: int = 0
    max_depth: int = 0

    # Key integrity
    keyless_nodes: int = 0
    duplicate_keys: Set[str] = field(default_factory=set)

    # Selection
    checked_count: int = 0
    aggregate: AggregateState = AggregateState.NONE
    unknown_selected_keys: Set[str] = field(default_factory=set)
    invariant_violations: Set[str] = field(default_factory=set)  # Checked internal nodes with an unchecked descendant
    partial_markers: Set[str] = field(default_factory=set)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_forest(forest: Optional[Forest], selection: Optional[Mapping[str, Any]] = None) -> ForestReport:
    """
    Perform analysis of a forest and its selection map.

    Checks for:
    - Node counts and depth
    - Keyless nodes and duplicate keys
    - Selected keys that name no node
    - Violations of the full-subtree invariant
    - Partial markers passed through from the host

    Returns a ForestReport with metrics and warnings.
    """
    report = ForestReport()
    selection = selection or {}

    # =========================================================================
    # 1. NODE INVENTORY
    # =========================================================================

    walked = _walk_with_depth(forest)
    report.total_nodes = len(walked)
    for node, depth in walked:
        report.max_depth = max(report.max_depth, depth)
        if node.children:
            report.internal_nodes += 1
        else:
            report.leaf_nodes += 1
        if node.normalized_key is None:
            report.keyless_nodes += 1

    all_keys = collect_all_node_keys(forest)
    report.duplicate_keys = {key for key, count in Counter(all_keys).items() if count > 1}

    # =========================================================================
    # 2. SELECTION CONSISTENCY
    # =========================================================================

    known_keys = set(all_keys)
    report.checked_count = count_checked(selection)
    report.aggregate = aggregate_state(forest, selection)

    for key, entry in selection.items():
        if key not in known_keys:
            report.unknown_selected_keys.add(key)
        if entry_is_partial(entry):
            report.partial_markers.add(key)

    for node, _ in walked:
        key = node.normalized_key
        if key is None or not node.children or not entry_is_checked(selection.get(key)):
            continue
        descendants = collect_all_node_keys(node.children)
        if any(not entry_is_checked(selection.get(d)) for d in descendants):
            report.invariant_violations.add(key)

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.keyless_nodes:
        report.add_warning(f"Nodes without a key: {report.keyless_nodes}")

    if report.duplicate_keys:
        report.add_warning(f"Duplicate keys: {', '.join(sorted(report.duplicate_keys))}")

    if report.unknown_selected_keys:
        report.add_warning(
            f"Selected keys not in forest: {', '.join(sorted(report.unknown_selected_keys))}"
        )

    if report.invariant_violations:
        report.add_warning(
            f"Checked nodes with unchecked descendants: {', '.join(sorted(report.invariant_violations))}"
        )

    return report
