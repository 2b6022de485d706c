"""
Tree Selection Engine Package

Cascading checkbox selection over a tree of labeled nodes.

ARCHITECTURAL GUARANTEE:
------------------------
The engine modules (model, traversal, selection, expansion) contain ZERO
knowledge of:
    - Rendering or CSS
    - Translation lookup
    - Form validation wiring
    - Persistence

They are pure functions from (tree, previous value, requested change)
to the next value. The host form holds the value; the engine computes it.
"""

from treeselect.model import Node, SelectionState, normalize_key
from treeselect.traversal import collect_all_node_keys, iter_nodes
from treeselect.selection import (
    AggregateState,
    aggregate_state,
    clear_all,
    count_checked,
    is_all_selected,
    is_node_checked,
    select_all,
    toggle_node,
)
from treeselect.expansion import plan_expansion, toggle_expansion

__version__ = "0.1.0"
