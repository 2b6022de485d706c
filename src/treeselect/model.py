"""
Core Tree Selection Objects

Defines the data structures shared by every algorithm in the package:
    - Nodes (one entry of the option tree)
    - Selection states (per-key checked record)
    - Forest / SelectionMap / ExpansionMap aliases

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about rendering or forms
        - Are never mutated by the engine
        - Are fully serializable
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


def normalize_key(key: Any) -> Optional[str]:
    """
    Normalize a node key to its string form.

    Keys of any primitive type (int, float, str) are compared by their
    string form, so node ``1`` and selection entry ``"1"`` are the same key.
    ``None`` stays ``None`` and means "no key".
    """
    if key is None:
        return None
    return key if isinstance(key, str) else str(key)


@dataclass(frozen=True)
class Node:
    """
    Represents one entry in the hierarchical option tree.

    Properties:
        key:
            Identifier, unique across the whole forest (not just siblings).
            Any primitive; normalized with ``normalize_key`` wherever it is
            used as a map key. ``None`` marks a keyless node, which every
            traversal skips.

        label:
            Human-readable text (rendering is the host's concern)

        children:
            Ordered child nodes. Non-empty means the node is internal;
            None is read as no children.

        data:
            Opaque host payload carried through unchanged

    INVARIANT:
        The tree is immutable input owned by the caller.
    """

    key: Any
    label: str = ""
    children: Sequence["Node"] = field(default_factory=tuple)
    data: Any = None

    @property
    def normalized_key(self) -> Optional[str]:
        return normalize_key(self.key)

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True)
class SelectionState:
    """
    Per-key record describing whether a key is selected.

    Properties:
        checked:
            True when the key is fully selected

        partial_checked:
            "Some but not all descendants checked". Pass-through metadata
            from the host widget only; the engine never treats it as
            authoritative and always writes False on cascade.
    """

    checked: bool
    partial_checked: bool = False


Forest = Sequence[Node]

# Absence of a key means "not checked".
SelectionMap = Dict[str, SelectionState]

# Contains exactly the internal-node keys rendered expanded.
ExpansionMap = Dict[str, bool]

CHECKED = SelectionState(checked=True, partial_checked=False)


def as_forest(forest: Optional[Forest]) -> List[Node]:
    """Treat a missing forest as empty."""
    if forest is None:
        return []
    return list(forest)
