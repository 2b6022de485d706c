"""
Serialization helpers for forests, selection maps and field options.

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Selection maps keep string keys and the ``checked`` / ``partialChecked``
field names so any consumer reading them back sees the same shape.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml

from treeselect.field import SelectionMode, TreeSelectOptions
from treeselect.model import Forest, Node, SelectionMap, SelectionState, as_forest, normalize_key
from treeselect.selection import entry_is_checked, entry_is_partial


def _node_fields(node: Node) -> Dict[str, Any]:
    return {"key": node.key, "label": node.label, "children": [], "data": node.data}


def node_to_dict(node: Node) -> Dict[str, Any]:
    # Stack-based; the json and yaml encoders still recurse on the result
    root = _node_fields(node)
    stack = [(node, root)]
    while stack:
        current, out = stack.pop()
        for child in current.children or ():
            child_dict = _node_fields(child)
            out["children"].append(child_dict)
            stack.append((child, child_dict))
    return root


def _valid_children(d: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    children = []
    for child in d.get("children") or []:
        if not isinstance(child, Mapping):
            warnings.warn(f"Skipping malformed child of node {d.get('key')!r}: {child!r}", UserWarning)
            continue
        children.append(child)
    return children


def node_from_dict(d: Mapping[str, Any]) -> Node:
    # Post-order over a work stack: a node is built after all of its children
    built: Dict[int, Node] = {}
    stack: List[Tuple[Mapping[str, Any], Optional[List[Mapping[str, Any]]]]] = [(d, None)]
    while stack:
        current, children = stack.pop()
        if children is None:
            children = _valid_children(current)
            stack.append((current, children))
            stack.extend((child, None) for child in children)
            continue
        built[id(current)] = Node(
            key=current.get("key"),
            label=current.get("label") or "",
            children=tuple(built[id(child)] for child in children),
            data=current.get("data"),
        )
    return built[id(d)]


def forest_to_dict(forest: Forest) -> List[Dict[str, Any]]:
    return [node_to_dict(node) for node in as_forest(forest)]


def forest_from_dict(d: Any) -> List[Node]:
    if d is None:
        return []
    if not isinstance(d, list):
        raise TypeError(f"Forest must be a list of nodes, got {type(d).__name__}")
    forest = []
    for item in d:
        if not isinstance(item, Mapping):
            warnings.warn(f"Skipping malformed root node: {item!r}", UserWarning)
            continue
        forest.append(node_from_dict(item))
    return forest


def forest_to_json(forest: Forest) -> str:
    return json.dumps(forest_to_dict(forest))


def forest_from_json(s: str) -> List[Node]:
    return forest_from_dict(json.loads(s))


def forest_to_yaml(forest: Forest) -> str:
    return yaml.safe_dump(forest_to_dict(forest), sort_keys=False)


def forest_from_yaml(s: str) -> List[Node]:
    return forest_from_dict(yaml.safe_load(s))


def selection_to_dict(selection: Optional[Mapping[str, Any]]) -> Dict[str, Dict[str, bool]]:
    return {
        normalize_key(key): {"checked": entry_is_checked(entry), "partialChecked": entry_is_partial(entry)}
        for key, entry in (selection or {}).items()
    }


def selection_from_dict(d: Any) -> SelectionMap:
    if d is None:
        return {}
    if not isinstance(d, Mapping):
        raise TypeError(f"Selection must be a mapping, got {type(d).__name__}")
    selection: SelectionMap = {}
    for key, entry in d.items():
        if not isinstance(entry, Mapping):
            warnings.warn(f"Skipping malformed selection entry {key!r}: {entry!r}", UserWarning)
            continue
        selection[normalize_key(key)] = SelectionState(
            checked=bool(entry.get("checked")),
            partial_checked=bool(entry.get("partialChecked")),
        )
    return selection


def selection_to_json(selection: Optional[Mapping[str, Any]]) -> str:
    return json.dumps(selection_to_dict(selection), sort_keys=True)


def selection_from_json(s: str) -> SelectionMap:
    return selection_from_dict(json.loads(s))


def selection_to_yaml(selection: Optional[Mapping[str, Any]]) -> str:
    return yaml.safe_dump(selection_to_dict(selection))


def selection_from_yaml(s: str) -> SelectionMap:
    return selection_from_dict(yaml.safe_load(s))


_OPTION_FIELDS = (
    "label",
    "placeholder",
    "selection_mode",
    "is_expand",
    "show_mark_all_header",
    "filter",
    "disabled",
    "required",
)


def options_to_dict(options: TreeSelectOptions) -> Dict[str, Any]:
    return {
        "label": options.label,
        "placeholder": options.placeholder,
        "selection_mode": options.selection_mode.value,
        "is_expand": options.is_expand,
        "show_mark_all_header": options.show_mark_all_header,
        "filter": options.filter,
        "disabled": options.disabled,
        "required": options.required,
    }


def options_from_dict(d: Any) -> TreeSelectOptions:
    if d is None:
        return TreeSelectOptions()
    if not isinstance(d, Mapping):
        raise TypeError(f"Options must be a mapping, got {type(d).__name__}")
    unknown = sorted(set(d) - set(_OPTION_FIELDS))
    if unknown:
        warnings.warn(f"Ignoring unknown tree select options: {unknown}", UserWarning)
    kwargs = {name: d[name] for name in _OPTION_FIELDS if name in d}
    if "selection_mode" in kwargs:
        kwargs["selection_mode"] = SelectionMode(kwargs["selection_mode"])
    for flag in ("is_expand", "show_mark_all_header", "filter", "disabled", "required"):
        if flag in kwargs:
            kwargs[flag] = bool(kwargs[flag])
    return TreeSelectOptions(**kwargs)


def options_to_yaml(options: TreeSelectOptions) -> str:
    return yaml.safe_dump(options_to_dict(options))


def options_from_yaml(s: str) -> TreeSelectOptions:
    return options_from_dict(yaml.safe_load(s))
