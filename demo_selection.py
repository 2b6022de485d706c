"""
Demo: drive a tree select field through a few clicks and print the state.
"""

import logging

from treeselect.analyzer import analyze_forest
from treeselect.examples import build_category_forest
from treeselect.field import TreeSelectField, TreeSelectOptions
from treeselect.serialization import selection_to_yaml


def print_state(title, field):
    print()
    print("=" * 70)
    print(title)
    print("=" * 70)
    print(f"  Aggregate:     {field.aggregate_state.value}")
    print(f"  All selected:  {field.all_selected}")
    print(f"  Expanded:      {sorted(field.expanded_keys or {})}")
    print("  Selection:")
    for line in selection_to_yaml(field.value).splitlines():
        print(f"    {line}")


def main():
    logging.basicConfig(level=logging.DEBUG)
    forest = build_category_forest()
    options = TreeSelectOptions(label="Categories", is_expand=True, show_mark_all_header=True)
    field = TreeSelectField(forest, options)

    computers = forest[0].children[0]
    field.check(computers, True)
    print_state("Checked 'Computers'", field)

    field.check(computers.children[1], False)
    print_state("Unchecked 'Desktops'", field)

    field.mark_all(True)
    print_state("Marked all", field)

    report = analyze_forest(forest, field.value)
    print()
    print(f"Nodes: {report.total_nodes}, depth: {report.max_depth}, warnings: {report.warnings or 'none'}")


if __name__ == "__main__":
    main()
