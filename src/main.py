"""
1) Read the person records in "familydb.csv" into memory.
2) Build a forest of family trees, linking each person to a parent listed earlier.
3) Print every tree, indented by generation.
4) Answer lookups: a person by name, descendants of an ID, common ancestor of two IDs.
5) Optionally validate ages and birth dates along parent-child links.
6) Write the forest as a Graphviz DOT file (and optionally render or display it).
"""

import argparse
import logging
import sys
from pathlib import Path

from models import MAX_CHILDREN, FamilyTreeError, PersonNode
from parsing import read_records
from plotting import format_tree, plot_tree, write_dot
from query import find_by_id, find_by_name, nearest_common_ancestor
from tree import build_forest
from validation import validate_forest

DEFAULT_INPUT = "familydb.csv"
DEFAULT_DOT = "tree.dot"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build family trees from a CSV of people and query them.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, type=Path, help="Record file to read")
    parser.add_argument("--dot", type=Path, default=Path(DEFAULT_DOT), help="Where to write the DOT file")
    parser.add_argument("--png", type=Path, help="Also render the forest to this image file")
    parser.add_argument("--show", action="store_true", help="Display the rendered forest in a window")
    parser.add_argument("--find", metavar="NAME", help="Name to search for")
    parser.add_argument("--no-prompt", action="store_true", help="Do not ask for a name when --find is omitted")
    parser.add_argument("--descendants", metavar="ID", type=int, help="List descendants of this person")
    parser.add_argument(
        "--ancestor", metavar="ID", type=int, nargs=2, help="Find the nearest common ancestor of two people"
    )
    parser.add_argument("--max-children", type=int, default=MAX_CHILDREN, help="Children allowed per person")
    parser.add_argument("--validate", action="store_true", help="Check ages and birth dates")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def describe(person: PersonNode) -> str:
    return f"{person.label} (ID {person.id}, age: {person.age}, born {person.birth_date})"


def find_person(roots: list[PersonNode], name: str) -> PersonNode | None:
    for root in roots:
        found = find_by_name(root, name)
        if found is not None:
            return found
    return None


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        records = read_records(args.input)
        roots = build_forest(records, max_children=args.max_children)
    except (OSError, FamilyTreeError) as e:
        print(f"Error reading {args.input}: {e}", file=sys.stderr)
        return 1

    print("Family tree:")
    for root in roots:
        for line in format_tree(root):
            print(line)

    name = args.find
    if name is None and not args.no_prompt:
        try:
            name = input("\nEnter a name to search for: ").strip()
        except EOFError:
            name = None
    if name:
        found = find_person(roots, name)
        if found:
            print(f"Found: {describe(found)}")
        else:
            print(f"No person named {name} was found.")

    if args.descendants is not None:
        person = find_by_id(roots, args.descendants)
        if person is None:
            print(f"No person with ID {args.descendants}.")
        else:
            print(f"Descendants of {person.label}:")
            for line in format_tree(person, show_birth_date=False):
                print(line)

    if args.ancestor:
        first, second = (find_by_id(roots, person_id) for person_id in args.ancestor)
        ancestor = nearest_common_ancestor(first, second)
        if ancestor:
            print(f"Nearest common ancestor: {describe(ancestor)}")
        else:
            print("No common ancestor found.")

    if args.validate:
        warnings = validate_forest(roots)
        if warnings:
            print(f"Found {len(warnings)} validation warnings:")
            for w in warnings[:10]:  # Show first 10 warnings
                print(f"  - {w}")
            if len(warnings) > 10:
                print(f"  ... and {len(warnings) - 10} more")
        else:
            print("No validation issues found")

    try:
        write_dot(roots, args.dot)
        print(f"File {args.dot} created. Use Graphviz to visualize it.")
        if args.png:
            plot_tree(roots, args.png)
            print(f"Graph saved to {args.png}")
        if args.show:
            plot_tree(roots)
    except OSError as e:
        print(f"Error writing graph: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
