"""Sanity checks for a built family forest."""

from collections.abc import Iterable

import networkx as nx

from graph import build_graph
from models import PersonNode
from parsing import parse_date_string


def validate_forest(roots: Iterable[PersonNode]) -> list[str]:
    """
    Validate the family forest for:
    - Cycles in parent-child relationships
    - Impossible ages (child born before parent, child older than parent)
    - Parents younger than 12 at a child's birth

    Returns a list of warning messages.
    """
    warnings: list[str] = []
    G = build_graph(roots)

    # Check for cycles
    try:
        cycle = nx.find_cycle(G, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for parent, child in G.edges():
        parent_data = G.nodes[parent]
        child_data = G.nodes[child]
        parent_name = parent_data["person_name"]
        child_name = child_data["person_name"]

        if child_data["age"] >= parent_data["age"]:
            warnings.append(
                f"Impossible: {child_name} (age {child_data['age']}) is not younger than "
                f"parent {parent_name} (age {parent_data['age']})"
            )

        # ISO dates can be string-compared
        parent_birth = parse_date_string(parent_data["birth_date"])
        child_birth = parse_date_string(child_data["birth_date"])
        if not (parent_birth and child_birth):
            continue

        if child_birth < parent_birth:
            warnings.append(f"Impossible: {child_name} born before parent {parent_name}")
        elif int(child_birth[:4]) - int(parent_birth[:4]) < 12:
            warnings.append(
                f"Suspicious: {parent_name} was less than 12 years old when {child_name} was born"
            )

    return warnings
