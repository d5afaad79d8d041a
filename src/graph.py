"""Edge export and NetworkX graph building."""

from collections.abc import Iterable, Iterator

import networkx as nx

from models import PersonNode
from query import iter_nodes, list_descendants


def export_edges(root: PersonNode) -> Iterator[tuple[str, str]]:
    """
    Yield a (parent label, child label) pair for every parent-child edge
    under `root`.

    Edges come in the pre-order of their child, as in list_descendants, so a
    child's own edges follow its incoming edge before any later sibling's.
    """
    for node, depth in list_descendants(root):
        if depth > 0:
            yield node.parent.label, node.label


def build_graph(roots: Iterable[PersonNode]) -> nx.DiGraph:
    """Build a NetworkX directed graph from the forest."""
    G = nx.DiGraph()

    # Note: use 'person_name' instead of 'name' to avoid conflict with pydot
    for node in iter_nodes(roots):
        G.add_node(
            node.id,
            person_name=node.label,
            given_name=node.name,
            surname=node.surname,
            age=node.age,
            birth_date=node.birth_date,
        )
        for child in node.children:
            G.add_edge(node.id, child.id, relationship_type="PARENT_OF")

    return G
