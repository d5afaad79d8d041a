"""Read-only queries over a built forest."""

from collections.abc import Iterable, Iterator

from models import PersonNode


def list_descendants(root: PersonNode) -> Iterator[tuple[PersonNode, int]]:
    """
    Yield (node, depth) pairs in pre-order, starting with `root` at depth 0.

    Children are visited in attachment order. Each call starts a fresh traversal.
    """
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        # Reversed so the first child is popped first
        stack.extend((child, depth + 1) for child in reversed(node.children))


def iter_nodes(roots: Iterable[PersonNode]) -> Iterator[PersonNode]:
    """Yield every node reachable from `roots`, tree by tree, in pre-order."""
    for root in roots:
        for node, _ in list_descendants(root):
            yield node


def find_by_id(roots: Iterable[PersonNode], person_id: int) -> PersonNode | None:
    for node in iter_nodes(roots):
        if node.id == person_id:
            return node
    return None


def find_by_name(root: PersonNode | None, name: str) -> PersonNode | None:
    """Return the first person named `name` in pre-order, or None."""
    if root is None:
        return None
    for node, _ in list_descendants(root):
        if node.name == name:
            return node
    return None


def ancestors(node: PersonNode) -> Iterator[PersonNode]:
    """Yield `node` and then each of its ancestors up to the root."""
    current = node
    while current is not None:
        yield current
        current = current.parent


def nearest_common_ancestor(a: PersonNode | None, b: PersonNode | None) -> PersonNode | None:
    """
    Find the closest person that is `a` or one of its ancestors and is also
    `b` or one of its ancestors.

    Returns None if either person is missing or they are in different trees.
    """
    if a is None or b is None:
        return None
    for candidate in ancestors(a):
        for other in ancestors(b):
            if other is candidate:
                return candidate
    return None
