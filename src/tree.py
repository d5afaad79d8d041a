"""Forest construction from an ordered record stream."""

import logging
import weakref
from collections.abc import Iterable

from models import MAX_CHILDREN, CapacityExceededError, DuplicateIdError, PersonNode, Record

logger = logging.getLogger(__name__)


def attach_child(parent: PersonNode, child: PersonNode) -> None:
    """
    Link `child` under `parent`.

    Raises CapacityExceededError when the parent is full; neither node is
    modified in that case.
    """
    if parent.is_full:
        raise CapacityExceededError(parent, parent.max_children)
    parent.children.append(child)
    child._parent_ref = weakref.ref(parent)


class Registry:
    """Id -> node lookup used while a forest is being built."""

    def __init__(self):
        self._nodes: dict[int, PersonNode] = {}

    def __contains__(self, person_id: int) -> bool:
        return person_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, node: PersonNode) -> None:
        if node.id in self._nodes:
            raise DuplicateIdError(node.id)
        self._nodes[node.id] = node

    def get(self, person_id: int) -> PersonNode | None:
        return self._nodes.get(person_id)


def build_forest(records: Iterable[Record], max_children: int = MAX_CHILDREN) -> list[PersonNode]:
    """
    Build a forest from records in input order and return its roots.

    Parents must come before their children. A record whose parent is
    unknown at that point (not yet seen, missing, or itself) becomes a root,
    as does a child rejected because its parent is full. Roots are returned
    in creation order.

    Raises DuplicateIdError if two records share an id.
    """
    registry = Registry()
    roots: list[PersonNode] = []

    for record in records:
        node = PersonNode.from_record(record, max_children=max_children)

        # Look up the parent before registering, so a self-parent is never found
        parent = registry.get(record.parent_id) if record.parent_id else None
        registry.add(node)

        if record.parent_id and parent is None:
            if record.parent_id == record.id:
                logger.warning("%s (ID %d) lists itself as parent; treating as root", node.label, node.id)
            else:
                logger.warning(
                    "Parent ID %d of %s (ID %d) not seen yet; treating as root",
                    record.parent_id,
                    node.label,
                    node.id,
                )

        if parent is not None:
            try:
                attach_child(parent, node)
                continue
            except CapacityExceededError as e:
                logger.warning("%s; %s becomes a root", e, node.label)

        roots.append(node)

    logger.info("Built forest with %d people and %d roots", len(registry), len(roots))
    return roots
