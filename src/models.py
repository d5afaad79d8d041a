"""Data classes and errors for family tree entities."""

import weakref
from dataclasses import dataclass, field

# Fixed fan-out per person
MAX_CHILDREN = 10


class FamilyTreeError(Exception):
    """Base class for family tree errors."""


class CapacityExceededError(FamilyTreeError):
    def __init__(self, parent: "PersonNode", limit: int):
        self.parent = parent
        self.limit = limit
        super().__init__(f"{parent.label} already has {limit} children")


class DuplicateIdError(FamilyTreeError):
    def __init__(self, person_id: int):
        self.person_id = person_id
        super().__init__(f"Duplicate person ID: {person_id}")


class MalformedRecordError(FamilyTreeError):
    def __init__(self, message: str, line_number: int | None = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


@dataclass(frozen=True)
class Record:
    id: int
    name: str
    surname: str
    age: int
    birth_date: str
    parent_id: int = 0  # 0 = no parent


@dataclass(eq=False)
class PersonNode:
    """
    A person in the forest.

    Children are owned by the node in attachment order. The parent link is a
    weak reference, so a node never keeps its ancestors alive.
    """

    id: int
    name: str
    surname: str
    age: int
    birth_date: str
    children: list["PersonNode"] = field(default_factory=list, init=False, repr=False)
    max_children: int = MAX_CHILDREN
    _parent_ref: weakref.ref | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_record(cls, record: Record, max_children: int = MAX_CHILDREN) -> "PersonNode":
        return cls(
            id=record.id,
            name=record.name,
            surname=record.surname,
            age=record.age,
            birth_date=record.birth_date,
            max_children=max_children,
        )

    @property
    def parent(self) -> "PersonNode | None":
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def label(self) -> str:
        return f"{self.name} {self.surname}"

    @property
    def is_full(self) -> bool:
        return len(self.children) >= self.max_children
