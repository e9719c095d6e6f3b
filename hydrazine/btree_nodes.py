"""Leaf and body nodes of a B+ tree, and a cursor that walks the leaves in order."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Any, Generic, TypeVar, Union

K = TypeVar("K")
V = TypeVar("V")

_MIN_LEAF_CAPACITY = 2
_MIN_BODY_CAPACITY = 3


class Leaf(Generic[K, V]):
    """A bottom node holding sorted keys with their values, linked to its neighbours."""

    level = 0

    def __init__(self, capacity: int) -> None:
        if capacity < _MIN_LEAF_CAPACITY:
            raise ValueError(f"a leaf needs a capacity of at least {_MIN_LEAF_CAPACITY}")
        self.capacity = capacity
        self.keys: list[K] = []
        self.values: list[V] = []
        self.previous: Leaf[K, V] | None = None
        self.next: Leaf[K, V] | None = None

    def __len__(self) -> int:
        return len(self.keys)

    def __repr__(self) -> str:
        return f"Leaf({list(zip(self.keys, self.values))!r})"

    def full(self) -> bool:
        return len(self.keys) >= self.capacity

    def deficient(self) -> bool:
        return len(self.keys) < self.capacity // 2

    def lower_bound(self, key: K) -> int:
        """Index of the first key not less than key."""
        return bisect_left(self.keys, key)

    def insert(self, key: K, value: V) -> tuple[int, bool]:
        """Insert key in order; return its index and whether it was new.

        An existing key keeps its value.
        """
        index = bisect_left(self.keys, key)
        if index < len(self.keys) and not key < self.keys[index]:
            return index, False
        self.keys.insert(index, key)
        self.values.insert(index, value)
        return index, True

    def split(self) -> Leaf[K, V]:
        """Move the upper half into a new leaf linked after this one and return it."""
        median = len(self.keys) // 2
        right: Leaf[K, V] = Leaf(self.capacity)
        right.keys = self.keys[median:]
        right.values = self.values[median:]
        del self.keys[median:]
        del self.values[median:]
        right.previous = self
        right.next = self.next
        if self.next is not None:
            self.next.previous = right
        self.next = right
        return right


Node = Union[Leaf[Any, Any], "Body[Any]"]


class Body(Generic[K]):
    """An inner node: separator keys with one more child than keys."""

    def __init__(self, level: int, capacity: int) -> None:
        if level < 1:
            raise ValueError("a body node sits at level 1 or above")
        if capacity < _MIN_BODY_CAPACITY:
            raise ValueError(f"a body needs a capacity of at least {_MIN_BODY_CAPACITY}")
        self.level = level
        self.capacity = capacity
        self.keys: list[K] = []
        self.children: list[Node] = []

    def __len__(self) -> int:
        return len(self.keys)

    def __repr__(self) -> str:
        return f"Body(level={self.level}, keys={self.keys!r})"

    def full(self) -> bool:
        return len(self.keys) >= self.capacity

    def deficient(self) -> bool:
        return len(self.keys) < self.capacity // 2

    def child_index(self, key: K) -> int:
        """Index of the child whose range holds key; a separator key belongs to its right."""
        return bisect_right(self.keys, key)

    def insert_child(self, position: int, key: K, child: Node) -> None:
        """Put key at position and child just to its right."""
        if not 0 <= position <= len(self.keys):
            raise IndexError("position out of range")
        self.keys.insert(position, key)
        self.children.insert(position + 1, child)

    def split(self) -> tuple[K, Body[K]]:
        """Move the upper half into a new body; return the key pushed up and that body."""
        if len(self.keys) < _MIN_BODY_CAPACITY:
            raise ValueError("too few keys to split")
        median = len(self.keys) // 2
        right: Body[K] = Body(self.level, self.capacity)
        right.keys = self.keys[median + 1 :]
        right.children = self.children[median + 1 :]
        separator = self.keys[median]
        del self.keys[median:]
        del self.children[median + 1 :]
        return separator, right


class Cursor(Generic[K, V]):
    """A position in the chain of leaves; one past the last entry marks the end."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, leaf: Leaf[K, V] | None, index: int = 0) -> None:
        self.leaf = leaf
        self.index = index

    def __repr__(self) -> str:
        return f"Cursor({self.leaf!r}, {self.index})"

    def _leaf(self) -> Leaf[K, V]:
        if self.leaf is None:
            raise IndexError("cursor is not on any leaf")
        return self.leaf

    def at_end(self) -> bool:
        return self.leaf is None or self.index >= len(self.leaf)

    def item(self) -> tuple[K, V]:
        """The key and value under the cursor."""
        leaf = self._leaf()
        if not 0 <= self.index < len(leaf):
            raise IndexError("cursor is past the end")
        return leaf.keys[self.index], leaf.values[self.index]

    def next(self) -> Cursor[K, V]:
        """Step forward, stopping one past the last entry; returns self."""
        leaf = self._leaf()
        if self.index + 1 < len(leaf):
            self.index += 1
        elif leaf.next is not None:
            self.leaf = leaf.next
            self.index = 0
        else:
            self.index = len(leaf)
        return self

    def previous(self) -> Cursor[K, V]:
        """Step back, staying on the first entry; returns self."""
        leaf = self._leaf()
        if self.index != 0:
            self.index -= 1
        elif leaf.previous is not None:
            self.leaf = leaf.previous
            self.index = len(self.leaf) - 1
        return self

    def copy(self) -> Cursor[K, V]:
        return Cursor(self.leaf, self.index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.leaf is other.leaf and self.index == other.index