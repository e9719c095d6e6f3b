"""An ordered map stored as a B+ tree whose leaves are chained for in-order walks."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from hydrazine.btree_nodes import Body, Cursor, Leaf

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_MAX_KEYS = 64
_MIN_MAX_KEYS = 3


class BTree(Generic[K, V]):
    """A sorted map from keys to values with lower and upper bound lookups.

    Entries cannot be removed one by one; ``clear`` empties the whole tree.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        items: Mapping[K, V] | Iterable[tuple[K, V]] = (),
        max_keys: int = DEFAULT_MAX_KEYS,
        default_factory: Callable[[], V] | None = None,
    ) -> None:
        if max_keys < _MIN_MAX_KEYS:
            raise ValueError(f"max_keys must be at least {_MIN_MAX_KEYS}")
        self.max_keys = max_keys
        self.default_factory = default_factory
        self._root: Leaf[K, V] | Body[K] | None = None
        self._first: Leaf[K, V] | None = None
        self._last: Leaf[K, V] | None = None
        self._size = 0
        self.update(items)

    # Capacity and iteration

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[K]:
        for key, _ in self.items():
            yield key

    def __reversed__(self) -> Iterator[K]:
        leaf = self._last
        while leaf is not None:
            yield from reversed(leaf.keys)
            leaf = leaf.previous

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield the entries as (key, value) pairs in key order."""
        leaf = self._first
        while leaf is not None:
            yield from zip(list(leaf.keys), list(leaf.values))
            leaf = leaf.next

    def __repr__(self) -> str:
        return f"BTree({dict(self.items())!r})"

    # Element access

    def __getitem__(self, key: K) -> V:
        """Return the value for key; a missing key gets a default if a factory is set."""
        cursor = self.find(key)
        if not cursor.at_end():
            return cursor.item()[1]
        if self.default_factory is None:
            raise KeyError(key)
        cursor, _ = self.insert(key, self.default_factory())
        return cursor.item()[1]

    def __contains__(self, key: object) -> bool:
        return self.count(key) == 1  # type: ignore[arg-type]

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BTree):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self.items(), other.items())
        )

    def __lt__(self, other: BTree[K, V]) -> bool:
        """Compare the key sequences lexicographically."""
        if not isinstance(other, BTree):
            return NotImplemented
        return list(self) < list(other)

    def __gt__(self, other: BTree[K, V]) -> bool:
        if not isinstance(other, BTree):
            return NotImplemented
        return other < self

    def __ge__(self, other: BTree[K, V]) -> bool:
        if not isinstance(other, BTree):
            return NotImplemented
        return not self < other

    def __le__(self, other: BTree[K, V]) -> bool:
        if not isinstance(other, BTree):
            return NotImplemented
        return not other < self

    # Modifiers

    def insert(self, key: K, value: V) -> tuple[Cursor[K, V], bool]:
        """Insert key with value unless present; return its position and whether it was new."""
        if self._root is None:
            leaf: Leaf[K, V] = Leaf(self.max_keys)
            leaf.insert(key, value)
            self._root = self._first = self._last = leaf
            self._size = 1
            return Cursor(leaf, 0), True

        stack: list[tuple[Any, int]] = [(self._root, 0)]
        node: Any = self._root
        while isinstance(node, Body):
            position = node.child_index(key)
            node = node.children[position]
            stack.append((node, position))

        index, inserted = node.insert(key, value)
        cursor: Cursor[K, V] = Cursor(node, index)
        if inserted:
            self._size += 1
            if node.full():
                self._split(stack, cursor)
        return cursor, inserted

    def update(self, items: Mapping[K, V] | Iterable[tuple[K, V]]) -> None:
        """Insert every pair of a mapping or an iterable; existing keys keep their values."""
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.insert(key, value)

    def clear(self) -> None:
        self._root = self._first = self._last = None
        self._size = 0

    def swap(self, other: BTree[K, V]) -> None:
        """Exchange the contents of two trees."""
        (
            self._root, other._root,
            self._first, other._first,
            self._last, other._last,
            self._size, other._size,
            self.max_keys, other.max_keys,
        ) = (
            other._root, self._root,
            other._first, self._first,
            other._last, self._last,
            other._size, self._size,
            other.max_keys, self.max_keys,
        )

    def _split(self, stack: list[tuple[Any, int]], cursor: Cursor[K, V]) -> None:
        leaf, position = stack.pop()
        median = len(leaf) // 2
        right = leaf.split()
        if cursor.index >= median:
            cursor.leaf = right
            cursor.index -= median
        if self._last is leaf:
            self._last = right

        if not stack:
            self._grow_root(leaf, right.keys[0], right)
            return

        parent, _ = stack[-1]
        parent.insert_child(position, right.keys[0], right)

        while stack:
            body, position = stack.pop()
            if not body.full():
                return
            separator, right_body = body.split()
            if not stack:
                self._grow_root(body, separator, right_body)
                return
            parent, _ = stack[-1]
            parent.insert_child(position, separator, right_body)

    def _grow_root(self, left: Any, key: K, right: Any) -> None:
        root: Body[K] = Body(left.level + 1, self.max_keys)
        root.keys = [key]
        root.children = [left, right]
        self._root = root

    # Map operations

    def _end(self) -> Cursor[K, V]:
        if self._last is None:
            return Cursor(None, 0)
        return Cursor(self._last, len(self._last))

    def lower_bound(self, key: K) -> Cursor[K, V]:
        """Position of the first entry whose key is not less than key."""
        if self._root is None:
            return self._end()
        node: Any = self._root
        while isinstance(node, Body):
            node = node.children[node.child_index(key)]
        index = node.lower_bound(key)
        if index < len(node):
            return Cursor(node, index)
        if node.next is not None:
            return Cursor(node.next, 0)
        return self._end()

    def upper_bound(self, key: K) -> Cursor[K, V]:
        """Position of the first entry whose key is greater than key."""
        cursor = self.lower_bound(key)
        if not cursor.at_end() and not key < cursor.item()[0]:
            cursor.next()
        return cursor

    def equal_range(self, key: K) -> tuple[Cursor[K, V], Cursor[K, V]]:
        lower = self.lower_bound(key)
        upper = lower.copy()
        if not upper.at_end() and not key < upper.item()[0]:
            upper.next()
        return lower, upper

    def find(self, key: K) -> Cursor[K, V]:
        """Position of key, or the end position if it is absent."""
        cursor = self.lower_bound(key)
        if not cursor.at_end() and not key < cursor.item()[0]:
            return cursor
        return self._end()

    def count(self, key: K) -> int:
        """Number of entries with key: 1 if present, otherwise 0."""
        cursor = self.lower_bound(key)
        if cursor.at_end():
            return 0
        found_key = cursor.item()[0]
        return 0 if key < found_key else 1

    # Rendering

    def to_dot(self) -> str:
        """Describe the node structure as a graphviz digraph; empty text for an empty tree."""
        if self._root is None:
            return ""
        names: dict[int, str] = {}

        def name(node: Any) -> str:
            return names.setdefault(id(node), f"node_{len(names)}")

        parts = [f"digraph BTree_{id(self):x} {{\n", "\tnode [ shape = record ];\n\n"]
        stack: list[Any] = [self._root]
        while stack:
            node = stack.pop()
            color = "black" if isinstance(node, Leaf) else "red"
            parts.append(f"\t{name(node)} [ color = {color}, label = \"{{")
            if isinstance(node, Leaf):
                first = node.keys[0] if node.keys else ""
                parts.append(f"<head> leaf_{first} ({len(node)}) | {{ {{ ")
                for index, (key, value) in enumerate(zip(node.keys, node.values)):
                    if index:
                        parts.append("| { ")
                    parts.append(f"<key_{index}> {key} | {value} }} ")
                parts.append("} }\"];\n")
            else:
                parts.append(
                    f"<head> node_{node.keys[0]} ({len(node)})(level_{node.level}) | {{ {{"
                )
                parts.append("<key_0> previous } ")
                for index, key in enumerate(node.keys, start=1):
                    parts.append(f"| {{ <key_{index}> {key} }} ")
                parts.append("} }\"];\n")
                for index, child in enumerate(node.children):
                    parts.append(f"\t{name(node)}:key_{index} -> {name(child)}:head;\n")
                    stack.append(child)
                parts.append("\n")
        parts.append("}")
        return "".join(parts)