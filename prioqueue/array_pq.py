"""Max-priority queue kept in an unsorted list."""

from __future__ import annotations

from collections.abc import Iterator

from prioqueue.node import EmptyQueueError, KeyUpdateError, Node


class ArrayPQ:
    """Priority queue with O(1) insert and linear-time maximum search.

    Ties in priority are broken first-in, first-out.
    """

    def __init__(self) -> None:
        self._items: list[Node] = []
        self._next_serial = 0

    def insert(self, value: int, priority: int) -> Node:
        """Add an element and return the stored node."""
        node = Node(value, priority, self._next_serial)
        self._next_serial += 1
        self._items.append(node)
        return node

    def _max_index(self) -> int:
        if not self._items:
            raise EmptyQueueError("queue is empty")
        best = 0
        for index, node in enumerate(self._items):
            if node.outranks(self._items[best]):
                best = index
        return best

    def extract_max(self) -> Node:
        """Remove and return the highest-priority element.

        The last element takes the freed slot.
        """
        index = self._max_index()
        result = self._items[index]
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return result

    def find_max(self) -> Node:
        """Return the highest-priority element without removing it."""
        return self._items[self._max_index()]

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        return self._items[index]

    def increase_key(self, index: int, new_priority: int) -> None:
        """Raise the priority of the element at ``index``."""
        node = self._node_at(index)
        if new_priority < node.priority:
            raise KeyUpdateError("new priority must not be lower than the current one")
        node.priority = new_priority

    def decrease_key(self, index: int, new_priority: int) -> None:
        """Lower the priority of the element at ``index``."""
        node = self._node_at(index)
        if new_priority > node.priority:
            raise KeyUpdateError("new priority must not be higher than the current one")
        node.priority = new_priority

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __getitem__(self, index: int) -> Node:
        return self._items[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._items)