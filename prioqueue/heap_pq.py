"""Max-priority queue kept as a binary heap."""

from __future__ import annotations

from collections.abc import Iterator

from prioqueue.node import EmptyQueueError, KeyUpdateError, Node


class HeapPQ:
    """Binary max-heap with first-in, first-out ordering on equal priority."""

    def __init__(self) -> None:
        self._heap: list[Node] = []
        self._next_serial = 0

    def insert(self, value: int, priority: int) -> Node:
        """Add an element and return the stored node."""
        node = Node(value, priority, self._next_serial)
        self._next_serial += 1
        self._heap.append(node)
        self._sift_up(len(self._heap) - 1)
        return node

    def extract_max(self) -> Node:
        """Remove and return the highest-priority element."""
        if not self._heap:
            raise EmptyQueueError("queue is empty")
        result = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return result

    def find_max(self) -> Node:
        """Return the highest-priority element without removing it."""
        if not self._heap:
            raise EmptyQueueError("queue is empty")
        return self._heap[0]

    def _node_at(self, index: int) -> Node:
        if not 0 <= index < len(self._heap):
            raise IndexError(f"index {index} out of range")
        return self._heap[index]

    def increase_key(self, index: int, new_priority: int) -> None:
        """Raise the priority of the element at ``index`` and restore the heap."""
        node = self._node_at(index)
        if new_priority < node.priority:
            raise KeyUpdateError("new priority must not be lower than the current one")
        node.priority = new_priority
        self._sift_up(index)

    def decrease_key(self, index: int, new_priority: int) -> None:
        """Lower the priority of the element at ``index`` and restore the heap."""
        node = self._node_at(index)
        if new_priority > node.priority:
            raise KeyUpdateError("new priority must not be higher than the current one")
        node.priority = new_priority
        self._sift_down(index)

    def _sift_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if not heap[i].outranks(heap[parent]):
                break
            heap[i], heap[parent] = heap[parent], heap[i]
            i = parent

    def _sift_down(self, i: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            best = i
            for child in (2 * i + 1, 2 * i + 2):
                if child < size and heap[child].outranks(heap[best]):
                    best = child
            if best == i:
                break
            heap[i], heap[best] = heap[best], heap[i]
            i = best

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __getitem__(self, index: int) -> Node:
        return self._heap[index]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._heap)