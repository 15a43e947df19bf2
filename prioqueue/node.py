"""Queue element type and the errors shared by the priority queues."""

from __future__ import annotations

from dataclasses import dataclass


class EmptyQueueError(LookupError):
    """Raised when an element is requested from an empty queue."""


class KeyUpdateError(ValueError):
    """Raised when a priority change goes in the wrong direction."""


@dataclass
class Node:
    """A value with a priority; ``serial`` records insertion order."""

    value: int
    priority: int
    serial: int = 0

    def outranks(self, other: Node) -> bool:
        """Return True if this node should leave the queue before ``other``.

        A higher priority wins; on equal priority the earlier insertion wins.
        """
        if self.priority != other.priority:
            return self.priority > other.priority
        return self.serial < other.serial