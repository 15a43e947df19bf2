"""Max-priority queues with FIFO tie-breaking: an unsorted-array and a binary-heap implementation, plus an interactive menu."""

__version__ = "0.1.0"
__all__ = ["node", "array_pq", "heap_pq", "cli"]