import random

import pytest

from prioqueue.heap_pq import HeapPQ
from prioqueue.node import EmptyQueueError, KeyUpdateError


def _is_heap(pq):
    return all(not pq[i].outranks(pq[(i - 1) // 2]) for i in range(1, len(pq)))


def test_extract_in_priority_order():
    pq = HeapPQ()
    for value, priority in [(1, 5), (2, 9), (3, 7), (4, 1)]:
        pq.insert(value, priority)
    assert [pq.extract_max().value for _ in range(4)] == [2, 3, 1, 4]
    assert not pq


def test_equal_priorities_are_fifo():
    pq = HeapPQ()
    for value in range(8):
        pq.insert(value, 3)
    assert [pq.extract_max().value for _ in range(8)] == list(range(8))


def test_heap_invariant_after_random_operations():
    rng = random.Random(7)
    pq = HeapPQ()
    for _ in range(60):
        pq.insert(rng.randint(0, 100), rng.randint(0, 20))
        assert _is_heap(pq)
    priorities = []
    while pq:
        priorities.append(pq.extract_max().priority)
        assert _is_heap(pq)
    assert priorities == sorted(priorities, reverse=True)


def test_find_max_peeks():
    pq = HeapPQ()
    pq.insert(1, 2)
    pq.insert(5, 8)
    assert pq.find_max().value == 5
    assert len(pq) == 2


def test_empty_queue_raises():
    pq = HeapPQ()
    with pytest.raises(EmptyQueueError):
        pq.extract_max()
    with pytest.raises(EmptyQueueError):
        pq.find_max()


def test_increase_key_moves_to_top():
    pq = HeapPQ()
    for value, priority in [(1, 9), (2, 5), (3, 1)]:
        pq.insert(value, priority)
    index = next(i for i, n in enumerate(pq) if n.value == 3)
    pq.increase_key(index, 50)
    assert pq.find_max().value == 3
    assert _is_heap(pq)


def test_decrease_key_moves_down():
    pq = HeapPQ()
    for value, priority in [(1, 9), (2, 5), (3, 4)]:
        pq.insert(value, priority)
    pq.decrease_key(0, 0)
    assert pq.find_max().value == 2
    assert _is_heap(pq)


def test_key_update_errors():
    pq = HeapPQ()
    pq.insert(1, 5)
    with pytest.raises(KeyUpdateError):
        pq.increase_key(0, 4)
    with pytest.raises(KeyUpdateError):
        pq.decrease_key(0, 6)
    with pytest.raises(IndexError):
        pq.increase_key(3, 10)
    assert pq[0].priority == 5