# prioqueue

Two max-priority queues that share one interface, and a small interactive
menu for trying them out.

- `ArrayPQ` (`prioqueue.array_pq`): elements sit in an unsorted list.
  Insertion is constant time. Finding or extracting the maximum scans every
  element. When the maximum is extracted, the last element moves into the
  freed slot.
- `HeapPQ` (`prioqueue.heap_pq`): elements sit in a binary max-heap.

Both queues hold `Node` items (`prioqueue.node`). Each has a `value`, a
`priority` and a `serial` that records insertion order. The higher priority
wins. When two priorities are equal, the element inserted first comes out
first (FIFO). `Node.outranks(other)` applies this rule.

## Installation

```
pip install .
```

## Library use

```python
from prioqueue.heap_pq import HeapPQ
from prioqueue.node import EmptyQueueError

pq = HeapPQ()
pq.insert(10, 3)
pq.insert(20, 7)
pq.insert(30, 7)

print(pq.find_max())               # Node(value=20, priority=7, serial=1)
node = pq.extract_max()
print(node.value, node.priority)   # 20 7
print(len(pq))                     # 2

try:
    HeapPQ().extract_max()
except EmptyQueueError:
    print("empty")
```

Each queue provides the following:

- `insert(value, priority)` adds an element and returns the stored `Node`.
- `extract_max()` removes the highest-ranked node and returns it.
  `find_max()` returns that node and leaves it in the queue. Both raise
  `EmptyQueueError` when the queue is empty.
- `increase_key(index, new_priority)` and `decrease_key(index, new_priority)`
  change the priority of the node at a position in the queue's internal
  storage. `HeapPQ` then restores its heap order. An index out of range
  raises `IndexError`. A new priority that moves the wrong way raises
  `KeyUpdateError`. A new priority equal to the current one is accepted.
- `len(queue)`, truth testing, indexing (`queue[i]`) and iteration work on
  the stored nodes, in storage order.

`prioqueue.cli` has helpers that work with either queue:

- `find_index(queue, value, priority)` returns the position of the first
  node with that value and priority, or `None` if there is no such node.
- `load_from_file(queue, path)` inserts whitespace-separated
  `value priority` pairs from a text file and returns how many it inserted.
  It stops at the first pair that is not two integers.
- `generate_random(queue, seed, count)` inserts `count` pseudo-random
  elements. Values are in `0..2*count` and priorities in `0..5*count-1`. The
  same seed always gives the same elements. A `count` that is not positive
  raises `ValueError`.

## Interactive menu

```
prioqueue
```

This asks you to pick an implementation: `1` for the unsorted array or `2`
for the binary heap. You can also give the choice on the command line, as
in `prioqueue 2`. Any other choice prints a message and exits.

The menu offers these actions:

1. insert a value with a priority
2. extract the maximum
3. peek at the maximum
4. increase an element's priority, given its value, current priority and new priority
5. decrease an element's priority the same way
6. show the size
7. load `value priority` pairs from a text file
8. insert N random elements generated from a seed

Enter `0` to quit. The menu also ends when input runs out. If the output is
a terminal, the screen is cleared before each step.

`menu_loop(queue, stdin, stdout)` runs the same menu on any text streams.

## Limitations

The queues exist only in memory. Nothing is saved between runs.