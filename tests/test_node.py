from prioqueue.node import EmptyQueueError, KeyUpdateError, Node


def test_higher_priority_outranks():
    high = Node(1, 10, serial=5)
    low = Node(2, 3, serial=0)
    assert high.outranks(low)
    assert not low.outranks(high)


def test_equal_priority_earlier_serial_outranks():
    first = Node(7, 4, serial=1)
    second = Node(8, 4, serial=2)
    assert first.outranks(second)
    assert not second.outranks(first)


def test_node_does_not_outrank_itself():
    node = Node(1, 1, serial=0)
    assert not node.outranks(node)


def test_default_serial_is_zero():
    assert Node(3, 9).serial == 0


def test_empty_queue_error_carries_message_and_is_lookup_error():
    err = EmptyQueueError("queue is empty")
    assert isinstance(err, LookupError)
    assert str(err) == "queue is empty"


def test_key_update_error_carries_message_and_is_value_error():
    err = KeyUpdateError("bad priority")
    assert isinstance(err, ValueError)
    assert str(err) == "bad priority"