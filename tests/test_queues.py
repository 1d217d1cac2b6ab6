import pytest

from dstructs.queues import ArrayQueue, LinkedQueue


def test_linked_fifo_order():
    queue = LinkedQueue(range(10))
    assert queue.dequeue() == 0
    assert queue.dequeue() == 1
    assert list(queue) == list(range(2, 10))
    assert len(queue) == 8


def test_linked_top_and_empty():
    queue = LinkedQueue()
    with pytest.raises(IndexError):
        queue.top()
    assert queue.dequeue() is None
    queue.enqueue("x")
    assert queue.top() == "x"
    assert len(queue) == 1


def test_linked_positive():
    queue = LinkedQueue([3, -1, 0, -7, 5])
    result = queue.positive()
    assert list(result) == [3, 0, 5]
    assert list(queue) == [3, -1, 0, -7, 5]


def test_linked_copy_independent():
    queue = LinkedQueue([1, 2])
    clone = queue.copy()
    clone.enqueue(3)
    assert list(queue) == [1, 2]
    assert list(clone) == [1, 2, 3]


def test_linked_str():
    assert str(LinkedQueue([1, 2])) == " 1  2 "


def test_array_fifo_order():
    queue = ArrayQueue()
    for i in range(10):
        queue.enqueue(i)
    drained = []
    while len(queue):
        drained.append(queue.dequeue())
    assert drained == list(range(10))


def test_array_full_ignores():
    queue = ArrayQueue(3)
    for i in range(5):
        queue.enqueue(i)
    assert list(queue) == [0, 1, 2]
    assert len(queue) == 3


def test_array_wraps_around():
    queue = ArrayQueue(3)
    for i in range(3):
        queue.enqueue(i)
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(3)
    queue.enqueue(4)
    assert list(queue) == [2, 3, 4]
    assert queue.top() == 2


def test_array_empty():
    queue = ArrayQueue(2)
    assert queue.dequeue() is None
    with pytest.raises(IndexError):
        queue.top()


def test_array_bad_capacity():
    with pytest.raises(ValueError):
        ArrayQueue(0)