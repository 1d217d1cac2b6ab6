import pytest

from dstructs.priorityqueue import PriorityQueue, heapsort


def _is_heap(values):
    return all(
        values[(i - 1) // 2] <= values[i] for i in range(1, len(values))
    )


def test_min_after_inserts():
    pq = PriorityQueue()
    for value in [10, 5, 2, 3, 4]:
        pq.insert(value)
    assert pq.min() == 2
    assert _is_heap(list(pq))


def test_delete_min_keeps_heap():
    pq = PriorityQueue()
    for value in [10, 5, 2, 3, 4]:
        pq.insert(value)
    pq.delete_min()
    assert pq.min() == 3
    assert len(pq) == 4
    assert sorted(pq) == [3, 4, 5, 10]
    assert _is_heap(list(pq))


def test_drain_in_order():
    data = [9, 1, 8, 2, 7, 3, 6, 4, 5, 0]
    pq = PriorityQueue(len(data))
    for value in data:
        pq.insert(value)
    drained = []
    while len(pq):
        drained.append(pq.min())
        pq.delete_min()
    assert drained == sorted(data)


def test_full_raises():
    pq = PriorityQueue(1)
    pq.insert(1)
    with pytest.raises(IndexError):
        pq.insert(2)


def test_empty_raises():
    pq = PriorityQueue()
    with pytest.raises(IndexError):
        pq.min()
    with pytest.raises(IndexError):
        pq.delete_min()


def test_str_format():
    pq = PriorityQueue()
    pq.insert(7)
    assert str(pq) == "[ 7 ]"
    pq.insert(8)
    assert str(pq) == "[ 7\t8 -  ]"


def test_heapsort_reverse_input():
    data = [float(10 - 1 - i) for i in range(10)]
    assert heapsort(data) == sorted(data)


def test_heapsort_empty_and_duplicates():
    assert heapsort([]) == []
    assert heapsort([3, 1, 3, 1]) == [1, 1, 3, 3]


def test_negative_capacity():
    with pytest.raises(ValueError):
        PriorityQueue(-1)