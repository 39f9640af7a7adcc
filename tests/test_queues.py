import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import ArrayQueue, LinkedQueue, QueueEmptyError, QueueFullError

QUEUE_KINDS = ["array", "linked"]


@pytest.mark.parametrize("kind", QUEUE_KINDS)
def test_source_example_sequence(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    for value in (2, 4, 6, 8, 10):
        queue.enqueue(value)
    assert list(queue) == [2, 4, 6, 8, 10]
    assert queue.peek() == 2
    assert queue.is_empty() is False
    assert queue.dequeue() == 2
    assert list(queue) == [4, 6, 8, 10]


@pytest.mark.parametrize("kind", QUEUE_KINDS)
def test_dequeue_empty_raises(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


@pytest.mark.parametrize("kind", QUEUE_KINDS)
def test_peek_empty_raises(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    with pytest.raises(QueueEmptyError):
        queue.peek()


@pytest.mark.parametrize("kind", QUEUE_KINDS)
def test_empty_error_is_index_error(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    with pytest.raises(IndexError):
        queue.dequeue()


@pytest.mark.parametrize("kind", QUEUE_KINDS)
def test_becomes_empty_after_draining(kind):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    queue.enqueue(5)
    queue.enqueue(10)
    queue.dequeue()
    queue.dequeue()
    assert queue.is_empty() is True
    assert len(queue) == 0
    queue.enqueue(15)
    assert queue.peek() == 15
    assert list(queue) == [15]


@pytest.mark.parametrize("kind", QUEUE_KINDS)
@given(values=st.lists(st.integers()))
def test_fifo_order(kind, values):
    queue = ArrayQueue() if kind == "array" else LinkedQueue()
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert list(queue) == values
    assert [queue.dequeue() for _ in values] == values
    assert queue.is_empty()


@given(values=st.lists(st.integers(), min_size=1))
def test_both_queues_agree(values):
    array_queue = ArrayQueue(capacity=len(values))
    linked_queue = LinkedQueue()
    for value in values:
        array_queue.enqueue(value)
        linked_queue.enqueue(value)
    while not linked_queue.is_empty():
        assert array_queue.peek() == linked_queue.peek()
        assert array_queue.dequeue() == linked_queue.dequeue()
    assert array_queue.is_empty()


def test_array_queue_full():
    queue = ArrayQueue(capacity=3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.is_full() is True
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    assert list(queue) == [1, 2, 3]


def test_array_queue_frees_space_after_dequeue():
    queue = ArrayQueue(capacity=2)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()
    assert queue.is_full() is False
    queue.enqueue(3)
    assert list(queue) == [2, 3]


def test_array_queue_default_capacity_is_bounded():
    queue = ArrayQueue()
    for value in range(queue.capacity):
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(-1)
    assert len(queue) == queue.capacity


@pytest.mark.parametrize("capacity", [0, -1])
def test_array_queue_rejects_bad_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayQueue(capacity)


def test_iteration_does_not_consume():
    queue = LinkedQueue()
    for value in (5, 10, 15):
        queue.enqueue(value)
    assert list(queue) == list(queue) == [5, 10, 15]
    assert len(queue) == 3