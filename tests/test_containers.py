import pytest

from dsatoolkit.containers import (
    ArrayQueue,
    ArrayStack,
    EmptyError,
    FullError,
    LinkedQueue,
    LinkedStack,
)

VALUES = [5, 1, 8, 3, 9]


def _drain(container):
    out = []
    while len(container):
        out.append(container.pop())
    return out


@pytest.mark.parametrize("factory", [ArrayStack, LinkedStack])
def test_stack_is_last_in_first_out(factory):
    stack = factory()
    for v in VALUES:
        stack.push(v)
    assert len(stack) == len(VALUES)
    assert stack.top() == VALUES[-1]
    assert _drain(stack) == VALUES[::-1]
    assert len(stack) == 0


@pytest.mark.parametrize("factory", [ArrayQueue, LinkedQueue])
def test_queue_is_first_in_first_out(factory):
    queue = factory()
    for v in VALUES:
        queue.push(v)
    assert len(queue) == len(VALUES)
    assert queue.front() == VALUES[0]
    assert _drain(queue) == VALUES
    assert len(queue) == 0


@pytest.mark.parametrize("factory", [ArrayStack, LinkedStack])
def test_empty_stack_raises(factory):
    stack = factory()
    with pytest.raises(EmptyError):
        stack.pop()
    with pytest.raises(EmptyError):
        stack.top()


@pytest.mark.parametrize("factory", [ArrayQueue, LinkedQueue])
def test_empty_queue_raises(factory):
    queue = factory()
    with pytest.raises(EmptyError):
        queue.pop()
    with pytest.raises(EmptyError):
        queue.front()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        LinkedStack().pop()


def test_array_stack_default_capacity_is_ten():
    stack = ArrayStack()
    for v in range(10):
        stack.push(v)
    with pytest.raises(FullError):
        stack.push(10)
    assert len(stack) == 10
    assert stack.top() == 9


def test_array_queue_default_capacity_is_ten():
    queue = ArrayQueue()
    for v in range(10):
        queue.push(v)
    with pytest.raises(FullError):
        queue.push(10)
    assert list(queue) == list(range(10))


def test_array_stack_full_then_pop_allows_push():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(FullError):
        stack.push(3)
    assert stack.pop() == 2
    stack.push(4)
    assert _drain(stack) == [4, 1]


def test_array_queue_wraps_around():
    queue = ArrayQueue(3)
    for v in (1, 2, 3):
        queue.push(v)
    assert queue.pop() == 1
    assert queue.pop() == 2
    queue.push(4)
    queue.push(5)
    assert list(queue) == [3, 4, 5]
    assert queue.front() == 3
    with pytest.raises(FullError):
        queue.push(6)
    assert _drain(queue) == [3, 4, 5]


def test_array_queue_iteration_does_not_consume():
    queue = ArrayQueue(4)
    for v in VALUES[:4]:
        queue.push(v)
    assert list(queue) == VALUES[:4]
    assert len(queue) == 4


def test_zero_capacity_is_always_full():
    with pytest.raises(FullError):
        ArrayStack(0).push(1)
    with pytest.raises(FullError):
        ArrayQueue(0).push(1)


@pytest.mark.parametrize("factory", [ArrayStack, ArrayQueue])
def test_negative_capacity_rejected(factory):
    with pytest.raises(ValueError):
        factory(-1)


def test_linked_queue_reusable_after_emptying():
    queue = LinkedQueue()
    queue.push("a")
    assert queue.pop() == "a"
    queue.push("b")
    queue.push("c")
    assert queue.front() == "b"
    assert _drain(queue) == ["b", "c"]


def test_linked_stack_interleaved_operations():
    stack = LinkedStack()
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    stack.push(3)
    assert stack.top() == 3
    assert _drain(stack) == [3, 1]