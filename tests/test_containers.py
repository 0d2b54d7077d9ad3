import pytest

from algolab.containers import ArrayQueue, SinglyLinkedList, Stack, main


def test_stack_demo_sequence():
    stack = Stack()
    stack.push(2)
    stack.push(4)
    stack.push(3)
    assert stack.pop() == 3
    stack.push(1)
    assert len(stack) == 3
    assert stack.drain() == [1, 4, 2]
    assert len(stack) == 0


def test_stack_is_lifo():
    stack = Stack()
    values = list(range(20))
    for value in values:
        stack.push(value)
    assert stack.drain() == values[::-1]


def test_stack_pop_empty():
    with pytest.raises(IndexError):
        Stack().pop()
    assert Stack().drain() == []


def test_queue_is_fifo():
    queue = ArrayQueue()
    for value in range(1, 9):
        queue.push(value)
    popped = []
    while not queue.is_empty():
        popped.append(queue.pop())
    assert popped == list(range(1, 9))


def test_queue_pop_empty():
    queue = ArrayQueue()
    assert queue.is_empty()
    with pytest.raises(IndexError):
        queue.pop()


def test_queue_capacity_is_not_reused():
    queue = ArrayQueue(2)
    queue.push("a")
    assert queue.pop() == "a"
    queue.push("b")
    with pytest.raises(OverflowError):
        queue.push("c")


def test_linked_list():
    items = SinglyLinkedList()
    assert items.is_empty()
    assert items.describe() == ""
    for value in ("3", "123", "8"):
        items.push_back(value)
    assert not items.is_empty()
    assert list(items) == ["3", "123", "8"]
    assert items.describe() == "3 123 8"


def test_main_stack(capsys):
    assert main(["stack"]) == 0
    assert capsys.readouterr().out == "1 4 2 \n"


def test_main_queue(capsys):
    main(["queue"])
    assert capsys.readouterr().out == "1 2 3 4 5 6 7 8 \n"


def test_main_list(capsys):
    main(["list"])
    assert capsys.readouterr().out.splitlines() == ["1", "0", "3 123 8 "]