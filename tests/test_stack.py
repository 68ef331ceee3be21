import pytest

from algolab.stack import (
    MAX_SIZE,
    ArrayStack,
    StackOverflowError,
    StackUnderflowError,
    main,
)


def test_push_and_top():
    stack = ArrayStack()
    for value in (4, 8, 12, 16):
        stack.push(value)
    assert stack.top() == 16
    assert len(stack) == 4


def test_pop_is_lifo():
    stack = ArrayStack()
    values = [4, 8, 12, 16]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()


def test_top_does_not_remove():
    stack = ArrayStack()
    stack.push("a")
    stack.top()
    assert len(stack) == 1


def test_pop_empty_raises():
    stack = ArrayStack()
    with pytest.raises(StackUnderflowError, match="Stack Underflow"):
        stack.pop()


def test_top_empty_raises():
    with pytest.raises(StackUnderflowError, match="Stack is Empty"):
        ArrayStack().top()


def test_overflow_at_default_capacity():
    stack = ArrayStack()
    for value in range(MAX_SIZE):
        stack.push(value)
    with pytest.raises(StackOverflowError, match="Stack Overflow"):
        stack.push(MAX_SIZE)
    assert len(stack) == MAX_SIZE
    assert stack.top() == MAX_SIZE - 1


def test_custom_capacity():
    stack = ArrayStack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflowError):
        stack.push(3)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayStack(capacity=-1)


def test_errors_are_index_errors():
    with pytest.raises(IndexError):
        ArrayStack().pop()


def test_is_empty_transitions():
    stack = ArrayStack()
    assert stack.is_empty()
    stack.push(0)
    assert not stack.is_empty()


def test_main_reports_underflows(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Stack Underflow\n" * 4