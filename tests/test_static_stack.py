import pytest
from hypothesis import given
from hypothesis import strategies as st

from plainds.static_stack import StackFullError, StaticStack


def test_new_stack_is_empty():
    stack = StaticStack(4)
    assert len(stack) == 0
    assert not stack
    assert not stack.is_full()
    assert stack.capacity == 4


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        StaticStack(-3)


def test_zero_capacity_is_full():
    stack = StaticStack(0)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(1)


def test_push_until_full():
    stack = StaticStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)
    assert list(stack) == [2, 1]


def test_pop_and_peek_empty_raise():
    stack = StaticStack(1)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()
    assert len(stack) == 0


def test_lifo_order_and_peek():
    stack = StaticStack(3)
    for value in ("x", "y", "z"):
        stack.push(value)
    assert stack.peek() == "z"
    assert len(stack) == 3
    assert [stack.pop() for _ in range(3)] == ["z", "y", "x"]
    assert not stack


def test_space_is_reusable_after_pop():
    stack = StaticStack(1)
    stack.push(1)
    assert stack.pop() == 1
    stack.push(2)
    assert stack.peek() == 2
    assert stack.is_full()


@given(st.integers(min_value=1, max_value=8),
       st.lists(st.tuples(st.booleans(), st.integers())))
def test_matches_bounded_model(capacity, operations):
    stack = StaticStack(capacity)
    model = []
    popped = []
    expected_popped = []
    for is_push, value in operations:
        if is_push:
            if len(model) == capacity:
                with pytest.raises(StackFullError):
                    stack.push(value)
            else:
                stack.push(value)
                model.append(value)
        elif len(model) > 0:
            popped.append(stack.pop())
            expected_popped.append(model.pop())
        else:
            with pytest.raises(IndexError):
                stack.pop()
        assert list(stack) == model[::-1]
        assert stack.is_full() == (len(model) == capacity)
    assert popped == expected_popped