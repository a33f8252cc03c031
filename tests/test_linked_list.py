import pytest
from hypothesis import given
from hypothesis import strategies as st

from plainds.linked_list import LinkedList

SMALL = st.integers(-20, 20)
STEPS = st.sampled_from(["front", "back", "at", "remove", "remove_at"])


@given(st.lists(SMALL, max_size=30))
def test_built_from_iterable(values):
    lst = LinkedList(values)
    assert (list(lst), len(lst), bool(lst)) == (values, len(values), bool(values))


def test_insert_front_reverses_order():
    lst = LinkedList()
    for v in [1, 2, 3]:
        lst.insert_front(v)
    assert list(lst) == [3, 2, 1]


def _step(lst, model, op, value):
    if op == "front":
        lst.insert_front(value)
        model.insert(0, value)
    elif op == "back":
        lst.insert_back(value)
        model.append(value)
    elif op == "at":
        index = value % (len(model) + 1)
        lst.insert_at(index, value)
        model.insert(index, value)
    elif op == "remove" and value in model:
        lst.remove(value)
        model.remove(value)
    elif op == "remove":
        with pytest.raises(ValueError):
            lst.remove(value)
    elif model:
        index = value % len(model)
        assert lst.remove_at(index) == model.pop(index)


@given(st.lists(st.tuples(STEPS, SMALL), max_size=40))
def test_agrees_with_builtin_list(steps):
    lst, model = LinkedList(), []
    for op, value in steps:
        _step(lst, model, op, value)
        assert list(lst) == model
        assert (value in lst) == (value in model)
    lst.insert_back("tail")
    assert list(lst) == model + ["tail"]


@pytest.mark.parametrize(
    "method, descending",
    [("insert_ascending", False), ("insert_descending", True)],
)
@given(values=st.lists(SMALL, max_size=30))
def test_ordered_insertion(method, descending, values):
    lst = LinkedList()
    for v in values:
        getattr(lst, method)(v)
    assert list(lst) == sorted(values, reverse=descending)
    lst.insert_back("end")
    assert list(lst)[-1] == "end"


@given(st.lists(st.integers(), min_size=1, max_size=30), st.data())
def test_getitem(values, data):
    index = data.draw(st.integers(-len(values), len(values) - 1))
    assert LinkedList(values)[index] == values[index]


@pytest.mark.parametrize(
    "call, error",
    [
        (lambda lst: lst.insert_at(-1, 0), IndexError),
        (lambda lst: lst.insert_at(4, 0), IndexError),
        (lambda lst: lst.remove_at(3), IndexError),
        (lambda lst: lst[3], IndexError),
        (lambda lst: lst[-4], IndexError),
        (lambda lst: lst.remove(9), ValueError),
    ],
)
def test_rejects_bad_arguments(call, error):
    lst = LinkedList([1, 2, 3])
    with pytest.raises(error):
        call(lst)
    assert list(lst) == [1, 2, 3]


def test_remove_only_element_then_append():
    lst = LinkedList([7])
    lst.remove(7)
    assert not lst
    lst.insert_back(8)
    assert list(lst) == [8]


def test_clear_then_reuse():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    lst.insert_back(5)
    assert list(lst) == [5]


def test_repr():
    assert repr(LinkedList([1, 2])) == "LinkedList([1, 2])"