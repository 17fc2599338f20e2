import pytest

from algolab.linked_list import LinkedList


def test_init_keeps_order():
    assert list(LinkedList([3, 1, 2])) == [3, 1, 2]


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.render() == ""


def test_push_front_reverses_insertion_order():
    items = LinkedList()
    for value in range(1, 11):
        items.push_front(value)
    assert list(items) == list(range(10, 0, -1))
    assert len(items) == 10


def test_append_adds_at_end():
    items = LinkedList([1])
    items.append(2)
    items.append(3)
    assert list(items) == [1, 2, 3]


def test_reversed():
    items = LinkedList([5, 6, 7])
    assert list(reversed(items)) == [7, 6, 5]


def test_find_returns_first_position():
    items = LinkedList([4, 8, 4])
    assert items.find(4) == 0
    assert items.find(8) == 1
    assert items.find(9) is None


def test_contains():
    items = LinkedList([4, 8])
    assert 8 in items
    assert 9 not in items


@pytest.mark.parametrize(
    "values, target, expected",
    [
        ([1, 2, 3], 1, [2, 3]),
        ([1, 2, 3], 2, [1, 3]),
        ([1, 2, 3], 3, [1, 2]),
        ([2, 2], 2, [2]),
    ],
)
def test_remove_first_match(values, target, expected):
    items = LinkedList(values)
    assert items.remove(target) is True
    assert list(items) == expected
    assert len(items) == len(expected)


def test_remove_missing_leaves_list_unchanged():
    items = LinkedList([1, 2])
    assert items.remove(7) is False
    assert list(items) == [1, 2]
    assert LinkedList().remove(1) is False


def test_append_after_removing_last():
    items = LinkedList([1, 2])
    items.remove(2)
    items.append(3)
    assert list(items) == [1, 3]


def test_clear():
    items = LinkedList([1, 2, 3])
    items.clear()
    assert len(items) == 0
    assert list(items) == []


def test_render_format():
    assert LinkedList([10, 20]).render() == "10 20 "