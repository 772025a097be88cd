import pytest

from konosubash.linkedlist import LinkedList, ListNode


def test_items_keep_their_order():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_front_puts_content_first():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_push_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.push_back("x")
    assert lst.head is node
    assert lst.last() is node


def test_push_back_appends():
    lst = LinkedList([1])
    lst.push_back(2)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last().content == 3
    assert lst.last().next is None


def test_last_is_a_node():
    lst = LinkedList(["only"])
    tail = lst.last()
    assert isinstance(tail, ListNode) and tail.content == "only"


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList(["a"])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    seen = []
    LinkedList(["x", "y"]).for_each(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList(["a", "b"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(original) == ["a", "b"]
    assert mapped.head is not original.head


def test_map_failure_deletes_mapped_contents():
    deleted = []

    def func(value):
        if value == 3:
            raise ValueError("bad")
        return value * 10

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [10, 20]


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper)) == 0