import pytest

from libft.linked_list import LinkedList, Node


def test_construct_from_items_preserves_order():
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


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.content == 1


def test_push_back_appends_and_updates_last():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() is node


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    assert len(lst) == 1


def test_last_returns_final_node():
    lst = LinkedList(["first", "middle", "end"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "end"
    assert last.next is None


def test_nodes_are_linked():
    lst = LinkedList([1, 2])
    assert lst.head.next.content == 2
    assert lst.head.next is lst.last()


def test_clear_calls_delete_front_to_back():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList("abc")
    lst.clear()
    assert list(lst) == []


def test_list_reusable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(9)
    assert list(lst) == [9]


def test_for_each_visits_in_order():
    seen = []
    lst = LinkedList(["x", "y"])
    lst.for_each(seen.append)
    assert seen == ["x", "y"]


def test_for_each_can_mutate_contents():
    boxes = [[1], [2]]
    lst = LinkedList(boxes)
    lst.for_each(lambda box: box.append(0))
    assert [box[-1] for box in lst] == [0, 0]


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(str)
    assert list(mapped) == ["1", "2", "3"]
    assert list(source) == [1, 2, 3]
    assert mapped is not source


def test_map_failure_deletes_partial_results_and_raises():
    deleted = []
    source = LinkedList([1, 2, 3])

    def convert(value):
        return None if value == 3 else value * 10

    with pytest.raises(ValueError):
        source.map(convert, deleted.append)
    assert deleted == [10, 20]
    assert list(source) == [1, 2, 3]


def test_map_empty_list():
    assert list(LinkedList().map(str)) == []


@pytest.mark.parametrize("count", [0, 1, 5])
def test_len_matches_iteration(count):
    lst = LinkedList(range(count))
    assert len(lst) == len(list(lst)) == count