import pytest

from ftlib.linked_list import (
    Node,
    lst_add_back,
    lst_add_front,
    lst_clear,
    lst_del_one,
    lst_iter,
    lst_last,
    lst_map,
    lst_new,
    lst_size,
)


def build(*items):
    head = None
    for item in items:
        head = lst_add_back(head, lst_new(item))
    return head


def test_lst_new_holds_content_and_no_next():
    node = lst_new("abc")
    assert node.content == "abc"
    assert node.next is None


def test_iteration_yields_contents_in_order():
    head = build(1, 2, 3)
    assert list(head) == [1, 2, 3]


def test_add_front_returns_new_head():
    head = build("b", "c")
    node = lst_new("a")
    new_head = lst_add_front(head, node)
    assert new_head is node
    assert list(new_head) == ["a", "b", "c"]


def test_add_front_to_empty_list():
    node = lst_new(5)
    head = lst_add_front(None, node)
    assert head is node
    assert list(head) == [5]


def test_add_front_requires_node():
    with pytest.raises(ValueError):
        lst_add_front(build(1), None)


def test_add_back_to_empty_list_gives_node():
    node = lst_new("x")
    assert lst_add_back(None, node) is node


def test_add_back_appends_and_keeps_head():
    head = build(1, 2)
    node = lst_new(3)
    assert lst_add_back(head, node) is head
    assert lst_last(head) is node
    assert list(head) == [1, 2, 3]


def test_add_back_without_node_leaves_list():
    head = build(1, 2)
    assert lst_add_back(head, None) is head
    assert list(head) == [1, 2]
    assert lst_add_back(None, None) is None


@pytest.mark.parametrize("items", [(), (1,), (1, 2, 3, 4, 5)])
def test_size_matches_item_count(items):
    assert lst_size(build(*items)) == len(items)


def test_last_of_empty_list_is_none():
    assert lst_last(None) is None


def test_last_of_single_node_is_itself():
    node = lst_new(0)
    assert lst_last(node) is node


def test_del_one_calls_delete_and_keeps_rest():
    head = build("a", "b")
    second = head.next
    released = []
    lst_del_one(head, released.append)
    assert released == ["a"]
    assert head.next is second
    assert list(second) == ["b"]


def test_del_one_without_delete_does_nothing():
    node = lst_new("keep")
    lst_del_one(node, None)
    assert node.content == "keep"


def test_clear_releases_every_content():
    head = build(1, 2, 3)
    released = []
    assert lst_clear(head, released.append) is None
    assert released == [1, 2, 3]


def test_clear_without_delete_returns_list_unchanged():
    head = build(1, 2)
    assert lst_clear(head, None) is head
    assert list(head) == [1, 2]


def test_clear_of_empty_list():
    released = []
    assert lst_clear(None, released.append) is None
    assert released == []


def test_iter_visits_each_content_in_order():
    seen = []
    lst_iter(build("x", "y", "z"), seen.append)
    assert seen == ["x", "y", "z"]


def test_iter_on_empty_list_calls_nothing():
    seen = []
    lst_iter(None, seen.append)
    assert seen == []


def test_map_builds_new_list_and_leaves_original():
    head = build("ab", "cd")
    mapped = lst_map(head, str.upper, lambda _: None)
    assert list(mapped) == ["AB", "CD"]
    assert list(head) == ["ab", "cd"]
    assert mapped is not head
    assert lst_size(mapped) == lst_size(head)


@pytest.mark.parametrize(
    "head, f, delete",
    [
        (None, str.upper, print),
        (Node("a"), None, print),
        (Node("a"), str.upper, None),
    ],
)
def test_map_with_missing_argument_gives_none(head, f, delete):
    assert lst_map(head, f, delete) is None


def test_map_releases_partial_result_on_error():
    head = build(1, 2, 0, 4)
    released = []

    def invert(value):
        return 10 // value

    with pytest.raises(ZeroDivisionError):
        lst_map(head, invert, released.append)
    assert released == [invert(1), invert(2)]
    assert list(head) == [1, 2, 0, 4]