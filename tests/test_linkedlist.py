import pytest
from hypothesis import given
from hypothesis import strategies as st

from kernlib.linkedlist import LinkedList, ListNode


def by_key(a, b):
    return a[0] < b[0]


def test_construct_and_iterate():
    lst = LinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]
    assert len(lst) == 3
    assert not lst.is_empty()


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.is_empty()
    assert list(lst) == []
    with pytest.raises(IndexError):
        lst.front()
    with pytest.raises(IndexError):
        lst.back()
    with pytest.raises(IndexError):
        lst.pop_front()
    with pytest.raises(IndexError):
        lst.pop_back()


def test_push_and_pop():
    lst = LinkedList()
    lst.push_back("b")
    lst.push_front("a")
    lst.push_back("c")
    assert lst.front() == "a"
    assert lst.back() == "c"
    assert lst.pop_front() == "a"
    assert lst.pop_back() == "c"
    assert list(lst) == ["b"]


def test_insert_before_and_at_end():
    lst = LinkedList([1, 3])
    node3 = list(lst.nodes())[1]
    new = lst.insert_before(node3, 2)
    lst.insert_before(None, 4)
    assert isinstance(new, ListNode) and new.value == 2
    assert list(lst) == [1, 2, 3, 4]


def test_remove_returns_following_node():
    lst = LinkedList([1, 2, 3])
    first, second, third = lst.nodes()
    assert lst.remove(second) is third
    assert lst.remove(third) is None
    assert list(lst) == [1]


def test_remove_foreign_node_rejected():
    a = LinkedList([1])
    b = LinkedList([2])
    node = next(b.nodes())
    with pytest.raises(ValueError):
        a.remove(node)
    with pytest.raises(ValueError):
        a.insert_before(node, 5)


def test_remove_while_iterating_nodes():
    lst = LinkedList(range(6))
    for node in lst.nodes():
        if node.value % 2:
            lst.remove(node)
    assert list(lst) == [0, 2, 4]


def test_splice_between_lists():
    dst = LinkedList([1, 5])
    src = LinkedList([2, 3, 4, 9])
    src_nodes = list(src.nodes())
    before = list(dst.nodes())[1]
    dst.splice(before, src_nodes[0], src_nodes[3])
    assert list(dst) == [1, 2, 3, 4, 5]
    assert list(src) == [9]
    # moved nodes now belong to dst
    dst.remove(src_nodes[1])
    assert list(dst) == [1, 2, 4, 5]


def test_splice_to_end_with_none():
    dst = LinkedList(["x"])
    src = LinkedList(["a", "b"])
    dst.splice(None, next(src.nodes()), None)
    assert list(dst) == ["x", "a", "b"]
    assert src.is_empty()


def test_splice_within_list():
    lst = LinkedList([1, 2, 3, 4])
    nodes = list(lst.nodes())
    lst.splice(nodes[0], nodes[2], None)
    assert list(lst) == [3, 4, 1, 2]


def test_splice_empty_range_is_noop():
    lst = LinkedList([1, 2])
    node = next(lst.nodes())
    lst.splice(None, node, node)
    assert list(lst) == [1, 2]


def test_reverse():
    lst = LinkedList([1, 2, 3, 4])
    lst.reverse()
    assert list(lst) == [4, 3, 2, 1]
    assert list(reversed(lst)) == [1, 2, 3, 4]
    lst.push_back(0)
    assert lst.back() == 0


def test_reverse_empty_and_single():
    empty = LinkedList()
    empty.reverse()
    assert list(empty) == []
    one = LinkedList(["only"])
    one.reverse()
    assert list(one) == ["only"]


@given(st.lists(st.integers()))
def test_reverse_matches_builtin(values):
    lst = LinkedList(values)
    lst.reverse()
    assert list(lst) == values[::-1]


@given(st.lists(st.integers()))
def test_sort_matches_sorted(values):
    lst = LinkedList(values)
    lst.sort()
    assert list(lst) == sorted(values)
    assert list(reversed(lst)) == sorted(values, reverse=True)


@given(st.lists(st.tuples(st.integers(0, 3), st.integers())))
def test_sort_is_stable(values):
    lst = LinkedList(values)
    lst.sort(by_key)
    assert list(lst) == sorted(values, key=lambda pair: pair[0])


def test_sort_custom_less_descending():
    lst = LinkedList([3, 1, 2])
    lst.sort(lambda a, b: a > b)
    assert list(lst) == [3, 2, 1]


@given(st.lists(st.integers()), st.integers())
def test_insert_ordered_keeps_sorted(values, extra):
    lst = LinkedList(sorted(values))
    node = lst.insert_ordered(extra)
    assert node.value == extra
    assert list(lst) == sorted(values + [extra])


def test_insert_ordered_goes_after_equals():
    lst = LinkedList([(1, "a"), (2, "b")])
    lst.insert_ordered((1, "new"), by_key)
    assert list(lst) == [(1, "a"), (1, "new"), (2, "b")]


def test_unique_collects_duplicates():
    lst = LinkedList([1, 1, 2, 2, 2, 1, 3])
    dups = LinkedList()
    lst.unique(duplicates=dups)
    assert list(lst) == [1, 2, 1, 3]
    assert list(dups) == [1, 2, 2]


@given(st.lists(st.integers(0, 5)))
def test_unique_without_duplicates_list(values):
    lst = LinkedList(sorted(values))
    lst.unique()
    assert list(lst) == sorted(set(values))


def test_max_and_min_pick_earliest():
    lst = LinkedList([(2, "first"), (0, "low1"), (2, "second"), (0, "low2")])
    assert lst.max(by_key) == (2, "first")
    assert lst.min(by_key) == (0, "low1")


@given(st.lists(st.integers(), min_size=1))
def test_max_min_match_builtins(values):
    lst = LinkedList(values)
    assert lst.max() == max(values)
    assert lst.min() == min(values)


def test_max_min_empty_raise():
    with pytest.raises(ValueError):
        LinkedList().max()
    with pytest.raises(ValueError):
        LinkedList().min()