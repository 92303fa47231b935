import pytest

from quickparse.linkedlist import LinkedList, ListElement, str_equal, str_iequal


def test_append_keeps_order():
    ll = LinkedList()
    for word in ["a", "b", "c"]:
        ll.append(word)
    assert list(ll) == ["a", "b", "c"]
    assert len(ll) == 3


def test_prepend_reverses_order():
    ll = LinkedList()
    for word in ["a", "b", "c"]:
        ll.prepend(word)
    assert list(ll) == ["c", "b", "a"]


def test_init_from_items_and_reversed():
    ll = LinkedList([1, 2, 3])
    assert list(reversed(ll)) == [3, 2, 1]


def test_append_none_is_refused():
    ll = LinkedList()
    assert ll.append(None) is None
    assert ll.prepend(None) is None
    assert ll.is_empty()


def test_append_returns_element_with_data():
    ll = LinkedList()
    element = ll.append("x")
    assert isinstance(element, ListElement)
    assert element.data == "x"
    assert ll.first is element and ll.last is element


def test_pop_front_and_back():
    ll = LinkedList([1, 2, 3])
    assert ll.pop_front() == 1
    assert ll.pop_back() == 3
    assert ll.pop() == 2
    assert ll.is_empty()
    assert ll.pop_front() is None
    assert ll.pop_back() is None


def test_remove_element_middle():
    ll = LinkedList()
    ll.append("a")
    middle = ll.append("b")
    ll.append("c")
    assert ll.remove_element(middle) == "b"
    assert list(ll) == ["a", "c"]
    assert list(reversed(ll)) == ["c", "a"]


def test_remove_element_from_other_list_raises():
    one = LinkedList()
    other = LinkedList()
    element = one.append("a")
    with pytest.raises(ValueError):
        other.remove_element(element)
    assert list(one) == ["a"]


def test_remove_element_none():
    ll = LinkedList([1])
    assert ll.remove_element(None) is None
    assert list(ll) == [1]


def test_iterate_stops_on_false():
    seen = []

    def visit(item):
        seen.append(item)
        return item < 2

    ll = LinkedList([1, 2, 3])
    assert ll.iterate(visit) is False
    assert seen == [1, 2]


def test_iterate_reverse_runs_all():
    seen = []
    ll = LinkedList([1, 2, 3])
    assert ll.iterate_reverse(lambda item: seen.append(item) or True) is True
    assert seen == [3, 2, 1]


def test_iterate_without_function():
    assert LinkedList([1]).iterate(None) is True


def test_find_and_remove_with_comparators():
    ll = LinkedList(["Alpha", "beta", "Gamma"])
    assert ll.find("alpha", str_equal) is None
    found = ll.find("alpha", str_iequal)
    assert found is not None and found.data == "Alpha"
    assert ll.remove("GAMMA", str_iequal) == "Gamma"
    assert list(ll) == ["Alpha", "beta"]
    assert ll.remove("delta", str_equal) is None


def test_find_requires_data_and_comparator():
    ll = LinkedList(["a"])
    assert ll.find(None, str_equal) is None
    assert ll.find("a", None) is None


def test_clear_calls_dtor_in_order():
    released = []
    ll = LinkedList(["a", "b"])
    ll.clear(released.append)
    assert released == ["a", "b"]
    assert ll.is_empty()
    assert len(ll) == 0


def test_string_comparators():
    assert str_equal("abc", "abc")
    assert not str_equal("abc", "ABC")
    assert str_iequal("Hello", "hELLO")
    assert not str_iequal("abc", "abd")
    assert not str_iequal("abc", "abcd")