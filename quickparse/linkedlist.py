"""A generic doubly linked list holding arbitrary objects."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

Comparator = Callable[[Any, Any], Any]


@dataclass(eq=False)
class ListElement:
    """A node of a :class:`LinkedList`."""

    data: Any
    next: Optional[ListElement] = field(default=None, repr=False)
    prev: Optional[ListElement] = field(default=None, repr=False)
    _owner: Optional[LinkedList] = field(default=None, init=False, repr=False)


class LinkedList:
    """A doubly linked list; ``None`` is never stored."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.first: Optional[ListElement] = None
        self.last: Optional[ListElement] = None
        if items is not None:
            for item in items:
                self.append(item)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _elements(self) -> Iterator[ListElement]:
        element = self.first
        while element is not None:
            following = element.next
            yield element
            element = following

    def _elements_reversed(self) -> Iterator[ListElement]:
        element = self.last
        while element is not None:
            preceding = element.prev
            yield element
            element = preceding

    def __len__(self) -> int:
        return sum(1 for _ in self._elements())

    def __iter__(self) -> Iterator[Any]:
        for element in self._elements():
            yield element.data

    def __reversed__(self) -> Iterator[Any]:
        for element in self._elements_reversed():
            yield element.data

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self.first is None

    def append(self, data: Any) -> Optional[ListElement]:
        """Add ``data`` at the end; returns the new element, or None for None data."""
        if data is None:
            return None
        element = ListElement(data, next=None, prev=self.last)
        element._owner = self
        if self.last is None:
            self.first = element
        else:
            self.last.next = element
        self.last = element
        return element

    def prepend(self, data: Any) -> Optional[ListElement]:
        """Add ``data`` at the front; returns the new element, or None for None data."""
        if data is None:
            return None
        element = ListElement(data, next=self.first, prev=None)
        element._owner = self
        if self.first is None:
            self.last = element
        else:
            self.first.prev = element
        self.first = element
        return element

    def remove_element(self, element: Optional[ListElement]) -> Any:
        """Unlink ``element`` from the list and return its data."""
        if element is None:
            return None
        if element._owner is not self:
            raise ValueError("element does not belong to this list")
        if element.prev is None:
            self.first = element.next
        else:
            element.prev.next = element.next
        if element.next is None:
            self.last = element.prev
        else:
            element.next.prev = element.prev
        element.next = element.prev = None
        element._owner = None
        return element.data

    def pop_front(self) -> Any:
        """Remove and return the first item, or None when empty."""
        if self.first is None:
            return None
        return self.remove_element(self.first)

    def pop_back(self) -> Any:
        """Remove and return the last item, or None when empty."""
        if self.last is None:
            return None
        return self.remove_element(self.last)

    def pop(self) -> Any:
        """Stack-style pop: remove and return the last item."""
        return self.pop_back()

    def iterate(self, func: Optional[Callable[[Any], Any]]) -> bool:
        """Call ``func`` on each item; False as soon as it returns a falsy value."""
        if func is None:
            return True
        return all(func(data) for data in self)

    def iterate_reverse(self, func: Optional[Callable[[Any], Any]]) -> bool:
        """Like :meth:`iterate`, from last to first."""
        if func is None:
            return True
        return all(func(data) for data in reversed(self))

    def find(self, data: Any, comp: Optional[Comparator]) -> Optional[ListElement]:
        """Return the first element whose data ``comp`` deems equal to ``data``."""
        if data is None or comp is None:
            return None
        return next((e for e in self._elements() if comp(e.data, data)), None)

    def remove(self, data: Any, comp: Optional[Comparator]) -> Any:
        """Remove the first matching element and return its data, or None."""
        element = self.find(data, comp)
        if element is None:
            return None
        return self.remove_element(element)

    def clear(self, dtor: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing every item to ``dtor`` first to last."""
        for element in self._elements():
            if dtor is not None:
                dtor(element.data)
            element.next = element.prev = None
            element._owner = None
        self.first = self.last = None


def str_equal(a: str, b: str) -> bool:
    """Comparator: the two strings are identical."""
    return a == b


def str_iequal(a: str, b: str) -> bool:
    """Comparator: the two strings are equal ignoring ASCII case."""
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)