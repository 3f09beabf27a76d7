"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["Node", "LinkedList"]


@dataclass
class Node:
    """One cell of a linked list."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its head, tail and length."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or ``None`` for an empty list."""
        return self._head

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` for an empty list."""
        return self._tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to *delete* first, front to back."""
        node = self._head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self._head = self._tail = None
        self._size = 0

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call *func* on each content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list holding ``func(content)`` for each content.

        If *func* returns ``None`` for any content, the contents produced so
        far are passed to *delete*, and ``ValueError`` is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"map function returned None for {content!r}")
            result.push_back(mapped)
        return result