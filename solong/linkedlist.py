"""A singly linked list of arbitrary contents."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a LinkedList: its content and the following node."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list supporting insertion at either end.

    Contents may be any value, None included.
    """

    def __init__(self, contents=()):
        self.head = None
        self._tail = None
        for content in contents:
            self.add_back(content)

    def add_front(self, content):
        """Insert content before the first node and return its new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def add_back(self, content):
        """Append content after the last node and return its new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def _nodes(self):
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self):
        return sum(1 for _ in self._nodes())

    def __iter__(self):
        for node in self._nodes():
            yield node.content

    def last(self):
        """Return the last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete=None):
        """Remove every node, passing each content to delete first if given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None
        self._tail = None

    def for_each(self, func):
        """Call func on the content of every node, in order."""
        if func is None:
            raise TypeError("for_each needs a function")
        for content in self:
            func(content)

    def map(self, func):
        """Return a new list holding func applied to every content."""
        if func is None:
            raise TypeError("map needs a function")
        return LinkedList(func(content) for content in self)

    def __repr__(self):
        return f"LinkedList({list(self)!r})"