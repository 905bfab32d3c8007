"""Intrusive doubly linked lists and single-headed hash lists.

A node is embedded in an owning object and carries a reference back to it.
A :class:`LinkedList` has a sentinel node, so the list is circular. An
:class:`HListHead` holds only a pointer to the first node; each node keeps a
back link to whatever points at it, either the head or the previous node.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union


class ListError(Exception):
    """Raised when a list operation is applied to a node in the wrong state."""


class _Poison:
    """Marker left in a node's back link after it has been deleted."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<poison>"


_POISON = _Poison()


class ListNode:
    """A link embedded in an owner object.

    A fresh node points to itself, so it counts as an empty, unlinked ring.
    """

    __slots__ = ("owner", "prev", "next")

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.prev: Optional[ListNode] = self
        self.next: Optional[ListNode] = self

    def _detach(self) -> None:
        if self.prev is None or self.next is None:
            raise ListError("node has been deleted and is not on any list")
        self.next.prev = self.prev
        self.prev.next = self.next

    def _insert_between(self, prev: ListNode, next: ListNode) -> None:
        next.prev = self
        self.next = next
        self.prev = prev
        prev.next = self

    def _reinit(self) -> None:
        self.prev = self
        self.next = self

    def unlink(self) -> None:
        """Remove the node from its list, leaving it in a deleted state."""
        self._detach()
        self.next = None
        self.prev = None

    def unlink_init(self) -> None:
        """Remove the node from its list and make it an empty ring again."""
        self._detach()
        self._reinit()

    def replace(self, new: ListNode) -> None:
        """Put ``new`` where this node stands; this node's links are left as they were."""
        if self.prev is None or self.next is None:
            raise ListError("cannot replace a deleted node")
        new.next = self.next
        new.next.prev = new
        new.prev = self.prev
        new.prev.next = new

    def replace_init(self, new: ListNode) -> None:
        """Put ``new`` where this node stands and reset this node."""
        self.replace(new)
        self._reinit()

    def is_linked(self) -> bool:
        """True when the node sits on a list together with other nodes."""
        return self.next is not None and self.next is not self

    def __repr__(self) -> str:
        return f"ListNode(owner={self.owner!r})"


class LinkedList:
    """A circular doubly linked list built around a sentinel head."""

    __slots__ = ("_head",)

    def __init__(self) -> None:
        self._head = ListNode(None)

    def _check_free(self, node: ListNode) -> None:
        if node is self._head:
            raise ListError("the list head cannot be added to a list")
        if node.is_linked():
            raise ListError("node is already on a list")

    def add(self, node: ListNode) -> None:
        """Insert ``node`` right after the head (stack order)."""
        self._check_free(node)
        node._insert_between(self._head, self._head.next)

    def add_tail(self, node: ListNode) -> None:
        """Insert ``node`` right before the head (queue order)."""
        self._check_free(node)
        node._insert_between(self._head.prev, self._head)

    def move(self, node: ListNode) -> None:
        """Take ``node`` off its current list and put it at the front of this one."""
        node._detach()
        node._insert_between(self._head, self._head.next)

    def move_tail(self, node: ListNode) -> None:
        """Take ``node`` off its current list and put it at the back of this one."""
        node._detach()
        node._insert_between(self._head.prev, self._head)

    def is_last(self, node: ListNode) -> bool:
        """True when ``node`` is the last entry of this list."""
        return node.next is self._head

    def empty(self) -> bool:
        """True when the list holds no entries."""
        return self._head.next is self._head

    def is_singular(self) -> bool:
        """True when the list holds exactly one entry."""
        return not self.empty() and self._head.next is self._head.prev

    def first(self) -> Any:
        """The owner of the first entry."""
        if self.empty():
            raise ListError("list is empty")
        return self._head.next.owner

    def last(self) -> Any:
        """The owner of the last entry."""
        if self.empty():
            raise ListError("list is empty")
        return self._head.prev.owner

    def nodes(self) -> Iterator[ListNode]:
        """Yield the nodes front to back; the yielded node may be removed meanwhile."""
        pos = self._head.next
        while pos is not self._head:
            following = pos.next
            yield pos
            pos = following

    def _nodes_reversed(self) -> Iterator[ListNode]:
        pos = self._head.prev
        while pos is not self._head:
            preceding = pos.prev
            yield pos
            pos = preceding

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.owner

    def __reversed__(self) -> Iterator[Any]:
        for node in self._nodes_reversed():
            yield node.owner

    def __len__(self) -> int:
        return sum(1 for _ in self.nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


_Link = Union["HListHead", "HListNode"]


def _set_forward(link: _Link, value: Optional[HListNode]) -> None:
    if isinstance(link, HListHead):
        link.first = value
    else:
        link.next = value


def _get_forward(link: _Link) -> Optional[HListNode]:
    if isinstance(link, HListHead):
        return link.first
    return link.next


class HListNode:
    """A hash-list link: a forward pointer and a back link to its referrer."""

    __slots__ = ("owner", "next", "pprev")

    def __init__(self, owner: Any = None) -> None:
        self.owner = owner
        self.next: Optional[HListNode] = None
        self.pprev: Union[_Link, _Poison, None] = None

    def _detach(self) -> None:
        if self.pprev is None or self.pprev is _POISON:
            raise ListError("node is not on any hash list")
        following = self.next
        _set_forward(self.pprev, following)
        if following is not None:
            following.pprev = self.pprev

    def unhashed(self) -> bool:
        """True when the node has never been added or was reset."""
        return self.pprev is None

    def delete(self) -> None:
        """Remove the node, leaving it in a deleted state."""
        self._detach()
        self.next = None
        self.pprev = _POISON

    def delete_init(self) -> None:
        """Remove the node if it is hashed and reset it."""
        if not self.unhashed():
            self._detach()
            self.next = None
            self.pprev = None

    def add_before(self, next: HListNode) -> None:
        """Insert this node in front of ``next``, which must be on a list."""
        if next.pprev is None or next.pprev is _POISON:
            raise ListError("reference node is not on any hash list")
        self.pprev = next.pprev
        self.next = next
        next.pprev = self
        _set_forward(self.pprev, self)

    def add_behind(self, prev: HListNode) -> None:
        """Insert this node right after ``prev``."""
        self.next = prev.next
        prev.next = self
        self.pprev = prev
        if self.next is not None:
            self.next.pprev = self

    def add_fake(self) -> None:
        """Make the node look hashed without being on any list."""
        self.pprev = self

    def is_fake(self) -> bool:
        """True when the node was made to look hashed by :meth:`add_fake`."""
        return self.pprev is self

    def is_singular_in(self, head: HListHead) -> bool:
        """True when this node is the only node of ``head``."""
        return self.next is None and self.pprev is head

    def __repr__(self) -> str:
        return f"HListNode(owner={self.owner!r})"


class HListHead:
    """Head of a hash list: a single pointer to the first node."""

    __slots__ = ("first",)

    def __init__(self) -> None:
        self.first: Optional[HListNode] = None

    def add_head(self, node: HListNode) -> None:
        """Insert ``node`` at the front of this list."""
        first = self.first
        node.next = first
        if first is not None:
            first.pprev = node
        self.first = node
        node.pprev = self

    def empty(self) -> bool:
        """True when the list has no nodes."""
        return self.first is None

    def move_to(self, new: HListHead) -> None:
        """Hand every node over to ``new`` and leave this head empty."""
        new.first = self.first
        if new.first is not None:
            new.first.pprev = new
        self.first = None

    def nodes(self) -> Iterator[HListNode]:
        """Yield the nodes in order; the yielded node may be removed meanwhile."""
        pos = self.first
        while pos is not None:
            following = pos.next
            yield pos
            pos = following

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.owner

    def __repr__(self) -> str:
        return f"HListHead({list(self)!r})"