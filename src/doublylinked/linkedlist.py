"""Doubly-linked list container with weak back-references and removal handles."""

import logging
import weakref
from typing import Generic, Iterator

from doublylinked.errors import InvalidItemError
from doublylinked.types import Destructor, Predicate, T, Visitor

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """A node in the doubly-linked list.

    The forward ``next`` link owns the following node. The ``previous`` link is
    a weak reference, so a node is kept alive only by its predecessor (or by the
    list itself when it is the head).
    """

    __slots__ = ("item", "next", "_previous", "owner", "__weakref__")

    def __init__(self, item: T) -> None:
        self.item = item
        self.next: Node[T] | None = None
        self._previous: weakref.ReferenceType[Node[T]] | None = None
        self.owner: DoublyLinkedList[T] | None = None

    @property
    def previous(self) -> "Node[T] | None":
        """The node before this one, or None at the head or once unlinked."""
        if self._previous is None:
            return None
        return self._previous()

    @previous.setter
    def previous(self, node: "Node[T] | None") -> None:
        self._previous = None if node is None else weakref.ref(node)

    def __repr__(self) -> str:
        return f"Node({self.item!r})"


class Remover(Generic[T]):
    """Zero-argument handle that removes one specific node from its list.

    Returned by :meth:`DoublyLinkedList.add`. Calling it more than once, or after
    the node left the list through ``remove()`` or ``clear()``, does nothing.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Node[T]) -> None:
        self._node = node

    @property
    def active(self) -> bool:
        """Return True while the node is still linked into a list."""
        return self._node.owner is not None

    def __call__(self) -> None:
        owner = self._node.owner
        if owner is None:
            logger.debug("Remover called for unlinked node %r", self._node)
            return
        owner._unlink(self._node)


class DoublyLinkedList(Generic[T]):
    """Insertion-ordered doubly-linked list.

    Queries on an empty list and removals of missing items return None or do
    nothing; they never raise. Mutating the list while traversing it with
    ``for_each()`` or ``find()`` is unsupported.
    """

    def __init__(self, item: T | None = None) -> None:
        """
        Initialize the list.

        Args:
            item: Optional first item. When given it becomes both head and tail.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        if item is not None:
            self.add(item)

    def add(self, item: T) -> Remover[T]:
        """
        Append an item after the current tail. O(1).

        Args:
            item: Item to store. Must not be None.

        Returns:
            A handle that removes exactly this occurrence when called. It is the
            only way to target one occurrence among several equal items.

        Raises:
            InvalidItemError: If item is None
        """
        if item is None:
            raise InvalidItemError("Cannot add None to a DoublyLinkedList")

        node = Node(item)
        node.owner = self
        if self._tail is None:
            self._head = node
        else:
            node.previous = self._tail
            self._tail.next = node
        self._tail = node
        self._size += 1
        return Remover(node)

    def remove(
        self,
        item: T,
        destructor: Destructor[T] | None = None,
        finder: Predicate[T] | None = None,
    ) -> None:
        """
        Remove the first node matching item, scanning from the head. O(n).

        Args:
            item: Item to match by equality. When a finder is given it is not
                used for matching and is only passed on to the destructor.
            destructor: Called with ``item`` after the node has been unlinked.
            finder: Predicate that replaces equality matching.
        """
        node = self._head
        while node is not None:
            if finder is not None:
                matched = finder(node.item)
            else:
                matched = node.item is item or node.item == item
            if matched:
                break
            node = node.next

        if node is None:
            logger.debug("remove(%r): no matching node", item)
            return

        self._unlink(node)
        if destructor is not None:
            destructor(item)

    def head(self) -> T | None:
        """Return the first item, or None if the list is empty."""
        return None if self._head is None else self._head.item

    def tail(self) -> T | None:
        """Return the last item, or None if the list is empty."""
        return None if self._tail is None else self._tail.item

    def for_each(self, fn: Visitor[T]) -> None:
        """Call fn with every item from head to tail."""
        for node in self._nodes():
            fn(node.item)

    def find(self, predicate: Predicate[T]) -> T | None:
        """Return the first item for which predicate is true, or None."""
        for node in self._nodes():
            if predicate(node.item):
                return node.item
        return None

    def array(self) -> list[T]:
        """Return a new list of all items from head to tail."""
        return [node.item for node in self._nodes()]

    def clear(self) -> None:
        """Unlink every node. Items themselves are left untouched."""
        node = self._head
        while node is not None:
            following = node.next
            node.next = None
            node.previous = None
            node.owner = None
            node = following
        self._head = None
        self._tail = None
        logger.debug("Cleared %d node(s)", self._size)
        self._size = 0

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _unlink(self, node: Node[T]) -> None:
        """Detach node from the chain, fixing head and tail. O(1)."""
        previous = node.previous
        following = node.next
        if previous is None:
            self._head = following
        else:
            previous.next = following
        if following is None:
            self._tail = previous
        else:
            following.previous = previous
        node.next = None
        node.previous = None
        node.owner = None
        self._size -= 1

    def __iter__(self) -> Iterator[T]:
        """Iterate over a snapshot of the items taken when iteration starts."""
        return iter(self.array())

    def __len__(self) -> int:
        """Return the number of items in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.array()!r})"
