"""doublylinked - Generic insertion-ordered doubly-linked list with removal handles."""

from doublylinked.errors import DoublyLinkedError, InvalidItemError
from doublylinked.linkedlist import DoublyLinkedList, Node, Remover
from doublylinked.types import Destructor, Predicate, Visitor

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "Remover",
    "DoublyLinkedError",
    "InvalidItemError",
    "Destructor",
    "Predicate",
    "Visitor",
]
