"""Tests for list nodes and their weak back-references."""

import gc

from doublylinked import DoublyLinkedList, Node


def test_node_creation() -> None:
    """Test creating a node."""
    node = Node("value")
    assert node.item == "value"
    assert node.next is None
    assert node.previous is None
    assert node.owner is None
    assert repr(node) == "Node('value')"


def test_previous_is_weak() -> None:
    """Test that a previous link alone does not keep a node alive."""
    first = Node(1)
    second = Node(2)
    second.previous = first
    assert second.previous is first

    del first
    gc.collect()
    assert second.previous is None


def test_next_is_strong() -> None:
    """Test that the forward link keeps the following node alive."""
    first = Node(1)
    first.next = Node(2)
    gc.collect()
    assert first.next is not None
    assert first.next.item == 2


def test_previous_can_be_cleared() -> None:
    """Test resetting a previous link."""
    first = Node(1)
    second = Node(2)
    second.previous = first
    second.previous = None
    assert second.previous is None


def test_list_nodes_survive_via_forward_chain() -> None:
    """Test that back-references stay valid while nodes are in a list."""
    lst = DoublyLinkedList[int]()
    for i in range(5):
        lst.add(i)
    gc.collect()

    node = lst._tail
    items = []
    while node is not None:
        items.append(node.item)
        node = node.previous
    assert items == [4, 3, 2, 1, 0]


def test_unlinked_node_is_detached() -> None:
    """Test that a removed node has its links and owner cleared."""
    lst = DoublyLinkedList[int]()
    lst.add(1)
    lst.add(2)
    lst.add(3)
    middle = lst._head.next if lst._head is not None else None
    assert middle is not None

    lst.remove(2)
    assert middle.next is None
    assert middle.previous is None
    assert middle.owner is None
