"""Basic usage example for doublylinked."""

from doublylinked import DoublyLinkedList


def main() -> None:
    """Demonstrate basic list operations."""
    lst = DoublyLinkedList[str]()

    print("=== Adding items ===\n")
    lst.add("alpha")
    remove_beta = lst.add("beta")
    lst.add("gamma")
    print(f"Items: {lst.array()}")
    print(f"Head: {lst.head()}, tail: {lst.tail()}\n")

    print("=== Removing through a handle ===\n")
    remove_beta()
    remove_beta()  # second call does nothing
    print(f"Items: {lst.array()}\n")

    print("=== Removing by value with a destructor ===\n")
    lst.remove("gamma", lambda item: print(f"  destroyed {item}"))
    print(f"Items: {lst.array()}\n")

    print("=== Searching ===\n")
    lst.add("delta")
    print(f"First item starting with 'd': {lst.find(lambda s: s.startswith('d'))}")
    print(f"First item longer than 10: {lst.find(lambda s: len(s) > 10)}\n")

    print("=== Iterating ===\n")
    for item in lst:
        print(f"  {item}")

    lst.clear()
    print(f"\nAfter clear: {lst.array()}, head={lst.head()}")


if __name__ == "__main__":
    main()
