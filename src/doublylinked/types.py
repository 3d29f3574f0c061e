"""Type definitions for doublylinked."""

from typing import Callable, TypeAlias, TypeVar

# Generic type variable for list items
T = TypeVar("T")

# Callback invoked with an item that was removed from the list
Destructor: TypeAlias = Callable[[T], None]

# Item test used by find() and as the remove() finder
Predicate: TypeAlias = Callable[[T], bool]

# Callback invoked once per item by for_each()
Visitor: TypeAlias = Callable[[T], None]
