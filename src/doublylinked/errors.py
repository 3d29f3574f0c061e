"""Exception classes for doublylinked."""


class DoublyLinkedError(Exception):
    """Base exception for all doublylinked errors."""


class InvalidItemError(DoublyLinkedError, ValueError):
    """Raised when None is added, since None marks an absent head, tail or find result."""
