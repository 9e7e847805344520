"""Exceptions raised by the address book list."""

from __future__ import annotations


class AddressBookError(Exception):
    """Base class for address book errors."""


class AllocationError(AddressBookError, MemoryError):
    """A contact resource could not be obtained."""


class NameTooLongError(AddressBookError, ValueError):
    """A contact name exceeds the configured bound."""

    def __init__(self, name: str, limit: int) -> None:
        super().__init__(f"Contact name is {len(name)} chars; at most {limit} allowed.")
        self.name = name
        self.limit = limit


class NodeStateError(AddressBookError, ValueError):
    """A node is in the wrong state for the requested operation."""


class ReleasedResourceError(AddressBookError, ValueError):
    """An address array was used after being released."""
