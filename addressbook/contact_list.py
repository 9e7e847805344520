"""Doubly linked list of contacts with a movable cursor."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from .address_array import AddressArray, ArrayFactory
from .config import OVERFLOW_TRUNCATE, ListConfig
from .errors import NameTooLongError, NodeStateError

logger = logging.getLogger(__name__)


def bound_name(name: str, config: ListConfig) -> str:
    """Apply the configured overflow policy to a contact name."""
    if len(name) <= config.name_max_length:
        return name
    if config.name_overflow == OVERFLOW_TRUNCATE:
        return name[: config.name_max_length]
    raise NameTooLongError(name, config.name_max_length)


@dataclass(eq=False)
class ContactNode:
    """One contact plus its address array and list links."""

    id: int
    name: str
    array: AddressArray
    previous: Optional["ContactNode"] = field(default=None, repr=False)
    next: Optional["ContactNode"] = field(default=None, repr=False)
    _owner: Optional["ContactList"] = field(default=None, init=False, repr=False)
    _destroyed: bool = field(default=False, init=False, repr=False)

    @classmethod
    def create(
        cls,
        contact_id: int,
        name: str,
        *,
        config: Optional[ListConfig] = None,
        array_factory: ArrayFactory = AddressArray,
    ) -> "ContactNode":
        """Build an unlinked node with a fresh, empty address array.

        The name is checked before the array is requested, so a rejected name
        never leaves an array behind. Errors raised by ``array_factory``
        propagate unchanged.
        """
        bounded = bound_name(name, config or ListConfig())
        return cls(id=contact_id, name=bounded, array=array_factory())

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def linked(self) -> bool:
        return self._owner is not None

    def destroy(self) -> None:
        """Release the address array of an unlinked node. Safe to call twice.

        Nodes still held by a list are released through that list.
        """
        if self._owner is not None:
            raise NodeStateError(
                f"Contact node {self.id} belongs to a list; delete it through the list."
            )
        self._release()

    def _release(self) -> None:
        if self._destroyed:
            return
        self.previous = self.next = None
        self._owner = None
        self.array.release()
        self._destroyed = True
        logger.debug("Destroyed contact node %d", self.id)


class ContactList:
    """Doubly linked contact list with an addressable current node."""

    def __init__(
        self,
        config: Optional[ListConfig] = None,
        array_factory: ArrayFactory = AddressArray,
    ) -> None:
        self._config = config or ListConfig()
        self._array_factory = array_factory
        self._head: Optional[ContactNode] = None
        self._tail: Optional[ContactNode] = None
        self._current: Optional[ContactNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[ContactNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __contains__(self, item: object) -> bool:
        """Test membership of a node by identity, or of an id by value."""
        if isinstance(item, ContactNode):
            return item._owner is self
        return any(node.id == item for node in self)

    def __enter__(self) -> "ContactList":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.destroy()

    @property
    def config(self) -> ListConfig:
        return self._config

    @property
    def head(self) -> Optional[ContactNode]:
        return self._head

    @property
    def tail(self) -> Optional[ContactNode]:
        return self._tail

    @property
    def current(self) -> Optional[ContactNode]:
        return self._current

    def is_empty(self) -> bool:
        return self._size == 0

    def ids(self) -> list[int]:
        return [node.id for node in self]

    def create_node(self, contact_id: int, name: str) -> ContactNode:
        """Build a node using this list's name policy and array factory."""
        return ContactNode.create(
            contact_id, name, config=self._config, array_factory=self._array_factory
        )

    def destroy(self) -> None:
        """Destroy every node from head to tail and leave the list empty.

        The list is emptied before any array is released. If a release fails,
        the remaining nodes are still released and the first error is raised.
        """
        nodes = list(self)
        self._head = self._tail = self._current = None
        self._size = 0
        failure: Optional[Exception] = None
        for node in nodes:
            try:
                node._release()
            except Exception as exc:
                logger.error("Failed to release contact node %d: %s", node.id, exc)
                if failure is None:
                    failure = exc
        logger.debug("Destroyed contact list with %d nodes", len(nodes))
        if failure is not None:
            raise failure

    def insert(self, node: ContactNode) -> bool:
        """Append node at the tail; return False if its id is already present.

        The node's name is held to this list's bound: it is truncated or
        rejected with ``NameTooLongError`` as the list config says. A rejected
        node stays unlinked and remains the caller's to destroy.
        """
        if node.destroyed:
            raise NodeStateError(f"Contact node {node.id} has been destroyed.")
        if node.linked:
            raise NodeStateError(f"Contact node {node.id} already belongs to a list.")
        bounded = bound_name(node.name, self._config)
        if self._head is not None and self.find_by_id(node.id) is not None:
            logger.warning("Rejected contact %d: id already present", node.id)
            return False
        node.name = bounded
        if self._head is None:
            node.previous = node.next = None
            self._head = self._tail = self._current = node
        else:
            assert self._tail is not None
            self._tail.next = node
            node.previous = self._tail
            node.next = None
            self._tail = node
        node._owner = self
        self._size += 1
        logger.debug("Inserted contact %d (size=%d)", node.id, self._size)
        return True

    def delete_current(self) -> bool:
        """Unlink and destroy the current node; False when there is none."""
        node = self._current
        if node is None:
            return False
        if node is self._head and node is self._tail:
            self._head = self._tail = self._current = None
        elif node is self._head:
            assert node.next is not None
            self._current = self._head = node.next
            self._head.previous = None
        elif node is self._tail:
            assert node.previous is not None
            self._current = self._tail = node.previous
            self._tail.next = None
        else:
            assert node.previous is not None and node.next is not None
            node.previous.next = node.next
            node.next.previous = node.previous
            self._current = node.previous
        self._size -= 1
        logger.debug("Deleted contact %d (size=%d)", node.id, self._size)
        node._release()
        return True

    def forward(self, steps: int = 1) -> bool:
        """Move the cursor towards the tail by exactly ``steps`` nodes."""
        return self._walk(steps, backwards=False)

    def backward(self, steps: int = 1) -> bool:
        """Move the cursor towards the head by exactly ``steps`` nodes."""
        return self._walk(steps, backwards=True)

    def _walk(self, steps: int, *, backwards: bool) -> bool:
        if steps < 0:
            raise ValueError("steps must not be negative.")
        node = self._current
        if node is None:
            return False
        for _ in range(steps):
            node = node.previous if backwards else node.next
            if node is None:
                return False
        self._current = node
        return True

    def set_current(self, node: ContactNode) -> None:
        """Point the cursor at a node of this list."""
        if node._owner is not self:
            raise ValueError("The provided node is not part of this list.")
        self._current = node

    def rewind(self) -> None:
        """Move the cursor back to the head."""
        self._current = self._head

    def find_by_id(self, contact_id: int) -> Optional[ContactNode]:
        """Return the node with ``contact_id`` without altering current."""
        for node in self:
            if node.id == contact_id:
                return node
        return None

    def find_by_name(self, name: str) -> Optional[ContactNode]:
        """Return the first node whose name equals ``name``; current is untouched."""
        for node in self:
            if node.name == name:
                return node
        return None
