"""Procedural address book API.

Every function accepts ``None`` in place of a list and reports failure through
its return value, so callers holding an optional list never need a guard.
"""

from __future__ import annotations

import logging
from typing import Optional

from .address_array import AddressArray, ArrayFactory
from .config import ListConfig
from .contact_list import ContactList, ContactNode

logger = logging.getLogger(__name__)


def create_list(
    config: Optional[ListConfig] = None,
    array_factory: ArrayFactory = AddressArray,
) -> ContactList:
    return ContactList(config=config, array_factory=array_factory)


def destroy_list(contacts: Optional[ContactList]) -> None:
    if contacts is not None:
        contacts.destroy()


def create_node(
    contact_id: int,
    name: str,
    config: Optional[ListConfig] = None,
    array_factory: ArrayFactory = AddressArray,
) -> Optional[ContactNode]:
    """Build a contact node, or return None when its array cannot be allocated."""
    try:
        return ContactNode.create(
            contact_id, name, config=config, array_factory=array_factory
        )
    except MemoryError:
        logger.warning("Could not allocate address array for contact %d", contact_id)
        return None


def destroy_node(node: Optional[ContactNode]) -> None:
    if node is not None:
        node.destroy()


def insert_node(contacts: Optional[ContactList], node: ContactNode) -> bool:
    if contacts is None:
        return False
    return contacts.insert(node)


def delete_current_node(contacts: Optional[ContactList]) -> bool:
    if contacts is None:
        return False
    return contacts.delete_current()


def forward(contacts: Optional[ContactList], steps: int) -> bool:
    if contacts is None:
        return False
    return contacts.forward(steps)


def backward(contacts: Optional[ContactList], steps: int) -> bool:
    if contacts is None:
        return False
    return contacts.backward(steps)


def find_by_id(contacts: Optional[ContactList], contact_id: int) -> Optional[ContactNode]:
    if contacts is None:
        return None
    return contacts.find_by_id(contact_id)


def find_by_name(contacts: Optional[ContactList], name: str) -> Optional[ContactNode]:
    if contacts is None:
        return None
    return contacts.find_by_name(name)
