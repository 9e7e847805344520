from __future__ import annotations

import pytest

from addressbook import operations
from addressbook.address_array import AddressArray
from addressbook.errors import AllocationError, NodeStateError


def _failing_factory() -> AddressArray:
    raise AllocationError("no room for address array")


def test_round_trip_scenario() -> None:
    contacts = operations.create_list()
    names = {1: "Ada", 2: "Grace", 3: "Linus"}
    for contact_id, name in names.items():
        node = operations.create_node(contact_id, name)
        assert node is not None
        assert operations.insert_node(contacts, node)

    found = operations.find_by_id(contacts, 2)
    assert found is not None and found.name == "Grace"

    first = operations.find_by_id(contacts, 1)
    assert first is not None
    contacts.set_current(first)
    assert operations.forward(contacts, 2)
    assert contacts.current is not None and contacts.current.id == 3

    assert operations.delete_current_node(contacts)
    assert contacts.ids() == [1, 2]
    assert contacts.tail is found

    operations.destroy_list(contacts)
    assert contacts.is_empty()


def test_absent_list_fails_quietly() -> None:
    node = operations.create_node(1, "Ada")
    assert node is not None

    assert not operations.insert_node(None, node)
    assert not operations.delete_current_node(None)
    assert not operations.forward(None, 0)
    assert not operations.backward(None, 1)
    assert operations.find_by_id(None, 1) is None
    assert operations.find_by_name(None, "Ada") is None
    operations.destroy_list(None)
    operations.destroy_node(node)
    assert node.destroyed


def test_create_node_reports_allocation_failure() -> None:
    assert operations.create_node(1, "Ada", array_factory=_failing_factory) is None


def test_find_by_name_returns_first_match() -> None:
    contacts = operations.create_list()
    for contact_id in (1, 2):
        node = operations.create_node(contact_id, "Twin")
        assert node is not None
        assert operations.insert_node(contacts, node)

    match = operations.find_by_name(contacts, "Twin")

    assert match is contacts.head


def test_create_node_reports_plain_memory_error() -> None:
    def exhausted() -> AddressArray:
        raise MemoryError

    assert operations.create_node(1, "Ada", array_factory=exhausted) is None


def test_destroy_node_refuses_linked_node() -> None:
    contacts = operations.create_list()
    node = operations.create_node(1, "Ada")
    assert node is not None
    assert operations.insert_node(contacts, node)

    with pytest.raises(NodeStateError):
        operations.destroy_node(node)

    assert operations.find_by_id(contacts, 1) is node
    assert len(contacts) == 1
