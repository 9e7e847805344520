from __future__ import annotations

import pytest

from addressbook.address_array import AddressArray
from addressbook.config import ListConfig
from addressbook.errors import ReleasedResourceError


def test_array_rejects_duplicate_telephones() -> None:
    array = AddressArray()

    assert array.add("0412 345 678")
    assert not array.add("0412 345 678")
    assert array.add("03 9925 2000")

    assert list(array) == ["0412 345 678", "03 9925 2000"]
    assert array.remove("0412 345 678")
    assert not array.remove("0412 345 678")
    assert len(array) == 1


def test_released_array_cannot_be_used() -> None:
    array = AddressArray()
    array.add("0412 345 678")

    array.release()

    assert array.released and len(array) == 0
    with pytest.raises(ReleasedResourceError):
        array.add("03 9925 2000")
    with pytest.raises(ReleasedResourceError):
        array.release()


def test_config_validates_limits() -> None:
    with pytest.raises(ValueError):
        ListConfig(name_max_length=0)
    with pytest.raises(ValueError):
        ListConfig(name_overflow="wrap")
