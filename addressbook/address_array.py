"""Per-contact telephone collection owned by each contact node."""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from .errors import ReleasedResourceError

logger = logging.getLogger(__name__)


class AddressArray:
    """Growable collection of telephone numbers for a single contact.

    The contact list only creates and releases arrays; it never looks inside.
    """

    def __init__(self) -> None:
        self._telephones: list[str] = []
        self._released = False

    def __len__(self) -> int:
        return len(self._telephones)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._telephones))

    def __contains__(self, telephone: object) -> bool:
        return telephone in self._telephones

    @property
    def released(self) -> bool:
        return self._released

    def add(self, telephone: str) -> bool:
        """Append a telephone; duplicates are rejected with False."""
        self._check_live()
        if telephone in self._telephones:
            return False
        self._telephones.append(telephone)
        return True

    def remove(self, telephone: str) -> bool:
        self._check_live()
        try:
            self._telephones.remove(telephone)
        except ValueError:
            return False
        return True

    def release(self) -> None:
        """Drop all entries. Further use of the array raises."""
        self._check_live()
        self._telephones.clear()
        self._released = True
        logger.debug("Released address array %#x", id(self))

    def _check_live(self) -> None:
        if self._released:
            raise ReleasedResourceError("The address array has been released.")


ArrayFactory = Callable[[], AddressArray]
