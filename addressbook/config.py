"""Tunable limits for contact lists."""

from __future__ import annotations

from dataclasses import dataclass

OVERFLOW_REJECT = "reject"
OVERFLOW_TRUNCATE = "truncate"

DEFAULT_NAME_MAX_LENGTH = 50


@dataclass(frozen=True)
class ListConfig:
    """Name bound and what to do with names that exceed it."""

    name_max_length: int = DEFAULT_NAME_MAX_LENGTH
    name_overflow: str = OVERFLOW_REJECT

    def __post_init__(self) -> None:
        if self.name_max_length <= 0:
            raise ValueError("name_max_length must be positive.")
        if self.name_overflow not in {OVERFLOW_REJECT, OVERFLOW_TRUNCATE}:
            raise ValueError("name_overflow must be 'reject' or 'truncate'.")
