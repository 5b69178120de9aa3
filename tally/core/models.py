"""tally.core.models

The counter record. Immutable: the store swaps records, it never edits them.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

# Counter values live in the unsigned 32-bit range.
MAX_COUNTER_VALUE = 2**32 - 1


@dataclass(frozen=True, slots=True)
class Counter:
    id: UUID
    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_COUNTER_VALUE:
            raise ValueError(f"counter value out of range: {self.value}")
