"""tally.core.store

In-memory counter store.

One dict, one lock. Every operation holds the lock for its full duration, so
operations are atomic with respect to each other and to nothing else: a list
followed by a get is two snapshots, not one.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from uuid import UUID

from tally.core.ids import new_counter_id
from tally.core.models import MAX_COUNTER_VALUE, Counter

logger = logging.getLogger(__name__)


class CounterStore:
    """Thread-safe mapping of counter id to ``Counter``."""

    def __init__(self) -> None:
        self._counters: dict[UUID, Counter] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._counters)

    def create(self) -> Counter:
        counter = Counter(id=new_counter_id(), value=0)
        with self._lock:
            self._counters[counter.id] = counter
        logger.debug("created counter %s", counter.id)
        return counter

    def get(self, counter_id: UUID) -> Counter | None:
        with self._lock:
            return self._counters.get(counter_id)

    def list(self) -> list[Counter]:
        with self._lock:
            return list(self._counters.values())

    def increment(self, counter_id: UUID) -> Counter:
        """Add one, saturating at ``MAX_COUNTER_VALUE``.

        A missing counter is created under ``counter_id`` with value 1.
        """
        with self._lock:
            current = self._counters.get(counter_id)
            if current is None:
                updated = Counter(id=counter_id, value=1)
                logger.debug("increment upserted counter %s", counter_id)
            elif current.value < MAX_COUNTER_VALUE:
                updated = replace(current, value=current.value + 1)
            else:
                updated = current
            self._counters[counter_id] = updated
            return updated

    def decrement(self, counter_id: UUID) -> Counter:
        """Subtract one, flooring at zero.

        A missing counter is created under ``counter_id`` with value 0.
        """
        with self._lock:
            current = self._counters.get(counter_id)
            if current is None:
                updated = Counter(id=counter_id, value=0)
                logger.debug("decrement upserted counter %s", counter_id)
            elif current.value > 0:
                updated = replace(current, value=current.value - 1)
            else:
                updated = current
            self._counters[counter_id] = updated
            return updated
