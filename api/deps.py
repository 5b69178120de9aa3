from __future__ import annotations

from uuid import UUID

from fastapi import Path, Request

from tally.core.ids import parse_counter_id
from tally.core.store import CounterStore


def get_store(request: Request) -> CounterStore:
    return request.app.state.store


def get_counter_id(counter_id: str = Path(..., description="Counter id (UUID)")) -> UUID:
    # Raises InvalidCounterIdError, rendered as a 400 by api.errors.
    return parse_counter_id(counter_id)
