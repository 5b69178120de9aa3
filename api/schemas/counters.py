from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field

from tally.core.models import MAX_COUNTER_VALUE, Counter


class CounterResponse(BaseModel):
    id: UUID
    value: int = Field(ge=0, le=MAX_COUNTER_VALUE)

    @classmethod
    def from_counter(cls, counter: Counter) -> CounterResponse:
        return cls(id=counter.id, value=counter.value)
