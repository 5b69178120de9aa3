from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from api.deps import get_counter_id, get_store
from api.schemas.common import ErrorResponse
from api.schemas.counters import CounterResponse
from tally.core.exceptions import CounterNotFoundError
from tally.core.store import CounterStore

router = APIRouter(prefix="/counter")

_id_errors = {400: {"model": ErrorResponse, "description": "Malformed counter id"}}


@router.get("", response_model=list[CounterResponse])
def list_counters(store: CounterStore = Depends(get_store)) -> list[CounterResponse]:
    return [CounterResponse.from_counter(c) for c in store.list()]


@router.post("", response_model=CounterResponse)
def create_counter(store: CounterStore = Depends(get_store)) -> CounterResponse:
    return CounterResponse.from_counter(store.create())


@router.get(
    "/{counter_id}",
    response_model=CounterResponse,
    responses={**_id_errors, 404: {"model": ErrorResponse, "description": "Counter not found"}},
)
def get_counter(
    counter_uuid: UUID = Depends(get_counter_id),
    store: CounterStore = Depends(get_store),
) -> CounterResponse:
    counter = store.get(counter_uuid)
    if counter is None:
        raise CounterNotFoundError(str(counter_uuid))
    return CounterResponse.from_counter(counter)


@router.put("/{counter_id}/increment", response_model=CounterResponse, responses=_id_errors)
def increment_counter(
    counter_uuid: UUID = Depends(get_counter_id),
    store: CounterStore = Depends(get_store),
) -> CounterResponse:
    return CounterResponse.from_counter(store.increment(counter_uuid))


@router.put("/{counter_id}/decrement", response_model=CounterResponse, responses=_id_errors)
def decrement_counter(
    counter_uuid: UUID = Depends(get_counter_id),
    store: CounterStore = Depends(get_store),
) -> CounterResponse:
    return CounterResponse.from_counter(store.decrement(counter_uuid))
