from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from api.deps import get_store
from api.schemas.common import StatusResponse
from tally import __version__
from tally.core.store import CounterStore

router = APIRouter()

WELCOME_MESSAGE = "Welcome to Counter a Service"


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    uptime_seconds: float
    counters: int


@router.get("/", response_model=StatusResponse)
def index() -> StatusResponse:
    return StatusResponse(message=WELCOME_MESSAGE)


@router.get("/health", response_model=HealthResponse)
def health(request: Request, store: CounterStore = Depends(get_store)) -> HealthResponse:
    started_at = float(getattr(request.app.state, "started_at", time.monotonic()))
    return HealthResponse(
        version=__version__,
        uptime_seconds=time.monotonic() - started_at,
        counters=len(store),
    )
