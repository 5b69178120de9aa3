from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    reason: str


class StatusResponse(BaseModel):
    status: Literal["ok"] = "ok"
    message: str
