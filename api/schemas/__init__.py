from api.schemas.common import ErrorResponse, StatusResponse
from api.schemas.counters import CounterResponse

__all__ = [
    "CounterResponse",
    "ErrorResponse",
    "StatusResponse",
]
