"""Cached host information served over the ``app_client_info`` channel."""
from .cache import InfoCache
from .dispatcher import (
    CHANNEL_NAME,
    ErrorResponse,
    NotImplementedResponse,
    RequestDispatcher,
    SuccessResponse,
)
from .errors import ClientInfoError, SampleError, SampleFailure
from .models import InfoRecord
from .service import ClientInfoService


__all__ = [
    "CHANNEL_NAME",
    "ClientInfoError",
    "ClientInfoService",
    "ErrorResponse",
    "InfoCache",
    "InfoRecord",
    "NotImplementedResponse",
    "RequestDispatcher",
    "SampleError",
    "SampleFailure",
    "SuccessResponse",
]
