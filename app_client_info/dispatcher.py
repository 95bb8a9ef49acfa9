"""Maps ``app_client_info`` method names onto InfoCache operations."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .cache import InfoCache
from .errors import SampleFailure

logger = logging.getLogger(__name__)

CHANNEL_NAME = "app_client_info"

GET_DATA = "getData"
REFRESH = "refresh"

ERROR_CODE = "ERROR"
GET_DATA_FAILED = "Failed to get data"


@dataclass(frozen=True)
class SuccessResponse:
    result: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "success", "result": self.result}


@dataclass(frozen=True)
class ErrorResponse:
    code: str
    message: str
    details: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "error", "code": self.code, "message": self.message, "details": self.details}


@dataclass(frozen=True)
class NotImplementedResponse:
    """The method is unknown to this service. Not a failure."""

    method: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"status": "notImplemented", "method": self.method}


class RequestDispatcher:
    """Answers each request with exactly one response; keeps no per-request state."""

    def __init__(self, cache: InfoCache):
        self.cache = cache

    def handle(self, method: Any, arguments: Optional[Dict[str, Any]] = None):
        # neither method takes arguments; anything passed is ignored
        if method == GET_DATA:
            return self._get_data()
        if method == REFRESH:
            self.cache.invalidate()
            return SuccessResponse()
        logger.info("Method %r is not implemented", method)
        return NotImplementedResponse(method=method if isinstance(method, str) else repr(method))

    def _get_data(self):
        try:
            record = self.cache.get()
        except SampleFailure as exc:
            return ErrorResponse(code=ERROR_CODE, message=GET_DATA_FAILED, details=str(exc))
        return SuccessResponse(result=record.to_dict())
