from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from .cache import InfoCache
from .dispatcher import RequestDispatcher
from .system_info import InfoProvider, select_provider

logger = logging.getLogger(__name__)


class ClientInfoService:
    """Owns the cache and dispatcher for one running ``app_client_info`` channel.

    Build one at startup and ``close`` it at shutdown; closing drops the
    cached record. Usable as a context manager.
    """

    def __init__(self, provider: Optional[InfoProvider] = None, clock: Optional[Callable[[], datetime]] = None):
        self.provider = provider or select_provider()
        self.cache = InfoCache(self.provider, clock=clock)
        self.dispatcher = RequestDispatcher(self.cache)
        self.closed = False
        logger.debug("Service started with %s provider", self.provider.platform)

    def handle(self, method: Any, arguments: Optional[Dict[str, Any]] = None):
        if self.closed:
            raise RuntimeError("ClientInfoService is closed")
        return self.dispatcher.handle(method, arguments)

    def close(self) -> None:
        if self.closed:
            return
        self.cache.invalidate()
        self.closed = True
        logger.debug("Service stopped")

    def __enter__(self) -> "ClientInfoService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
