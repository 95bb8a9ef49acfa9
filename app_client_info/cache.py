"""Single-slot cache over an InfoProvider."""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from .errors import SampleFailure
from .models import InfoRecord
from .system_info import InfoProvider

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InfoCache:
    """Holds zero or one InfoRecord, populated on the first ``get``.

    The record's timestamp is taken when it is built, so repeated ``get``
    calls return the same record until ``invalidate`` drops it. A failed
    sample leaves the slot empty; the next ``get`` samples again.
    """

    def __init__(self, provider: InfoProvider, clock: Optional[Callable[[], datetime]] = None):
        self.provider = provider
        self._clock = clock or utc_now
        self._record: Optional[InfoRecord] = None
        # one critical section for check, sample and store
        self._lock = threading.Lock()

    @property
    def is_populated(self) -> bool:
        return self._record is not None

    def get(self) -> InfoRecord:
        with self._lock:
            if self._record is not None:
                logger.debug("Cache hit for %s record from %s", self._record.platform, self._record.timestamp)
                return self._record

            try:
                sample = self.provider.sample()
                record = InfoRecord.build(self.provider.platform, sample, self._clock())
            except Exception as exc:
                logger.warning("Sampling %s host info failed: %s", self.provider.platform, exc)
                raise SampleFailure(str(exc) or type(exc).__name__) from exc

            self._record = record
            logger.info("Cached %s host info at %s", record.platform, record.timestamp)
            return record

    def invalidate(self) -> None:
        with self._lock:
            if self._record is None:
                return
            logger.info("Dropping %s host info cached at %s", self._record.platform, self._record.timestamp)
            self._record = None
