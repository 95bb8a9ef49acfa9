"""Shared fakes for the app_client_info tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from app_client_info.errors import SampleError
from app_client_info.system_info import InfoProvider


class FakeProvider(InfoProvider):
    """Returns queued samples; an exception in the queue is raised instead."""

    platform = "linux"
    fields = ("sysname", "release")

    def __init__(self, *results) -> None:
        self.results = list(results)
        self.calls = 0

    def _read(self):
        self.calls += 1
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return dict(result)


class StepClock:
    """Each call returns a time one second after the previous one."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)) -> None:
        self.now = start - timedelta(seconds=1)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


LINUX_6_1 = {"sysname": "Linux", "release": "6.1.0"}
LINUX_6_2 = {"sysname": "Linux", "release": "6.2.0"}
OS_ERROR = SampleError("uname failed")


@pytest.fixture
def clock() -> StepClock:
    return StepClock()
