from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Mapping, Union

Scalar = Union[str, int]


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ISO-8601 UTC with a trailing ``Z``.

    Microseconds are included only when non-zero, so whole-second instants
    look like ``2024-01-01T00:00:00Z``.
    """
    moment = moment.astimezone(timezone.utc)
    timespec = "microseconds" if moment.microsecond else "seconds"
    return moment.replace(tzinfo=None).isoformat(timespec=timespec) + "Z"


@dataclass(frozen=True)
class InfoRecord:
    """Immutable snapshot of host information taken at ``timestamp``."""

    platform: str
    timestamp: str
    additional_data: Mapping[str, Scalar] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # frozen: store a private read-only copy of the caller's mapping
        object.__setattr__(
            self, "additional_data", MappingProxyType(dict(self.additional_data))
        )

    @classmethod
    def build(cls, platform: str, additional_data: Mapping[str, Scalar], now: datetime) -> "InfoRecord":
        return cls(platform=platform, timestamp=format_timestamp(now), additional_data=additional_data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "platform": self.platform,
            "timestamp": self.timestamp,
            "additionalData": dict(self.additional_data),
        }
