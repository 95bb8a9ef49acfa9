"""Runtime configuration helpers."""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

TRANSPORTS = ("stdio", "sse", "streamable-http")


@dataclass(frozen=True)
class Settings:
    transport: str = "stdio"
    log_level: str = "warning"
    platform: Optional[str] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    transport = os.getenv("APP_CLIENT_INFO_TRANSPORT", "stdio").lower()
    if transport not in TRANSPORTS:
        raise ValueError(f"APP_CLIENT_INFO_TRANSPORT must be one of {TRANSPORTS}, got {transport!r}")
    log_level = os.getenv("APP_CLIENT_INFO_LOG_LEVEL", "warning").lower()
    platform = os.getenv("APP_CLIENT_INFO_PLATFORM") or None
    return Settings(transport=transport, log_level=log_level, platform=platform)


def configure_logging(level: str) -> None:
    # stdout belongs to the stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
