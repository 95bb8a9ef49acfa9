#!/usr/bin/env python3
"""
Host information providers, one per platform family.
Run directly for a one-shot report: python -m app_client_info.system_info [--json]
"""
import logging
import os
import platform
import subprocess
import sys
from typing import Dict, Optional, Tuple, Union

import psutil

from .errors import SampleError

logger = logging.getLogger(__name__)

Sample = Dict[str, Union[str, int]]


def bytes_to_human(n: int) -> str:
    symbols = ("B", "KB", "MB", "GB", "TB", "PB")
    prefix = {}
    for i, s in enumerate(symbols[1:], 1):
        prefix[s] = 1 << (i * 10)
    for s in reversed(symbols[1:]):
        if n >= prefix[s]:
            value = float(n) / prefix[s]
            return f"{value:.2f} {s}"
    return f"{n} B"


def safe_sysctl_get(key: str) -> Optional[str]:
    try:
        out = subprocess.check_output(["sysctl", "-n", key], stderr=subprocess.DEVNULL).decode().strip()
        return out
    except (OSError, subprocess.CalledProcessError):
        return None


class InfoProvider:
    """Samples the host once per call.

    Subclasses set ``platform`` and ``fields`` and implement ``_read``. The
    public ``sample`` checks that the result has exactly ``fields``, in order,
    with str or int values only.
    """

    platform: str = ""
    fields: Tuple[str, ...] = ()

    def sample(self) -> Sample:
        try:
            raw = self._read()
        except SampleError:
            raise
        except (OSError, AttributeError, ValueError, psutil.Error) as exc:
            raise SampleError(f"{self.platform}: {exc}") from exc
        return self._checked(raw)

    def _read(self) -> Sample:
        raise NotImplementedError

    def _checked(self, raw: Sample) -> Sample:
        if tuple(raw) != self.fields:
            raise SampleError(
                f"{self.platform}: expected fields {list(self.fields)}, got {list(raw)}"
            )
        for key, value in raw.items():
            # bool is an int subclass but not a valid wire scalar here
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise SampleError(f"{self.platform}: field {key!r} is not a str or int: {value!r}")
        return dict(raw)


class LinuxInfoProvider(InfoProvider):
    platform = "linux"
    fields = ("sysname", "nodename", "release", "version", "machine")

    def _read(self) -> Sample:
        uname = os.uname()
        return {
            "sysname": uname.sysname,
            "nodename": uname.nodename,
            "release": uname.release,
            "version": uname.version,
            "machine": uname.machine,
        }


class WindowsInfoProvider(InfoProvider):
    platform = "windows"
    fields = ("majorVersion", "minorVersion", "buildNumber", "numberOfProcessors", "totalPhysicalMemory")

    def _read(self) -> Sample:
        getwindowsversion = getattr(sys, "getwindowsversion", None)
        if getwindowsversion is None:
            raise SampleError("windows: sys.getwindowsversion is unavailable on this host")
        ver = getwindowsversion()
        return {
            "majorVersion": int(ver.major),
            "minorVersion": int(ver.minor),
            "buildNumber": int(ver.build),
            "numberOfProcessors": int(psutil.cpu_count(logical=True) or 0),
            "totalPhysicalMemory": int(psutil.virtual_memory().total),
        }


class MacInfoProvider(InfoProvider):
    platform = "macos"
    fields = ("productVersion", "machine", "model", "numberOfProcessors", "totalPhysicalMemory")

    def _read(self) -> Sample:
        release, _, machine = platform.mac_ver()
        if not release:
            raise SampleError("macos: platform.mac_ver returned no release")
        return {
            "productVersion": release,
            "machine": machine or platform.machine(),
            "model": safe_sysctl_get("hw.model") or "",
            "numberOfProcessors": int(psutil.cpu_count(logical=True) or 0),
            "totalPhysicalMemory": int(psutil.virtual_memory().total),
        }


PROVIDERS = {
    LinuxInfoProvider.platform: LinuxInfoProvider,
    WindowsInfoProvider.platform: WindowsInfoProvider,
    MacInfoProvider.platform: MacInfoProvider,
}


def detect_platform() -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "macos"
    return "linux"


def select_provider(tag: Optional[str] = None) -> InfoProvider:
    """Return the provider for ``tag``, or for the running host when omitted."""
    tag = (tag or detect_platform()).lower()
    try:
        provider_cls = PROVIDERS[tag]
    except KeyError:
        raise ValueError(f"Unknown platform {tag!r}; expected one of {sorted(PROVIDERS)}") from None
    logger.debug("Using %s for platform %s", provider_cls.__name__, tag)
    return provider_cls()


def print_section(title: str):
    print("\n" + title)
    print("-" * len(title))


def print_kv(key: str, value):
    print(f"{key:>24}: {value}")


def main():
    import json

    from .config import configure_logging, get_settings
    from .errors import SampleFailure
    from .service import ClientInfoService

    settings = get_settings()
    configure_logging(settings.log_level)

    with ClientInfoService(select_provider(settings.platform)) as service:
        try:
            record = service.cache.get()
        except SampleFailure as exc:
            print(f"Failed to get data: {exc}", file=sys.stderr)
            return 1

    data = record.to_dict()

    if "--json" in sys.argv:
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return 0

    print_section("Platform")
    print_kv("platform", data["platform"])
    print_kv("timestamp", data["timestamp"])

    print_section("Additional data")
    for k, v in data["additionalData"].items():
        if k == "totalPhysicalMemory":
            v = bytes_to_human(v)
        print_kv(k, v)
    return 0


if __name__ == "__main__":
    sys.exit(main())
