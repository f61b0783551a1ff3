"""Facts about the host: operating system, processor and memory."""

from __future__ import annotations

import functools
import os
import platform
from pathlib import Path

import psutil

SYSINFO_VERSION = "1.0.0"

UNKNOWN_ARCHITECTURE = "dunno lol"

# The processor brand string is at most 48 characters long.
_BRAND_LENGTH = 48

_ARCHITECTURES = {
    "amd64": "x64",
    "x86_64": "x64",
    "x64": "x64",
    "arm": "ARM",
    "armv6l": "ARM",
    "armv7l": "ARM",
    "armv7": "ARM",
    "arm64": "ARM64",
    "aarch64": "ARM64",
    "armv8l": "ARM64",
    "ia64": "Itanium",
    "x86": "x86",
    "i386": "x86",
    "i486": "x86",
    "i586": "x86",
    "i686": "x86",
}


def architecture_name(machine: str) -> str:
    """Map a machine type such as 'AMD64' or 'aarch64' to a short name."""
    return _ARCHITECTURES.get(machine.strip().lower(), UNKNOWN_ARCHITECTURE)


def _clean_os_name(raw: str) -> str:
    """Keep only the part of an OS description before the first '|'."""
    return raw.split("|", 1)[0].strip()


@functools.lru_cache(maxsize=None)
def os_info() -> str:
    """Name of the operating system, e.g. 'Windows 10' or 'Linux 6.1.0'."""
    parts = [platform.system(), platform.release()]
    raw = " ".join(part for part in parts if part)
    return _clean_os_name(raw)


@functools.lru_cache(maxsize=None)
def processor_count() -> int:
    """Number of logical processors."""
    count = psutil.cpu_count(logical=True) or os.cpu_count()
    return count or 1


def _brand_from_cpuinfo() -> str:
    cpuinfo = Path("/proc/cpuinfo")
    try:
        text = cpuinfo.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return ""
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if sep and key.strip() in ("model name", "Model", "Hardware"):
            return value.strip()
    return ""


@functools.lru_cache(maxsize=None)
def processor_info() -> str:
    """Processor brand string: manufacturer, model and clock speed."""
    brand = _brand_from_cpuinfo() or platform.processor() or ""
    return brand.strip()[:_BRAND_LENGTH]


def processor_architecture() -> str:
    """Short name of the processor architecture."""
    return architecture_name(platform.machine())


def memory_total() -> int:
    """Total physical memory in bytes."""
    return int(psutil.virtual_memory().total)


def memory_available() -> int:
    """Physical memory currently available, in bytes."""
    return int(psutil.virtual_memory().available)


def memory_load() -> int:
    """Percentage of physical memory in use, as a whole number."""
    return int(psutil.virtual_memory().percent)