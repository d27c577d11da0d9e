"""Host property data source backed by platform and psutil."""

import platform
import sys
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

import psutil

from hostfetch.exceptions import PropertySourceError
from hostfetch.utils.logging import get_logger

logger = get_logger(__name__)

MIB = 1024 * 1024

DISPLAY_NAMES = {
    "os": "OS",
    "kernel": "Kernel",
    "cpu": "CPU",
    "memory": "Memory",
}

Reader = Callable[[], str | None]


def display_name(key: str) -> str:
    """Printed name for a property key; unmapped keys print as given."""
    return DISPLAY_NAMES.get(key, key)


def read_os() -> str | None:
    if sys.platform.startswith("linux"):
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            release = {}
        pretty = release.get("PRETTY_NAME") or release.get("NAME")
        if pretty:
            return pretty

    if sys.platform == "darwin":
        mac_version = platform.mac_ver()[0]
        if mac_version:
            return f"macOS {mac_version}"

    name = f"{platform.system()} {platform.release()}".strip()
    return name or None


def read_kernel() -> str | None:
    return platform.release() or None


def _cpu_brand() -> str | None:
    cpuinfo = Path("/proc/cpuinfo")
    if cpuinfo.exists():
        for line in cpuinfo.read_text(errors="replace").splitlines():
            key, _, value = line.partition(":")
            if key.strip() == "model name" and value.strip():
                return value.strip()
    return platform.processor() or None


def read_cpu() -> str | None:
    brand = _cpu_brand()
    if brand is None:
        return None

    parts = [brand]
    count = psutil.cpu_count(logical=True)
    if count:
        parts.append(f"({count})")

    freq = psutil.cpu_freq()
    if freq is not None and freq.max:
        parts.append(f"@ {freq.max / 1000:.2f} GHz")

    return " ".join(parts)


def read_memory() -> str | None:
    memory = psutil.virtual_memory()
    used = memory.total - memory.available
    return f"{used // MIB} MiB / {memory.total // MIB} MiB"


DEFAULT_READERS: dict[str, Reader] = {
    "os": read_os,
    "kernel": read_kernel,
    "cpu": read_cpu,
    "memory": read_memory,
}


class HostPropertySource:
    """Reads named host properties on demand.

    Args:
        readers: Property key to reader callable. Defaults to the
            platform/psutil readers for ``os``, ``kernel``, ``cpu`` and
            ``memory``.
    """

    def __init__(self, readers: Mapping[str, Reader] | None = None):
        self._readers = dict(DEFAULT_READERS if readers is None else readers)

    def keys(self) -> list[str]:
        return list(self._readers)

    def read(self, key: str) -> str | None:
        """Read one property.

        Returns None when the host does not expose the value.

        Raises:
            PropertySourceError: If no reader exists for ``key``
        """
        reader = self._readers.get(key)
        if reader is None:
            raise PropertySourceError(key)

        try:
            value = reader()
        except (OSError, psutil.Error) as e:
            logger.warning("property_unavailable", property=key, error=str(e))
            return None

        if value is None:
            logger.warning("property_unavailable", property=key)
        return value

    def collect(self, keys: Iterable[str]) -> dict[str, str]:
        """Read several properties, keeping request order and skipping gaps.

        Raises:
            PropertySourceError: If any key is unknown; raised before
                anything is read
        """
        keys = list(keys)
        for key in keys:
            if key not in self._readers:
                raise PropertySourceError(key)

        snapshot: dict[str, str] = {}
        for key in keys:
            value = self.read(key)
            if value is not None:
                snapshot[key] = value

        logger.debug("properties_collected", requested=len(keys), collected=len(snapshot))
        return snapshot


def collect_properties(keys: Iterable[str]) -> dict[str, str]:
    """Collect host properties with the default readers."""
    return HostPropertySource().collect(keys)
