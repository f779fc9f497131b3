"""Host platform mapping to the release packaging convention.

frieza archives are named with Go's GOOS/GOARCH values. The host is
introspected with ``sys.platform`` and ``platform.machine()`` and mapped to
those names. Unknown values pass through unchanged: they are trusted to
already follow the packaging convention (``linux``, ``darwin``, ``arm64``).
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass

from frieza_action.constants import WINDOWS_EXE_SUFFIX, WINDOWS_OS_NAME

_ARCH_MAPPINGS: dict[str, str] = {
    # 32-bit x86 family
    "x32": "386",
    "x86": "386",
    "i386": "386",
    "i686": "386",
    # 64-bit x86 family
    "x64": "amd64",
    "x86_64": "amd64",
    "AMD64": "amd64",
    # 64-bit ARM
    "aarch64": "arm64",
    "ARM64": "arm64",
}

_OS_MAPPINGS: dict[str, str] = {
    "win32": WINDOWS_OS_NAME,
}


def map_arch(arch: str) -> str:
    """Map a host architecture name to the packaging convention."""
    return _ARCH_MAPPINGS.get(arch, arch)


def map_os(os_name: str) -> str:
    """Map a host OS name to the packaging convention."""
    return _OS_MAPPINGS.get(os_name, os_name)


@dataclass(slots=True, frozen=True)
class PlatformTarget:
    """OS and architecture pair selecting a release asset."""

    os_name: str
    arch: str

    @property
    def is_windows(self) -> bool:
        return self.os_name == WINDOWS_OS_NAME

    @property
    def exe_suffix(self) -> str:
        """Suffix carried by executables on this target."""
        return WINDOWS_EXE_SUFFIX if self.is_windows else ""


def detect_target(
    system: str | None = None, machine: str | None = None
) -> PlatformTarget:
    """Build the platform target of the host.

    Args:
        system: Override for ``sys.platform``
        machine: Override for ``platform.machine()``

    """
    return PlatformTarget(
        os_name=map_os(system if system is not None else sys.platform),
        arch=map_arch(machine if machine is not None else platform.machine()),
    )
