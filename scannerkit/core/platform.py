"""
Platform detection for scannerkit.

The Sonar Scanner distribution only ships archives for three operating system
families, so detection collapses the host into one of them:

- Linux (any distribution, including the Ubuntu GitHub runners)
- macOS
- Windows

Usage:
    from scannerkit.core.platform import detect_platform_family

    family = detect_platform_family()
    print(f"Installing for {family.value}")
"""

import functools
import platform
from enum import Enum

from scannerkit.core.exceptions import UnsupportedPlatformError


class PlatformFamily(Enum):
    """Operating system families with a Sonar Scanner distribution."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.value


# Accepted spellings for an explicit --platform override
_ALIASES = {
    "linux": PlatformFamily.LINUX,
    "ubuntu": PlatformFamily.LINUX,
    "macos": PlatformFamily.MACOS,
    "darwin": PlatformFamily.MACOS,
    "osx": PlatformFamily.MACOS,
    "windows": PlatformFamily.WINDOWS,
    "win32": PlatformFamily.WINDOWS,
}


@functools.lru_cache(maxsize=1)
def detect_platform_family() -> PlatformFamily:
    """
    Detect the operating system family of the current host.

    This function is cached - it only runs detection once per process.

    Returns:
        PlatformFamily of the executing environment

    Raises:
        UnsupportedPlatformError: If the OS is not Linux, macOS or Windows

    Example:
        >>> detect_platform_family()
        <PlatformFamily.LINUX: 'linux'>
    """
    system = platform.system().lower()

    if system == "linux":
        return PlatformFamily.LINUX
    elif system == "darwin":
        return PlatformFamily.MACOS
    elif system == "windows":
        return PlatformFamily.WINDOWS
    else:
        raise UnsupportedPlatformError(f"Unsupported operating system: {system}")


def parse_platform_family(name: str) -> PlatformFamily:
    """
    Convert a user-supplied platform name into a PlatformFamily.

    Args:
        name: Platform name ('linux', 'macos', 'windows' or a known alias)

    Returns:
        Matching PlatformFamily

    Raises:
        UnsupportedPlatformError: If the name is not recognized
    """
    family = _ALIASES.get(name.strip().lower())
    if family is None:
        raise UnsupportedPlatformError(
            f"Unknown platform '{name}'. "
            f"Supported: {', '.join(sorted(_ALIASES))}"
        )
    return family


def clear_platform_cache():
    """
    Clear the platform detection cache.

    Forces the next call to detect_platform_family() to re-detect.
    Useful for testing.
    """
    detect_platform_family.cache_clear()


__all__ = [
    "PlatformFamily",
    "detect_platform_family",
    "parse_platform_family",
    "clear_platform_cache",
]
