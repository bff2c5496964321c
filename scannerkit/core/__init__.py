"""
Core functionality for scannerkit.

This package contains the foundational modules that the installer depends on.
"""

from .platform import (
    PlatformFamily,
    detect_platform_family,
    parse_platform_family,
    clear_platform_cache,
)

from .exceptions import (
    ScannerKitError,
    ConfigurationError,
    InputError,
    UnsupportedPlatformError,
    InstallError,
    DownloadError,
    UnexpectedArchiveError,
    ArchiveExtractionError,
    InsecureArchiveError,
    PrivilegedCommandError,
    MoveError,
    InstallTargetExistsError,
)

from .interfaces import (
    Downloader,
    ArchiveExtractor,
    DirectoryMover,
    CommandRunner,
)

__all__ = [
    # Platform
    "PlatformFamily",
    "detect_platform_family",
    "parse_platform_family",
    "clear_platform_cache",
    # Exceptions
    "ScannerKitError",
    "ConfigurationError",
    "InputError",
    "UnsupportedPlatformError",
    "InstallError",
    "DownloadError",
    "UnexpectedArchiveError",
    "ArchiveExtractionError",
    "InsecureArchiveError",
    "PrivilegedCommandError",
    "MoveError",
    "InstallTargetExistsError",
    # Interfaces
    "Downloader",
    "ArchiveExtractor",
    "DirectoryMover",
    "CommandRunner",
]
