"""
Sonar Scanner CLI location and installation.
"""

from .locator import (
    InstallRequest,
    DownloadTarget,
    compute_suffix,
    versioned_name,
    compute_download_url,
    compute_install_directory,
    resolve_target,
)
from .installer import Installer, InstallResult

__all__ = [
    "InstallRequest",
    "DownloadTarget",
    "compute_suffix",
    "versioned_name",
    "compute_download_url",
    "compute_install_directory",
    "resolve_target",
    "Installer",
    "InstallResult",
]
