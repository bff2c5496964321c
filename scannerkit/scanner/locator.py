"""
Sonar Scanner CLI download and install coordinates.

Everything in this module is a pure function of the install request and the
platform family: no I/O, no environment lookups, no caching.

Example:
    >>> request = InstallRequest(version="4.8.0.2856", include_jre=True)
    >>> compute_download_url(request, PlatformFamily.MACOS)
    'https://binaries.sonarsource.com/Distribution/sonar-scanner-cli/sonar-scanner-cli-4.8.0.2856-macosx.zip'
"""

from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from scannerkit.core.exceptions import UnsupportedPlatformError
from scannerkit.core.platform import PlatformFamily

DOWNLOAD_BASE_URL = "https://binaries.sonarsource.com/Distribution/sonar-scanner-cli"
ARTIFACT_NAME = "sonar-scanner-cli"
EXTRACTED_DIR_PREFIX = "sonar-scanner"
ARCHIVE_EXTENSION = ".zip"

LINUX_INSTALL_PATH = PurePosixPath("/opt/sonar-scanner")
MACOS_INSTALL_PATH = PurePosixPath("/Users/runner/sonar-scanner")
WINDOWS_INSTALL_PATH = PureWindowsPath("C:\\sonar-scanner")

# Archive variant bundling a JRE, per platform
_JRE_SUFFIXES = {
    PlatformFamily.LINUX: "-linux",
    PlatformFamily.MACOS: "-macosx",
    PlatformFamily.WINDOWS: "-windows",
}

_INSTALL_PATHS = {
    PlatformFamily.LINUX: LINUX_INSTALL_PATH,
    PlatformFamily.MACOS: MACOS_INSTALL_PATH,
    PlatformFamily.WINDOWS: WINDOWS_INSTALL_PATH,
}


@dataclass(frozen=True)
class InstallRequest:
    """
    What the caller asked for.

    Attributes:
        version: Sonar Scanner CLI version, e.g. '4.8.0.2856'. Not validated;
            an unknown version fails at download time.
        include_jre: Whether to install the variant bundling a Java runtime
    """

    version: str
    include_jre: bool = False


@dataclass(frozen=True)
class DownloadTarget:
    """
    Resolved download and install coordinates.

    Attributes:
        url: Archive download URL
        final_install_path: Directory the scanner must end up in
        extraction_parent_dir: Directory the archive is extracted into
        expected_extracted_dir_name: Top-level directory inside the archive
    """

    url: str
    final_install_path: PurePath
    extraction_parent_dir: PurePath
    expected_extracted_dir_name: str

    @property
    def extracted_path(self) -> PurePath:
        """Location of the archive's top-level directory after extraction."""
        return self.extraction_parent_dir / self.expected_extracted_dir_name

    @property
    def bin_dir(self) -> PurePath:
        """Directory holding the sonar-scanner launcher once installed."""
        return self.final_install_path / "bin"


def _require_family(platform: PlatformFamily) -> PlatformFamily:
    if not isinstance(platform, PlatformFamily):
        raise UnsupportedPlatformError(f"Unsupported platform: {platform!r}")
    return platform


def compute_suffix(request: InstallRequest, platform: PlatformFamily) -> str:
    """
    Get the archive suffix for the requested variant.

    Args:
        request: Install request
        platform: Target platform family

    Returns:
        '' without a bundled JRE, otherwise '-linux', '-macosx' or '-windows'

    Raises:
        UnsupportedPlatformError: If platform is not a PlatformFamily
    """
    platform = _require_family(platform)
    if not request.include_jre:
        return ""
    return _JRE_SUFFIXES[platform]


def versioned_name(request: InstallRequest, platform: PlatformFamily) -> str:
    """Version string with the variant suffix appended, e.g. '4.8.0.2856-linux'."""
    return f"{request.version}{compute_suffix(request, platform)}"


def compute_download_url(request: InstallRequest, platform: PlatformFamily) -> str:
    """
    Get the Sonar Scanner CLI download link.

    The link depends on the requested version and on whether the install
    requires the bundled JRE. The remote resource is not checked.
    """
    name = versioned_name(request, platform)
    return f"{DOWNLOAD_BASE_URL}/{ARTIFACT_NAME}-{name}{ARCHIVE_EXTENSION}"


def compute_install_directory(platform: PlatformFamily) -> PurePath:
    """Get the fixed Sonar Scanner installation directory for a platform."""
    return _INSTALL_PATHS[_require_family(platform)]


def resolve_target(request: InstallRequest, platform: PlatformFamily) -> DownloadTarget:
    """
    Compute all download and install coordinates for a request.

    Args:
        request: Install request
        platform: Target platform family

    Returns:
        DownloadTarget for the request
    """
    install_path = compute_install_directory(platform)
    return DownloadTarget(
        url=compute_download_url(request, platform),
        final_install_path=install_path,
        extraction_parent_dir=install_path.parent,
        expected_extracted_dir_name=(
            f"{EXTRACTED_DIR_PREFIX}-{versioned_name(request, platform)}"
        ),
    )
