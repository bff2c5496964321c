"""
Sonar Scanner CLI installer.

Runs the install sequence for one request:

1. Resolve the download URL and install directory
2. Download the archive
3. Check the archive extension
4. Place the scanner, depending on the platform:
   - Linux: sudo rm -rf <target>, sudo unzip, sudo mv
   - macOS / Windows: extract, then move (the target must not exist)

Every step waits for the previous one and the sequence stops at the first
failure. Nothing is retried; apart from the downloaded archive, nothing
is cleaned up after a failure.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from scannerkit.core.exceptions import (
    PrivilegedCommandError,
    ScannerKitError,
    UnexpectedArchiveError,
    UnsupportedPlatformError,
)
from scannerkit.core.interfaces import (
    ArchiveExtractor,
    CommandRunner,
    DirectoryMover,
    Downloader,
)
from scannerkit.core.platform import PlatformFamily
from scannerkit.scanner.locator import (
    ARCHIVE_EXTENSION,
    DownloadTarget,
    InstallRequest,
    resolve_target,
)
from scannerkit.scanner.services import (
    FilesystemMover,
    HttpDownloader,
    SudoCommandRunner,
    ZipExtractor,
)

logger = logging.getLogger(__name__)

# Shell conventions for a command that could not be started / timed out
COMMAND_NOT_STARTED_EXIT_CODE = 127
COMMAND_TIMEOUT_EXIT_CODE = 124


@dataclass(frozen=True)
class InstallResult:
    """
    Outcome of an install run.

    Exactly one of target and error is set.
    """

    target: Optional[DownloadTarget] = None
    error: Optional[ScannerKitError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Installer:
    """
    Install the Sonar Scanner CLI for one platform family.

    Example:
        >>> installer = Installer(PlatformFamily.LINUX)
        >>> result = installer.run(InstallRequest("4.8.0.2856", include_jre=True))
        >>> if not result.ok:
        ...     print(result.error)
    """

    def __init__(
        self,
        platform: PlatformFamily,
        downloader: Optional[Downloader] = None,
        extractor: Optional[ArchiveExtractor] = None,
        mover: Optional[DirectoryMover] = None,
        runner: Optional[CommandRunner] = None,
    ):
        """
        Initialize installer.

        Args:
            platform: Platform family to install for
            downloader: Archive download service (HTTP if None)
            extractor: Unprivileged zip extraction (in-process if None)
            mover: Unprivileged directory move (shutil if None)
            runner: Privileged command execution (sudo if None)
        """
        if not isinstance(platform, PlatformFamily):
            raise UnsupportedPlatformError(f"Unsupported platform: {platform!r}")

        self.platform = platform
        self.downloader = downloader or HttpDownloader()
        self.extractor = extractor or ZipExtractor()
        self.mover = mover or FilesystemMover()
        self.runner = runner or SudoCommandRunner()

    def install(self, request: InstallRequest) -> DownloadTarget:
        """
        Download and install the requested scanner.

        Args:
            request: Version and JRE choice

        Returns:
            The resolved target that is now installed

        Raises:
            DownloadError: If the archive cannot be fetched
            UnexpectedArchiveError: If the URL is not a zip archive
            PrivilegedCommandError: If rm, unzip or mv fails on Linux
            ArchiveExtractionError: If extraction fails on macOS/Windows
            MoveError: If the extracted directory cannot be moved into place
        """
        target = resolve_target(request, self.platform)
        logger.info(
            f"Installing Sonar Scanner CLI {request.version} "
            f"({'with' if request.include_jre else 'without'} JRE) "
            f"to {target.final_install_path}"
        )
        logger.debug(f"Download URL: {target.url}")

        archive_path = self.downloader.download(target.url)

        try:
            if not target.url.endswith(ARCHIVE_EXTENSION):
                raise UnexpectedArchiveError(target.url)

            if self.platform is PlatformFamily.LINUX:
                self._place_privileged(archive_path, target)
            elif self.platform in (PlatformFamily.MACOS, PlatformFamily.WINDOWS):
                self._place_unprivileged(archive_path, target)
            else:
                raise UnsupportedPlatformError(f"Unsupported platform: {self.platform}")
        finally:
            self._discard_archive(archive_path)

        logger.info(f"Sonar Scanner CLI installed at {target.final_install_path}")
        return target

    def run(self, request: InstallRequest) -> InstallResult:
        """
        Install and capture the outcome instead of raising.

        Only ScannerKitError is captured; anything else is a bug and
        propagates.
        """
        try:
            return InstallResult(target=self.install(request))
        except ScannerKitError as e:
            logger.debug(f"Install failed: {e}")
            return InstallResult(error=e)

    def _place_privileged(self, archive_path: Path, target: DownloadTarget) -> None:
        # The target may belong to a preinstalled scanner owned by root
        self._exec(["rm", "-rf", str(target.final_install_path)])
        self._exec(
            [
                "unzip",
                "-o",
                "-q",
                str(archive_path),
                "-d",
                str(target.extraction_parent_dir),
            ]
        )
        self._exec(
            ["mv", str(target.extracted_path), str(target.final_install_path)]
        )

    def _place_unprivileged(self, archive_path: Path, target: DownloadTarget) -> None:
        self.extractor.extract_zip(archive_path, Path(str(target.extraction_parent_dir)))
        self.mover.move(
            Path(str(target.extracted_path)), Path(str(target.final_install_path))
        )

    def _exec(self, command) -> None:
        try:
            returncode = self.runner.exec(command)
        except subprocess.TimeoutExpired as e:
            raise PrivilegedCommandError(
                command, COMMAND_TIMEOUT_EXIT_CODE, reason=f"timed out after {e.timeout}s"
            ) from e
        except OSError as e:
            raise PrivilegedCommandError(
                command, COMMAND_NOT_STARTED_EXIT_CODE, reason=str(e)
            ) from e

        if returncode != 0:
            raise PrivilegedCommandError(command, returncode)

    def _discard_archive(self, archive_path: Path) -> None:
        try:
            self.downloader.cleanup(archive_path)
        except OSError as e:
            # A leftover archive in the temp directory must not fail the install
            logger.warning(f"Failed to remove downloaded archive {archive_path}: {e}")
