"""
Core interfaces for scannerkit.

The installer depends only on these abstract collaborators, so the install
sequence can be exercised with fakes that record every call instead of
touching the network or the real install directories.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class Downloader(ABC):
    """Fetches a remote archive to a local file."""

    @abstractmethod
    def download(self, url: str) -> Path:
        """
        Download url to a local file.

        Args:
            url: Remote archive URL

        Returns:
            Path to the downloaded archive

        Raises:
            DownloadError: If the URL is unreachable or returns a non-success status
        """
        pass

    def cleanup(self, archive_path: Path) -> None:
        """
        Discard a previously downloaded archive.

        Called once the install sequence no longer needs the archive. The
        default keeps the file.
        """
        pass


class ArchiveExtractor(ABC):
    """Unprivileged zip extraction."""

    @abstractmethod
    def extract_zip(self, archive_path: Path, destination: Path) -> Path:
        """
        Extract a zip archive into destination.

        Returns:
            The directory the archive was extracted into
        """
        pass


class DirectoryMover(ABC):
    """Unprivileged directory move."""

    @abstractmethod
    def move(self, source: Path, destination: Path) -> None:
        """
        Move source to destination.

        Raises:
            InstallTargetExistsError: If destination already exists
            MoveError: If the move fails
        """
        pass


class CommandRunner(ABC):
    """Runs shell commands with elevated privileges."""

    @abstractmethod
    def exec(self, command: List[str]) -> int:
        """
        Run command and wait for it to finish.

        Args:
            command: Command and arguments, without any sudo prefix

        Returns:
            Exit code of the command
        """
        pass
