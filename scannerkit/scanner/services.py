"""
Default implementations of the installer's collaborators.

These wire the abstract interfaces in scannerkit.core.interfaces to the real
network, file system and sudo.
"""

import logging
import tempfile
from pathlib import Path
from typing import List, Optional, Set
from urllib.parse import urlparse

from scannerkit.core.download import DownloadProgress, download_file
from scannerkit.core.exceptions import DownloadError
from scannerkit.core.filesystem import extract_zip, move_directory, safe_rmtree
from scannerkit.core.interfaces import (
    ArchiveExtractor,
    CommandRunner,
    DirectoryMover,
    Downloader,
)
from scannerkit.core.process import run_privileged

logger = logging.getLogger(__name__)


class HttpDownloader(Downloader):
    """
    Download archives over HTTP(S) with requests.

    Each download lands in its own fresh temporary directory unless
    download_dir is given. cleanup() removes that temporary directory, or
    just the archive when download_dir was given.
    """

    def __init__(self, download_dir: Optional[Path] = None, timeout: int = 30):
        """
        Initialize HTTP downloader.

        Args:
            download_dir: Directory to store archives in (temporary if None)
            timeout: Per-request timeout in seconds
        """
        self.download_dir = Path(download_dir) if download_dir else None
        self.timeout = timeout
        self._temp_dirs: Set[Path] = set()

    def download(self, url: str) -> Path:
        if self.download_dir:
            target_dir = self.download_dir
        else:
            target_dir = Path(tempfile.mkdtemp(prefix="scannerkit_"))
            self._temp_dirs.add(target_dir)

        archive_path = target_dir / (Path(urlparse(url).path).name or "download")

        try:
            return download_file(
                url,
                archive_path,
                progress_callback=self._log_progress,
                timeout=self.timeout,
            )
        except DownloadError:
            self.cleanup(archive_path)
            raise

    def cleanup(self, archive_path: Path) -> None:
        archive_path = Path(archive_path)
        temp_dir = archive_path.parent

        if temp_dir in self._temp_dirs:
            safe_rmtree(temp_dir, require_prefix=tempfile.gettempdir())
            self._temp_dirs.discard(temp_dir)
        else:
            archive_path.unlink(missing_ok=True)

        logger.debug(f"Removed downloaded archive {archive_path}")

    @staticmethod
    def _log_progress(progress: DownloadProgress) -> None:
        logger.debug(f"Downloaded {progress}")


class ZipExtractor(ArchiveExtractor):
    """Extract zip archives in-process."""

    def extract_zip(self, archive_path: Path, destination: Path) -> Path:
        logger.info(f"Extracting {archive_path} to {destination}")
        return extract_zip(archive_path, destination)


class FilesystemMover(DirectoryMover):
    """Move directories with shutil, refusing to overwrite."""

    def move(self, source: Path, destination: Path) -> None:
        logger.info(f"Moving {source} to {destination}")
        move_directory(source, destination)


class SudoCommandRunner(CommandRunner):
    """Run commands through sudo (or directly when already root)."""

    def __init__(self, timeout: Optional[int] = None):
        self.timeout = timeout

    def exec(self, command: List[str]) -> int:
        return run_privileged(command, timeout=self.timeout)
