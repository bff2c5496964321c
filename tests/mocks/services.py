"""
Recording fakes for the installer's collaborators.

All fakes append to a shared call log so tests can assert on the exact order
of operations across services.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

from scannerkit.core.interfaces import (
    ArchiveExtractor,
    CommandRunner,
    DirectoryMover,
    Downloader,
)
from scannerkit.core.platform import PlatformFamily
from scannerkit.scanner.installer import Installer

Call = Tuple


class FakeDownloader(Downloader):
    """Pretend to download, returning a fixed archive path."""

    def __init__(
        self,
        calls: List[Call],
        archive_path: Path = Path("/tmp/runner/archive.zip"),
        error: Optional[Exception] = None,
    ):
        self.calls = calls
        self.archive_path = archive_path
        self.error = error
        # Kept out of the shared call log so call-order assertions stay exact
        self.cleaned: List[Path] = []

    def download(self, url: str) -> Path:
        self.calls.append(("download", url))
        if self.error is not None:
            raise self.error
        return self.archive_path

    def cleanup(self, archive_path: Path) -> None:
        self.cleaned.append(archive_path)


class FakeExtractor(ArchiveExtractor):
    """Record extraction requests."""

    def __init__(self, calls: List[Call], error: Optional[Exception] = None):
        self.calls = calls
        self.error = error

    def extract_zip(self, archive_path: Path, destination: Path) -> Path:
        self.calls.append(("extract_zip", archive_path, destination))
        if self.error is not None:
            raise self.error
        return destination


class FakeMover(DirectoryMover):
    """Record move requests."""

    def __init__(self, calls: List[Call], error: Optional[Exception] = None):
        self.calls = calls
        self.error = error

    def move(self, source: Path, destination: Path) -> None:
        self.calls.append(("move", source, destination))
        if self.error is not None:
            raise self.error


class FakeCommandRunner(CommandRunner):
    """Record commands and return configurable exit codes."""

    def __init__(self, calls: List[Call], returncodes: Optional[Dict[str, int]] = None):
        self.calls = calls
        self.returncodes = returncodes or {}

    def exec(self, command: List[str]) -> int:
        self.calls.append(("exec", list(command)))
        return self.returncodes.get(command[0], 0)


class FakeServices:
    """Bundle of fakes sharing one call log."""

    def __init__(self):
        self.calls: List[Call] = []
        self.downloader = FakeDownloader(self.calls)
        self.extractor = FakeExtractor(self.calls)
        self.mover = FakeMover(self.calls)
        self.runner = FakeCommandRunner(self.calls)

    def installer(self, platform: PlatformFamily) -> Installer:
        return Installer(
            platform,
            downloader=self.downloader,
            extractor=self.extractor,
            mover=self.mover,
            runner=self.runner,
        )

    def names(self) -> List[str]:
        """Operation names in call order."""
        return [call[0] for call in self.calls]
