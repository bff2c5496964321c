"""
Mock implementations for testing scannerkit components.

This package provides recording fakes of the installer's collaborators so
the install sequence can be tested without network, sudo or real install
directories.
"""

from .services import (
    FakeDownloader,
    FakeExtractor,
    FakeMover,
    FakeCommandRunner,
    FakeServices,
)
from .archives import make_scanner_zip

__all__ = [
    "FakeDownloader",
    "FakeExtractor",
    "FakeMover",
    "FakeCommandRunner",
    "FakeServices",
    "make_scanner_zip",
]
