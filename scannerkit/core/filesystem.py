"""
File system utilities for scannerkit.

This module provides the unprivileged file operations used on macOS and
Windows hosts:
- Zip extraction with directory traversal protection
- Directory moves that refuse to overwrite an existing destination
- Safe removal of temporary download directories
"""

import logging
import os
import shutil
import stat
import zipfile
from pathlib import Path
from typing import Callable, Optional, Union

from scannerkit.core.exceptions import (
    ArchiveExtractionError,
    InsecureArchiveError,
    InstallTargetExistsError,
    MoveError,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Path Utilities
# ============================================================================


def is_relative_to(path: Path, parent: Path) -> bool:
    """
    Check if path is relative to parent.

    Args:
        path: Path to check
        parent: Potential parent path

    Returns:
        True if path is under parent
    """
    try:
        path.relative_to(parent)
        return True
    except ValueError:
        return False


# ============================================================================
# Archive Extraction
# ============================================================================


def _validate_archive_path(path: str, destination: Path) -> None:
    """
    Validate that an archive member path is safe to extract.

    Raises:
        InsecureArchiveError: If path attempts directory traversal
    """
    member_path = (destination / path).resolve()

    if not is_relative_to(member_path, destination.resolve()):
        raise InsecureArchiveError(
            f"Archive member '{path}' attempts directory traversal. "
            "This is a security risk and extraction has been blocked."
        )


def extract_zip(
    archive_path: Union[str, Path],
    destination: Union[str, Path],
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> Path:
    """
    Extract a zip archive into a destination directory.

    All member paths are validated before anything is written. Unix
    permission bits stored in the archive are restored, so launcher scripts
    such as bin/sonar-scanner stay executable.

    Args:
        archive_path: Path to the zip file
        destination: Directory to extract into (created if missing)
        progress_callback: Optional callback(current, total) for progress

    Returns:
        The destination directory

    Raises:
        ArchiveExtractionError: If the archive is missing or corrupt
        InsecureArchiveError: If the archive contains malicious paths

    Example:
        >>> extract_zip('sonar-scanner-cli-4.8.0.2856.zip', '/Users/runner')
    """
    archive_path = Path(archive_path)
    destination = Path(destination)

    if not archive_path.exists():
        raise ArchiveExtractionError(f"Archive not found: {archive_path}")

    destination.mkdir(parents=True, exist_ok=True)

    try:
        with zipfile.ZipFile(archive_path, "r") as zf:
            members = zf.infolist()
            total = len(members)

            # Validate all paths first
            for member in members:
                _validate_archive_path(member.filename, destination)

            for i, member in enumerate(members):
                extracted = zf.extract(member, destination)
                _restore_permissions(member, extracted)
                if progress_callback:
                    progress_callback(i + 1, total)
    except InsecureArchiveError:
        raise
    except (OSError, zipfile.BadZipFile) as e:
        raise ArchiveExtractionError(f"Failed to extract {archive_path}: {e}") from e

    logger.debug(f"Extracted {archive_path} to {destination}")
    return destination


def _restore_permissions(member: zipfile.ZipInfo, extracted: str) -> None:
    """Apply the Unix mode stored in a zip entry, if any."""
    if os.name == "nt":
        return

    mode = (member.external_attr >> 16) & 0o777
    if mode and not member.is_dir():
        os.chmod(extracted, mode | stat.S_IRUSR)


# ============================================================================
# Moving
# ============================================================================


def move_directory(source: Union[str, Path], destination: Union[str, Path]) -> None:
    """
    Move a directory to a new location.

    The destination must not exist: an existing install is never merged into
    or silently replaced.

    Args:
        source: Directory to move
        destination: Final location of the directory

    Raises:
        InstallTargetExistsError: If destination already exists
        MoveError: If source is missing or the move fails
    """
    source = Path(source)
    destination = Path(destination)

    if not source.is_dir():
        raise MoveError(f"Source directory does not exist: {source}")

    if destination.exists() or destination.is_symlink():
        raise InstallTargetExistsError(destination)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(source), str(destination))
    except OSError as e:
        raise MoveError(f"Failed to move '{source}' to '{destination}': {e}") from e

    logger.debug(f"Moved {source} to {destination}")


# ============================================================================
# Removal
# ============================================================================


def safe_rmtree(
    path: Union[str, Path], require_prefix: Optional[Union[str, Path]] = None
) -> None:
    """
    Remove a directory tree with safeguards.

    Args:
        path: Directory to remove
        require_prefix: If specified, path must be under this directory

    Raises:
        ValueError: If path is not under require_prefix
        OSError: If deletion fails

    Example:
        >>> safe_rmtree('/tmp/scannerkit_x1y2', require_prefix='/tmp')
    """
    path = Path(path).resolve()

    if require_prefix is not None:
        require_prefix = Path(require_prefix).resolve()
        if not is_relative_to(path, require_prefix):
            raise ValueError(
                f"Refusing to delete '{path}': not under required prefix '{require_prefix}'"
            )

    if not path.exists():
        return  # Already gone, nothing to do

    if os.name == "nt":

        def handle_remove_readonly(func, target, exc):
            """Clear the read-only flag and retry."""
            os.chmod(target, stat.S_IWRITE)
            func(target)

        shutil.rmtree(path, onerror=handle_remove_readonly)
    else:
        shutil.rmtree(path)

    logger.debug(f"Removed {path}")
