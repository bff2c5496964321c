"""
Centralized exception hierarchy for scannerkit.

Library code raises these; the CLI catches ScannerKitError at the top level,
reports it to the CI environment and turns it into a non-zero exit code.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class ScannerKitError(Exception):
    """Base exception for all scannerkit errors."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(ScannerKitError):
    """Base exception for configuration and environment errors."""

    pass


class InputError(ConfigurationError):
    """A required input is missing or invalid."""

    pass


class UnsupportedPlatformError(ConfigurationError):
    """The host operating system is not Linux, macOS or Windows."""

    pass


# ============================================================================
# Install Exceptions
# ============================================================================


class InstallError(ScannerKitError):
    """Base exception for failures during the install sequence."""

    pass


class DownloadError(InstallError):
    """Raised when the archive cannot be fetched."""

    pass


class UnexpectedArchiveError(InstallError):
    """The resolved download URL does not point to a zip archive."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Unexpected extension (expected zip), but got {url}")


class ArchiveExtractionError(InstallError):
    """Failed to extract an archive."""

    pass


class InsecureArchiveError(ArchiveExtractionError):
    """Archive contains insecure paths (directory traversal attempt)."""

    pass


class PrivilegedCommandError(InstallError):
    """A command run with elevated privileges failed or could not be started."""

    def __init__(self, command, returncode: int, reason: str = ""):
        self.command = list(command)
        self.returncode = returncode
        message = f"Command '{' '.join(self.command)}' failed with exit code {returncode}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MoveError(InstallError):
    """Failed to move the extracted directory into place."""

    pass


class InstallTargetExistsError(MoveError):
    """The install directory already exists and would be overwritten."""

    def __init__(self, target):
        self.target = target
        super().__init__(f"Install directory already exists: {target}")
