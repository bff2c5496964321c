"""
Install command implementation.

Downloads the requested Sonar Scanner CLI and installs it for the current
platform. Failures are reported as ::error:: workflow commands and turned
into a non-zero exit code.
"""

import logging
from typing import Mapping, Optional

from scannerkit.ci.github import FailureReporter, add_path
from scannerkit.cli.utils import resolve_install_request
from scannerkit.core.exceptions import ScannerKitError
from scannerkit.core.platform import detect_platform_family
from scannerkit.scanner.installer import Installer

logger = logging.getLogger(__name__)


def run(
    args,
    reporter: Optional[FailureReporter] = None,
    installer: Optional[Installer] = None,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Run the install command.

    Args:
        args: Parsed command-line arguments
        reporter: Failure sink (writes to stdout if None)
        installer: Installer to use (one for the detected platform if None)
        env: Environment with action inputs and GITHUB_PATH (os.environ if None)

    Returns:
        Exit code (0 for success)
    """
    reporter = reporter or FailureReporter()

    try:
        request = resolve_install_request(args, env=env)
        installer = installer or Installer(detect_platform_family())
    except ScannerKitError as e:
        reporter.report(str(e))
        return reporter.exit_code()

    result = installer.run(request)
    if not result.ok:
        reporter.report(str(result.error))
        return reporter.exit_code()

    if getattr(args, "add_path", True):
        add_path(result.target.bin_dir, env=env)

    return reporter.exit_code()
