"""
Locate command implementation.

Prints the download URL and install coordinates for a request without
downloading or touching the file system.
"""

import logging

from scannerkit.cli.utils import resolve_install_request
from scannerkit.core.platform import detect_platform_family, parse_platform_family
from scannerkit.scanner.locator import resolve_target

logger = logging.getLogger(__name__)


def run(args) -> int:
    """
    Run the locate command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    request = resolve_install_request(args)

    if getattr(args, "platform", None):
        platform = parse_platform_family(args.platform)
    else:
        platform = detect_platform_family()

    target = resolve_target(request, platform)
    logger.debug(f"Resolved {request} on {platform}: {target}")

    print(f"platform:      {platform}")
    print(f"url:           {target.url}")
    print(f"install path:  {target.final_install_path}")
    print(f"extracted dir: {target.expected_extracted_dir_name}")

    return 0
