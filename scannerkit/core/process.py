"""
Privileged command execution.

On Linux runners the install directory lives under /opt, which requires root
to modify. Commands are run through sudo unless the process already runs as
root.
"""

import logging
import os
import subprocess
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


def is_root() -> bool:
    """Check whether the current process runs with uid 0."""
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def privileged_command(command: Sequence[str]) -> List[str]:
    """
    Build the argument list for running command with elevated privileges.

    Args:
        command: Command and arguments, e.g. ["rm", "-rf", "/opt/sonar-scanner"]

    Returns:
        Argument list, prefixed with sudo when not running as root
    """
    if is_root():
        return list(command)
    return ["sudo", *command]


def run_privileged(command: Sequence[str], timeout: Optional[int] = None) -> int:
    """
    Run a command with elevated privileges.

    Output is streamed to the parent's stdout/stderr so it shows up in the
    CI log.

    Args:
        command: Command and arguments
        timeout: Optional timeout in seconds

    Returns:
        Exit code of the command

    Raises:
        OSError: If the executable cannot be started
        subprocess.TimeoutExpired: If the timeout elapses
    """
    args = privileged_command(command)
    logger.info(f"[command]{' '.join(args)}")

    result = subprocess.run(args, timeout=timeout)

    logger.debug(f"Command exited with code {result.returncode}")
    return result.returncode
