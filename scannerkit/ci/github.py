"""
GitHub Actions integration.

GitHub passes step inputs to the action as INPUT_<NAME> environment variables
and reads workflow commands (such as ::error::) from the step's stdout. This
module covers the small subset of that protocol the installer needs.
"""

import logging
import os
import sys
from pathlib import Path, PurePath
from typing import List, Mapping, Optional, TextIO, Union

from scannerkit.core.exceptions import InputError

logger = logging.getLogger(__name__)


def input_env_name(name: str) -> str:
    """
    Get the environment variable holding an action input.

    Example:
        >>> input_env_name("with-jre")
        'INPUT_WITH-JRE'
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(
    name: str, required: bool = False, env: Optional[Mapping[str, str]] = None
) -> str:
    """
    Read an action input.

    Args:
        name: Input name as declared in action.yml
        required: Raise if the input is missing or empty
        env: Environment to read from (os.environ if None)

    Returns:
        Input value with surrounding whitespace removed, '' if unset

    Raises:
        InputError: If required and not supplied
    """
    env = os.environ if env is None else env
    value = env.get(input_env_name(name), "").strip()

    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")

    return value


def get_boolean_input(
    name: str, default: bool = False, env: Optional[Mapping[str, str]] = None
) -> bool:
    """
    Read a boolean action input.

    Only 'true' (any case) is true; any other non-empty value is false.
    """
    value = get_input(name, env=env)
    if not value:
        return default
    return value.lower() == "true"


def add_path(
    directory: Union[str, PurePath], env: Optional[Mapping[str, str]] = None
) -> bool:
    """
    Prepend a directory to PATH for the following workflow steps.

    Args:
        directory: Directory to add
        env: Environment to read GITHUB_PATH from (os.environ if None)

    Returns:
        True if the directory was registered, False outside GitHub Actions
    """
    env = os.environ if env is None else env
    path_file = env.get("GITHUB_PATH")

    if not path_file:
        logger.warning(f"GITHUB_PATH not set, add {directory} to PATH manually")
        return False

    with open(Path(path_file), "a", encoding="utf-8") as f:
        f.write(f"{directory}\n")

    logger.info(f"Added {directory} to PATH")
    return True


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class FailureReporter:
    """
    Record terminal failures for the surrounding workflow.

    report() emits an ::error:: workflow command and marks the run as failed.
    It never raises and never stops the caller: whoever reports a failure
    must stop issuing further steps and eventually return exit_code().
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize failure reporter.

        Args:
            stream: Where workflow commands go (sys.stdout if None)
        """
        self.stream = stream
        self.messages: List[str] = []

    @property
    def failed(self) -> bool:
        return bool(self.messages)

    def report(self, message: str) -> None:
        """Mark the run as failed with message."""
        self.messages.append(message)
        logger.debug(f"Reporting failure: {message}")

        stream = self.stream or sys.stdout
        stream.write(f"::error::{_escape_data(message)}\n")
        stream.flush()

    def exit_code(self) -> int:
        """Process exit code matching the recorded state."""
        return 1 if self.failed else 0
