"""
CI environment integration for scannerkit.
"""

from .github import (
    FailureReporter,
    add_path,
    get_boolean_input,
    get_input,
)

__all__ = [
    "FailureReporter",
    "add_path",
    "get_boolean_input",
    "get_input",
]
