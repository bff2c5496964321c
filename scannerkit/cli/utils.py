"""
Shared utilities for CLI commands.

Resolves the install request from the configuration layers, highest
precedence first:

1. Command-line flags
2. GitHub Actions inputs (INPUT_VERSION, INPUT_WITH-JRE)
3. YAML configuration file (scannerkit.yaml)
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from scannerkit.ci.github import get_boolean_input, get_input
from scannerkit.core.exceptions import ConfigurationError, InputError
from scannerkit.scanner.locator import InstallRequest

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "scannerkit.yaml"


# ============================================================================
# Configuration Management
# ============================================================================


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigurationError: If the file is required but missing, or is not
            a YAML mapping

    Example:
        >>> config = load_yaml_config(Path("scannerkit.yaml"))
        >>> config.get("version")
        '4.8.0.2856'
    """
    if not config_file.exists():
        if required:
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML: {e}")
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Expected a mapping in {config_file}, got {type(config).__name__}"
        )
    return config


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"


def resolve_install_request(
    args, env: Optional[Mapping[str, str]] = None
) -> InstallRequest:
    """
    Build the install request from CLI flags, action inputs and config file.

    Args:
        args: Parsed arguments with config, scanner_version and with_jre
        env: Environment holding action inputs (os.environ if None)

    Returns:
        InstallRequest

    Raises:
        InputError: If no layer supplies a version
        ConfigurationError: If an explicit config file is missing or invalid
    """
    config_file = getattr(args, "config", None)
    if config_file is not None:
        config = load_yaml_config(Path(config_file), required=True)
    else:
        config = load_yaml_config(Path.cwd() / DEFAULT_CONFIG_FILE)

    version = getattr(args, "scanner_version", None) or get_input("version", env=env)
    if not version and config.get("version") is not None:
        version = str(config["version"]).strip()

    if not version:
        raise InputError(
            "Sonar Scanner version is required "
            "(--scanner-version, the 'version' input or 'version' in config)"
        )

    include_jre = getattr(args, "with_jre", None)
    if include_jre is None:
        if get_input("with-jre", env=env):
            include_jre = get_boolean_input("with-jre", env=env)
        else:
            include_jre = _as_bool(config.get("with_jre", False))

    logger.debug(f"Resolved request: version={version}, include_jre={include_jre}")
    return InstallRequest(version=version, include_jre=include_jre)
