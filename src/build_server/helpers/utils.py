"""Utility functions for the build server."""

import os
import re
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

# Matches ${VAR_NAME} or ${VAR_NAME:default_value}
ENV_VAR_PATTERN = r"\$\{([^}:]+)(?::([^}]*))?\}"


def substitute_env_vars(
    data: Union[Dict, List, str], environ: Optional[Mapping[str, str]] = None
) -> Union[Dict, List, str]:
    """
    Recursively substitute environment variables in YAML data.

    Supports ${VAR_NAME} and ${VAR_NAME:default} syntax. Unknown variables
    without a default resolve to an empty string.

    Args:
        data: YAML data (dict, list, or string)
        environ: Mapping to resolve variables from (defaults to os.environ)

    Returns:
        Data with environment variables substituted
    """
    if environ is None:
        environ = os.environ

    if isinstance(data, dict):
        return {key: substitute_env_vars(value, environ) for key, value in data.items()}
    elif isinstance(data, list):
        return [substitute_env_vars(item, environ) for item in data]
    elif isinstance(data, str):

        def replace_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return environ.get(var_name, default_value)

        return re.sub(ENV_VAR_PATTERN, replace_var, data)
    else:
        return data


def load_yaml(
    file_path: str, environ: Optional[Mapping[str, str]] = None
) -> Dict[str, Any]:
    """
    Load and parse YAML file.

    Args:
        file_path: Path to the YAML file
        environ: Mapping used for ${VAR} substitution

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        yaml.YAMLError: If the file contains invalid YAML
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    try:
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML syntax in {file_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {file_path} must contain a mapping")

    return substitute_env_vars(data, environ)


def mask_secret(value: Optional[str]) -> Optional[str]:
    """Mask all but the last four characters of a secret."""
    if not value:
        return value
    if len(value) <= 4:
        return "****"
    return "*" * (len(value) - 4) + value[-4:]
