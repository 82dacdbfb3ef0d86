"""Configuration loading utilities.

Reads ``config.yaml``, expands environment references and validates the
result into :class:`~mission_control.core.config.models.Config`.

Two reference forms are understood inside any string value:

- ``${VAR}`` is replaced by the variable's value and must be set.
- ``${VAR:-fallback}`` uses ``fallback`` when the variable is unset or empty.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from mission_control.core.config.models import Config

# Config file used when neither --config nor MISSION_CONTROL_CONFIG is given
DEFAULT_CONFIG_PATH = "config.yaml"
CONFIG_PATH_ENV = "MISSION_CONTROL_CONFIG"

_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")


def expand_env_vars(value: str) -> str:
    """Expand ${VAR} and ${VAR:-fallback} references in a string.

    Unset variables without a fallback are left in place so that
    :func:`check_unexpanded_vars` can report them.

    Examples:
        >>> os.environ["MC_DB"] = "/var/lib/mc.db"
        >>> expand_env_vars("${MC_DB}")
        '/var/lib/mc.db'
        >>> expand_env_vars("${MC_UNSET:-mission_control.db}")
        'mission_control.db'
    """

    def replacer(match: re.Match[str]) -> str:
        name, fallback = match.group(1), match.group(2)
        current = os.environ.get(name)
        if fallback is not None:
            return current or fallback
        return current if current is not None else match.group(0)

    return _VAR_PATTERN.sub(replacer, value)


def expand_env_vars_recursive(obj: Any) -> Any:
    """Apply :func:`expand_env_vars` to every string in nested dicts and lists."""
    if isinstance(obj, dict):
        return {key: expand_env_vars_recursive(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [expand_env_vars_recursive(item) for item in obj]
    if isinstance(obj, str):
        return expand_env_vars(obj)
    return obj


def check_unexpanded_vars(data: Any, source: str) -> None:
    """Fail if any ${VAR} reference survived expansion.

    Args:
        data: Expanded configuration data.
        source: Label for the error message, usually the file path.

    Raises:
        ValueError: Naming every unresolved variable.
    """
    unresolved = sorted(set(_find_references(data)))
    if unresolved:
        raise ValueError(
            f"Unresolved environment variable(s) in {source}: {', '.join(unresolved)}. "
            f"Set these variables or remove the ${{VAR}} references."
        )


def _find_references(obj: Any) -> list[str]:
    if isinstance(obj, dict):
        return [ref for value in obj.values() for ref in _find_references(value)]
    if isinstance(obj, list):
        return [ref for item in obj for ref in _find_references(item)]
    if isinstance(obj, str):
        return [f"${{{match.group(1)}}}" for match in _VAR_PATTERN.finditer(obj)]
    return []


def load_config(path: Path | str) -> Config:
    """Load and validate a YAML configuration file.

    A ``.env`` file beside the config is loaded first (without overriding
    variables already set) so its values take part in expansion.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If a reference cannot be resolved or a value is invalid.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    env_file = config_path.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    with config_path.open() as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    data = expand_env_vars_recursive(data)
    check_unexpanded_vars(data, source=str(config_path))

    return Config(**data)


def load_config_or_default(path: Path | str | None = None) -> Config:
    """Load configuration if the file exists, otherwise return defaults.

    Without an explicit path, ``$MISSION_CONTROL_CONFIG`` is consulted
    before falling back to ``config.yaml`` in the working directory.
    """
    if path is None:
        path = os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)
    if not Path(path).exists():
        return Config()
    return load_config(path)
