#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for pandocwalk.

Configuration can come from ``.pandocwalk.toml``, ``.pandocwalk.yaml``,
``.pandocwalk.yml``, ``.pandocwalk.json`` or the ``[tool.pandocwalk]``
section of ``pyproject.toml``. Recognized keys::

    filter = "manuscript"        # filter run when --filter is not given
    format = "latex"             # target format when pandoc passes none
    log_level = "INFO"
    log_file = "pandocwalk.log"

    [filter_options.leanpub]     # keyword options for a filter factory
    default_format = "html"
"""

import argparse
import json
import logging
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from pandocwalk.constants import CONFIG_FILENAMES, PYPROJECT_FILENAME, PYPROJECT_TOOL_SECTION

logger = logging.getLogger(__name__)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load [tool.pandocwalk] section from pyproject.toml file.

    Parameters
    ----------
    pyproject_path : Path
        Path to pyproject.toml file

    Returns
    -------
    dict
        Configuration dictionary from [tool.pandocwalk] section, or empty dict if not found

    Raises
    ------
    argparse.ArgumentTypeError
        If pyproject.toml cannot be parsed

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in pyproject.toml {pyproject_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading pyproject.toml {pyproject_path}: {e}") from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for, in order, ``.pandocwalk.toml``,
    ``.pandocwalk.yaml``, ``.pandocwalk.yml``, ``.pandocwalk.json`` and a
    ``pyproject.toml`` with a ``[tool.pandocwalk]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / PYPROJECT_FILENAME
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except argparse.ArgumentTypeError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover configuration file in standard locations.

    Searches the working directory and its parents first, then falls back to
    the user's home directory (dedicated config files only).

    Returns
    -------
    Path or None
        Path to discovered config file, or None if not found

    """
    config_in_parents = find_config_in_parents(start_dir)
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def _load_toml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid TOML in config file {config_path}: {e}") from e


def _load_json_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"JSON config file must contain an object, got {type(config).__name__}")
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise argparse.ArgumentTypeError(f"Invalid YAML in config file {config_path}: {e}") from e

    # An empty YAML file loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(f"YAML config file must contain a mapping, got {type(config).__name__}")
    return config


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    Examples
    --------
    >>> config = load_config_file(".pandocwalk.toml")
    >>> print(config.get("filter"))
    manuscript

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration path is not a file: {config_path}")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    try:
        if filename == PYPROJECT_FILENAME:
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            config = _load_toml_config(config_path)
        elif ext in (".yaml", ".yml"):
            config = _load_yaml_config(config_path)
        elif ext == ".json":
            config = _load_json_config(config_path)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    logger.debug("Loaded configuration from %s", config_path)
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence over base for conflicting keys.
    Nested dictionaries are merged recursively, not replaced entirely.

    Examples
    --------
    >>> base = {"filter_options": {"leanpub": {"default_format": "latex"}}, "format": ""}
    >>> override = {"filter_options": {"manuscript": {"header_level": 3}}, "format": "html"}
    >>> merge_configs(base, override)["filter_options"]
    {'leanpub': {'default_format': 'latex'}, 'manuscript': {'header_level': 3}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with proper priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (PANDOCWALK_CONFIG)
    3. Auto-discovered config file

    Parameters
    ----------
    explicit_path : str, optional
        Explicit config file path from --config flag
    env_var_path : str, optional
        Config file path from PANDOCWALK_CONFIG environment variable

    Returns
    -------
    dict
        Loaded configuration dictionary (empty dict if no config found)

    Raises
    ------
    argparse.ArgumentTypeError
        If a config file is specified but cannot be loaded

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def get_filter_options(config: Dict[str, Any], filter_name: str) -> Dict[str, Any]:
    """Return the keyword options configured for a filter.

    Raises
    ------
    argparse.ArgumentTypeError
        If ``filter_options`` or the filter's entry is not a table

    """
    all_options = config.get("filter_options", {})
    if not isinstance(all_options, dict):
        raise argparse.ArgumentTypeError(f"'filter_options' must be a table, got {type(all_options).__name__}")

    options = all_options.get(filter_name, {})
    if not isinstance(options, dict):
        raise argparse.ArgumentTypeError(
            f"'filter_options.{filter_name}' must be a table, got {type(options).__name__}"
        )
    return dict(options)


__all__ = [
    "discover_config_file",
    "find_config_in_parents",
    "get_filter_options",
    "load_config_file",
    "load_config_with_priority",
    "merge_configs",
]
