"""Layered TOML configuration for the passport form.

Settings are read from ``default.toml`` and, when present, from a file named
after the active environment, merged on top. Environment variables are
applied afterwards by ``Settings`` itself.
"""

import os
import tomllib
from functools import reduce
from pathlib import Path
from typing import Any

CONFIG_DIR_VAR = "PASSPORT_CONFIG_DIR"
ENVIRONMENT_VAR = "PASSPORT_ENV"
DEFAULT_ENVIRONMENT = "development"
BASE_FILE = "default.toml"

# How many directories, starting at the working directory, are searched
SEARCH_DEPTH = 5


def get_config_dir(start: Path | None = None) -> Path:
    """Locate the directory holding the TOML layers.

    ``PASSPORT_CONFIG_DIR`` wins and must exist. Otherwise the nearest
    ``config/`` directory at or above ``start`` (the working directory by
    default) is used, falling back to a relative ``config``.

    Raises:
        FileNotFoundError: If PASSPORT_CONFIG_DIR names a missing directory
    """
    configured = os.environ.get(CONFIG_DIR_VAR)
    if configured:
        path = Path(configured)
        if not path.is_dir():
            raise FileNotFoundError(f"{CONFIG_DIR_VAR} does not exist: {configured}")
        return path

    start = start or Path.cwd()
    for directory in [start, *start.parents][:SEARCH_DEPTH]:
        if (directory / "config").is_dir():
            return directory / "config"
    return Path("config")


def get_environment() -> str:
    """Name of the environment layer, from PASSPORT_ENV."""
    return os.environ.get(ENVIRONMENT_VAR) or DEFAULT_ENVIRONMENT


def load_toml(file_path: Path) -> dict[str, Any]:
    """Parse one TOML layer.

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the TOML syntax is invalid
    """
    if not file_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    with file_path.open("rb") as f:
        return tomllib.load(f)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``.

    Tables present on both sides are merged key by key; anything else in
    ``override`` replaces the base entry. Neither input is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def config_files(config_dir: Path, environment: str) -> list[Path]:
    """List the TOML layers to load, lowest precedence first.

    Raises:
        FileNotFoundError: If the base file is missing
    """
    base = config_dir / BASE_FILE
    if not base.is_file():
        raise FileNotFoundError(
            f"Base configuration not found: {base}. "
            f"Create {BASE_FILE} there or set {CONFIG_DIR_VAR}."
        )
    layers = [base]
    environment_file = config_dir / f"{environment}.toml"
    if environment_file.is_file():
        layers.append(environment_file)
    return layers


def load_config(
    config_dir: Path | None = None,
    environment: str | None = None,
) -> dict[str, Any]:
    """Load and merge the TOML layers.

    Args:
        config_dir: Directory of the layers (looked up when omitted)
        environment: Environment layer name (PASSPORT_ENV when omitted)

    Returns:
        Merged configuration dictionary
    """
    files = config_files(
        config_dir or get_config_dir(),
        environment or get_environment(),
    )
    return reduce(deep_merge, map(load_toml, files), {})
