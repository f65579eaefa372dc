"""
CLI utility functions.

Pure, stateless utility functions used across CLI commands.
"""

import json
import keyword
import logging
import tomllib
from pathlib import Path
from typing import Any

import typer

from solprep.preprocessor.shared.constants import CONFIG_KEYS, DEFAULT_DEFINE_VALUE, RESERVED_DEFINE_NAMES
from solprep.preprocessor.shared.exceptions import ConfigurationError


def parse_vars(vars_string: str | None) -> dict[str, Any]:
    """
    Parse a JSON object of defines into a dictionary.

    Args:
        vars_string: Defines in JSON format (None for empty)

    Returns:
        Dictionary containing parsed defines

    Raises:
        ConfigurationError: If the string is not a valid JSON object
    """
    if not vars_string:
        return {}

    try:
        parsed = json.loads(vars_string)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid variables format (must be valid JSON): {e}") from e

    if not isinstance(parsed, dict):
        raise ConfigurationError("Invalid variables format: expected a JSON object")
    for name in parsed:
        validate_define_name(name)
    return parsed


def validate_define_name(name: str) -> str:
    if not name.isidentifier():
        raise ConfigurationError(f"Invalid define name '{name}': must be a valid identifier")
    if keyword.iskeyword(name) or name in RESERVED_DEFINE_NAMES:
        raise ConfigurationError(f"Invalid define name '{name}': reserved word in macro expressions")
    return name


def parse_defines(define_args: list[str] | None) -> dict[str, str]:
    """
    Parse repeated KEY=VALUE define arguments.

    A bare KEY is defined as "true". Later arguments override earlier ones.

    Args:
        define_args: Raw values of the -D/--define option

    Returns:
        Dictionary of define names to string values

    Raises:
        ConfigurationError: If a name is empty, not a valid identifier, or reserved
    """
    defines: dict[str, str] = {}
    for arg in define_args or []:
        name, sep, value = arg.partition("=")
        name = validate_define_name(name.strip())
        defines[name] = value if sep else DEFAULT_DEFINE_VALUE
    return defines


def load_config(config_path: str | None) -> dict[str, Any]:
    """
    Load preprocessing options from a TOML file.

    Args:
        config_path: Path to the config file (None for no config)

    Returns:
        Dictionary of options, with "defines" always present

    Raises:
        ConfigurationError: If the file is missing, malformed, or has unknown keys
    """
    if not config_path:
        return {"defines": {}}

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(path, "rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot load config file {config_path}: {e}") from e

    unknown = sorted(set(config) - CONFIG_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown keys in {config_path}: {', '.join(unknown)}")

    defines = config.setdefault("defines", {})
    if not isinstance(defines, dict):
        raise ConfigurationError(f"'defines' in {config_path} must be a table")
    for name in defines:
        validate_define_name(name)

    return config


def merge_defines(*layers: dict[str, Any]) -> dict[str, Any]:
    """Merge define layers left to right; later layers win."""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged.update(layer)
    return merged


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: If True, set logging level to DEBUG, otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")


def report_error(error: Exception, show_traceback: bool = False) -> None:
    """
    Print an error to stderr and exit with status 1.

    Args:
        error: The exception that occurred
        show_traceback: Whether to print the traceback as well
    """
    error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
    typer.echo(f"{error_prefix}{error}", err=True)
    if show_traceback:
        import traceback
        traceback.print_exc()
    raise typer.Exit(1)
