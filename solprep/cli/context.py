"""
Command context for shared setup across CLI commands.
"""

import typer
from pathlib import Path
from typing import Any, Dict, List, Optional

from solprep.preprocessor.shared.constants import DEFAULT_SOURCE_EXTENSION
from solprep.preprocessor.shared.exceptions import ConfigurationError

from .utils import load_config, merge_defines, parse_defines, parse_vars, report_error, setup_logging


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: loading the config file, merging defines, resolving
    folders, and setting up logging. Command line values override the config file.
    """

    def __init__(
        self,
        source: Optional[str] = None,
        destination: Optional[str] = None,
        define: Optional[List[str]] = None,
        vars: Optional[str] = None,
        config: Optional[str] = None,
        extension: Optional[str] = None,
        include_root: Optional[str] = None,
        share_include_cache: Optional[bool] = None,
        verbose: bool = False,
    ):
        """
        Initialize command context from parameters.

        Args:
            source: Source folder
            destination: Destination folder
            define: Raw KEY=VALUE define arguments
            vars: Defines as a JSON object
            config: Path to a TOML config file
            extension: Suffix selecting source files
            include_root: Base directory for relative include paths
            share_include_cache: Share one include cache across the run
            verbose: Enable verbose output

        Raises:
            ConfigurationError: If the options are incomplete or invalid
        """
        # Set up logging
        self.verbose = verbose
        setup_logging(self.verbose)

        # Load config file, then let the command line override it
        self.config: Dict[str, Any] = load_config(config)

        source = source or self.config.get("source")
        destination = destination or self.config.get("destination")
        if not source:
            raise ConfigurationError("Missing required option: -s/--source")
        if not destination:
            raise ConfigurationError("Missing required option: -d/--destination")

        self.source_path = Path(source)
        self.destination_path = Path(destination)
        self.extension: str = extension or self.config.get("extension", DEFAULT_SOURCE_EXTENSION)

        root = include_root or self.config.get("include_root")
        self.include_root: Optional[Path] = Path(root) if root else None

        if share_include_cache is None:
            share_include_cache = bool(self.config.get("share_include_cache", False))
        self.share_include_cache = share_include_cache

        # Config defines, then --vars, then each -D
        self.defines = merge_defines(
            self.config["defines"],
            parse_vars(vars),
            parse_defines(define),
        )

    def handle_error(self, error: Exception, show_traceback: bool = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose
        report_error(error, show_traceback)

    def print_options_info(self) -> None:
        """Print the resolved options if verbose."""
        if self.verbose:
            typer.echo(f"Source: {self.source_path}")
            typer.echo(f"Destination: {self.destination_path}")
            typer.echo(f"Extension: {self.extension}")
            if self.include_root:
                typer.echo(f"Include root: {self.include_root}")
            if self.share_include_cache:
                typer.echo("Include cache shared across files")
