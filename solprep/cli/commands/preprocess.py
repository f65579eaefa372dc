"""
Preprocess command implementation.

Expands includes and evaluates macros for every source file of a folder.
"""

import typer

from solprep.cli.context import CommandContext
from solprep.cli.utils import report_error
from solprep.preprocessor.core.directory_driver import preprocess_directory, summarize
from solprep.preprocessor.shared.exceptions import PreprocessorError


def _pluralize(count: int, singular: str, plural: str | None = None) -> str:
    if plural is None:
        plural = singular + "s"
    return plural if count != 1 else singular


def cmd_preprocess(
    source: str | None = None,
    destination: str | None = None,
    define: list[str] | None = None,
    vars: str | None = None,
    config: str | None = None,
    extension: str | None = None,
    include_root: str | None = None,
    share_include_cache: bool | None = None,
    verbose: bool = False,
) -> None:
    """
    Execute the preprocess command.

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
    """
    try:
        ctx = CommandContext(
            source=source,
            destination=destination,
            define=define,
            vars=vars,
            config=config,
            extension=extension,
            include_root=include_root,
            share_include_cache=share_include_cache,
            verbose=verbose,
        )
    except PreprocessorError as e:
        report_error(e, verbose)

    try:
        ctx.print_options_info()

        result = preprocess_directory(
            source_dir=ctx.source_path,
            destination_dir=ctx.destination_path,
            defines=ctx.defines,
            extension=ctx.extension,
            include_root=ctx.include_root,
            share_include_cache=ctx.share_include_cache,
            progress=typer.echo,
        )

        typer.echo(f"\n✅ Preprocessed {result.count} {_pluralize(result.count, 'file')} into {ctx.destination_path}")
        if ctx.verbose:
            typer.echo(f"Result: {summarize(result)}")

    except KeyboardInterrupt:
        typer.echo("\n\n⚠️  Preprocessing interrupted by user")
        raise typer.Exit(130) from None
    except PreprocessorError as e:
        typer.echo(f"\n❌ Preprocessing failed: {e}", err=True)
        ctx.handle_error(e)
    except Exception as e:
        typer.echo(f"\n❌ Unexpected error: {e}", err=True)
        ctx.handle_error(e)
