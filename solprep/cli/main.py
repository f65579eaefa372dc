"""
solprep CLI Main Module

Command-line interface for the solprep source preprocessor.
"""

import typer

from solprep.cli.commands import cmd_preprocess

app = typer.Typer(
    name="solprep",
    help="Simple text preprocessor: expands @@include('<file>') directives and evaluates defines.",
    add_completion=False,
    rich_markup_mode="rich",
)


# Common option definitions
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
VARS_OPTION = typer.Option(None, "--vars", help="Defines as a JSON object")
DEFINE_OPTION = typer.Option(
    None, "-D", "--define", help="Define KEY=VALUE (KEY alone means true). Can be used multiple times."
)


@app.command()
def preprocess(
    source: str | None = typer.Option(None, "-s", "--source", help="Source Dir"),
    destination: str | None = typer.Option(None, "-d", "--destination", help="Destination Dir"),
    define: list[str] | None = DEFINE_OPTION,
    vars: str | None = VARS_OPTION,
    config: str | None = typer.Option(None, "-c", "--config", help="TOML file with options and a [defines] table"),
    extension: str | None = typer.Option(None, "-e", "--extension", help="Suffix of the files to process (default: .sol)"),
    include_root: str | None = typer.Option(
        None, "--include-root", help="Base directory for relative include paths (default: current directory)"
    ),
    share_include_cache: bool | None = typer.Option(
        None,
        "--share-include-cache/--no-share-include-cache",
        help="Read each include file once per run instead of once per source file",
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Preprocess every source file of a folder into a destination folder."""
    cmd_preprocess(
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


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
