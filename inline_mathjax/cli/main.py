import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import typer

from inline_mathjax.config import (
    DEFAULT_FILE_PATTERN,
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_LEVEL_ENV_VAR,
    MDBOOK_VERSION,
    TOOL_VERSION
)
from inline_mathjax.exceptions import InlineMathjaxError
from inline_mathjax.files import convert_paths
from inline_mathjax.preprocessor import InlineMathjax, RewriteOptions
from inline_mathjax.protocol import handle_preprocessing

app = typer.Typer(
    help="A mdbook preprocessor which transforms inline mathjax delimiters into mdbook-supported ones.",
    add_completion=False
)


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; stdout is reserved for the book."""
    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level)


def version_callback(value: bool):
    if value:
        typer.echo(f"mdbook-inline-mathjax {TOOL_VERSION} (mdbook {MDBOOK_VERSION})")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show the version and exit"
    )
):
    """Without a subcommand, read a book from stdin and write it to stdout."""
    setup_logging(verbose)
    if ctx.invoked_subcommand is not None:
        return

    try:
        handle_preprocessing(InlineMathjax(), sys.stdin, sys.stdout)
    except InlineMathjaxError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)


@app.command()
def supports(renderer: str = typer.Argument(..., help="Name of the renderer")):
    """Check whether a renderer is supported by this preprocessor."""
    supported = InlineMathjax().supports_renderer(renderer)
    # Signal whether the renderer is supported by exiting with 0 or 1
    raise typer.Exit(code=0 if supported else 1)


@app.command()
def convert(
    paths: List[Path] = typer.Argument(..., help="Markdown files or directories to convert"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Write results here instead of in place"),
    pattern: str = typer.Option(DEFAULT_FILE_PATTERN, help="Glob pattern for files inside directories"),
    markdown_escape: bool = typer.Option(False, help="Double the markers' backslashes for a later markdown pass"),
    progress: bool = typer.Option(True, help="Show a progress bar")
):
    """Rewrite inline math in Markdown files outside of mdbook."""
    options = RewriteOptions.from_config({"markdown-escape": markdown_escape})
    failed = False

    for path in paths:
        if not path.exists():
            typer.echo(f"Error: '{path}' does not exist.", err=True)
            failed = True
            continue
        try:
            changed = convert_paths([path], output_dir, pattern, options, show_progress=progress)
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"Error processing {path}: {e}", err=True)
            failed = True
            continue
        typer.echo(f"{path}: {len(changed)} file(s) changed")

    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
