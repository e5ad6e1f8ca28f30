"""Main CLI application for the Bitbucket REST API client."""

from typing import Annotated

import typer
from rich.console import Console

from bitbucket_rest_api import __version__
from bitbucket_rest_api.cli import pullrequests as pullrequests_cmd
from bitbucket_rest_api.cli import repos as repos_cmd
from bitbucket_rest_api.config import get_settings
from bitbucket_rest_api.logging import setup_logging

app = typer.Typer(
    name="bitbucket-rest",
    help="Query repositories and pull requests on Bitbucket.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"bitbucket-rest version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-error output (WARNING level).",
        ),
    ] = False,
) -> None:
    """Bitbucket REST API client."""
    setup_logging(level=get_settings().log_level, verbose=verbose, quiet=quiet)


app.add_typer(pullrequests_cmd.app, name="pullrequests")
app.add_typer(repos_cmd.app, name="repos")


if __name__ == "__main__":
    app()
