"""Repository commands."""

from typing import Any

import typer

from bitbucket_rest_api.cli.common import (
    RepoArgument,
    print_response,
    run_async_command,
    validate_repo,
)
from bitbucket_rest_api.client import Bitbucket

app = typer.Typer(help="Repository commands")


@app.command("get")
def get_repository(repo: RepoArgument) -> None:
    """Show a repository."""
    owner, slug = validate_repo(repo)

    async def _get() -> Any:
        async with Bitbucket() as bitbucket:
            return await bitbucket.repos.get(owner, slug)

    print_response(run_async_command(_get(), error_prefix="Get failed"))
