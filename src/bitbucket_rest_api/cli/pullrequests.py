"""Pull request commands."""

from typing import Any

import typer

from bitbucket_rest_api.cli.common import (
    RepoArgument,
    print_response,
    run_async_command,
    validate_repo,
)
from bitbucket_rest_api.client import Bitbucket
from bitbucket_rest_api.schemas import PullRequestState

app = typer.Typer(help="Pull request commands")


@app.command("list")
def list_pull_requests(
    repo: RepoArgument,
    state: PullRequestState | None = typer.Option(
        None,
        "--state",
        "-s",
        help="Only pull requests in this state",
        case_sensitive=False,
    ),
) -> None:
    """List pull requests on a repository.

    Examples:
        bitbucket-rest pullrequests list atlassian/python-bitbucket
        bitbucket-rest pullrequests list atlassian/python-bitbucket --state MERGED
    """
    owner, slug = validate_repo(repo)
    params = {"state": state} if state else {}

    async def _list() -> Any:
        async with Bitbucket() as bitbucket:
            return await bitbucket.pullrequests.list(owner, slug, params)

    print_response(run_async_command(_list(), error_prefix="List failed"))


@app.command("get")
def get_pull_request(
    repo: RepoArgument,
    pull_request_id: str = typer.Argument(help="Pull request id"),
) -> None:
    """Show a single pull request."""
    owner, slug = validate_repo(repo)

    async def _get() -> Any:
        async with Bitbucket() as bitbucket:
            return await bitbucket.pullrequests.get(owner, slug, pull_request_id)

    print_response(run_async_command(_get(), error_prefix="Get failed"))


@app.command("activity")
def pull_request_activity(repo: RepoArgument) -> None:
    """Show the pull request activity feed of a repository."""
    owner, slug = validate_repo(repo)

    async def _activity() -> Any:
        async with Bitbucket() as bitbucket:
            return await bitbucket.pullrequests.activity(owner, slug)

    print_response(run_async_command(_activity(), error_prefix="Activity failed"))


@app.command("approve")
def approve_pull_request(
    repo: RepoArgument,
    pull_request_id: str = typer.Argument(help="Pull request id"),
) -> None:
    """Approve a pull request."""
    owner, slug = validate_repo(repo)

    async def _approve() -> Any:
        async with Bitbucket() as bitbucket:
            return await bitbucket.pullrequests.approve(owner, slug, pull_request_id)

    print_response(run_async_command(_approve(), error_prefix="Approve failed"))


@app.command("unapprove")
def unapprove_pull_request(
    repo: RepoArgument,
    pull_request_id: str = typer.Argument(help="Pull request id"),
) -> None:
    """Withdraw approval of a pull request."""
    owner, slug = validate_repo(repo)

    async def _unapprove() -> Any:
        async with Bitbucket() as bitbucket:
            return await bitbucket.pullrequests.unapprove(owner, slug, pull_request_id)

    print_response(run_async_command(_unapprove(), error_prefix="Unapprove failed"))
