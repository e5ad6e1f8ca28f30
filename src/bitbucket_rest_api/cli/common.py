"""Common CLI option factories and helpers.

It provides:
- `run_async_command`: Unified async execution with error handling for CLI commands
- `print_response`: JSON rendering of decoded API responses
- Repository argument type alias and validation
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import Annotated, Any, TypeVar

import httpx
import typer
from rich.console import Console

from bitbucket_rest_api.api import BitbucketValidationError
from bitbucket_rest_api.schemas import parse_repo_string

# Shared console instance for CLI output
console = Console()

T = TypeVar("T")


def run_async_command(
    coro: Coroutine[object, object, T],
    *,
    error_prefix: str = "Error",
) -> T:
    """Execute async code from synchronous CLI command with unified error handling.

    Catches exceptions, prints user-friendly error messages, and exits with code 1.

    Args:
        coro: Async coroutine to execute
        error_prefix: Prefix for error messages (default: "Error")

    Returns:
        Result from the coroutine

    Raises:
        typer.Exit: Re-raised from deliberate exits, or raised with code 1 on error
    """
    try:
        return asyncio.run(coro)
    except typer.Exit:
        raise
    except BitbucketValidationError as e:
        console.print(f"[red]{error_prefix}:[/red] {e}")
        raise typer.Exit(1) from None
    except httpx.HTTPStatusError as e:
        console.print(
            f"[red]{error_prefix}:[/red] HTTP {e.response.status_code} "
            f"for {e.request.method} {e.request.url}"
        )
        raise typer.Exit(1) from None
    except httpx.HTTPError as e:
        console.print(f"[red]{error_prefix}:[/red] {e}")
        raise typer.Exit(1) from None


def print_response(response: Any) -> None:
    """Render a decoded response: JSON for structured data, plain text otherwise."""
    if response is None:
        console.print("[green]OK[/green]")
    elif isinstance(response, str):
        console.print(response, markup=False, highlight=False)
    else:
        console.print_json(data=response)


RepoArgument = Annotated[
    str,
    typer.Argument(
        help="Repository in owner/slug format (e.g., atlassian/python-bitbucket)",
    ),
]
"""Required positional repository argument.

Usage:
    def get(repo: RepoArgument, pull_request_id: int) -> None:
"""


def validate_repo(repo: str) -> tuple[str, str]:
    """Parse and validate a single repository string.

    Args:
        repo: Repository string in owner/slug format

    Returns:
        Tuple of (owner, slug)

    Raises:
        typer.Exit(1): If format is invalid
    """
    try:
        return parse_repo_string(repo)
    except ValueError:
        console.print("[red]Error:[/red] Repository must be in owner/slug format")
        raise typer.Exit(1) from None
