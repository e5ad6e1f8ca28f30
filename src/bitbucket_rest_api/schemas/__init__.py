"""Shared enums and identifier helpers."""

from .enums import ApiVersion, PullRequestState
from .repository import parse_repo_string

__all__ = [
    "ApiVersion",
    "PullRequestState",
    "parse_repo_string",
]
