"""Enums shared by the resource families."""

from enum import Enum


class ApiVersion(str, Enum):
    """Bitbucket API generation targeted by a request."""

    V1 = "1.0"
    V2 = "2.0"


class PullRequestState(str, Enum):
    """Pull request states accepted by the list filter.

    The client does not enforce these; any string is passed through.
    """

    OPEN = "OPEN"
    MERGED = "MERGED"
    DECLINED = "DECLINED"
