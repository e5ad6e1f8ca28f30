"""Test fixtures for the Bitbucket REST API client."""

from .bitbucket_responses import (
    ACTIVITY_RESPONSE,
    APPROVAL_RESPONSE,
    BRANCHES_RESPONSE,
    PULL_REQUEST_RESPONSE,
    PULL_REQUESTS_PAGE,
    REPOSITORY_RESPONSE,
    make_pull_request,
)

__all__ = [
    "ACTIVITY_RESPONSE",
    "APPROVAL_RESPONSE",
    "BRANCHES_RESPONSE",
    "PULL_REQUEST_RESPONSE",
    "PULL_REQUESTS_PAGE",
    "REPOSITORY_RESPONSE",
    "make_pull_request",
]
