"""Async client for the Bitbucket REST API."""

__version__ = "0.1.0"

from .api import (
    API,
    BitbucketClientError,
    BitbucketValidationError,
    Connection,
    RequiredParamsError,
    filter_params,
    normalize_params,
)
from .client import Bitbucket
from .repos import PullRequests, Repos
from .schemas import ApiVersion, PullRequestState

__all__ = [
    "__version__",
    # Client
    "Bitbucket",
    # Resource families
    "API",
    "PullRequests",
    "Repos",
    # Transport
    "Connection",
    # Params
    "filter_params",
    "normalize_params",
    # Enums
    "ApiVersion",
    "PullRequestState",
    # Exceptions
    "BitbucketClientError",
    "BitbucketValidationError",
    "RequiredParamsError",
]
