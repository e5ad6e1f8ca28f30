"""Core plumbing shared by every resource family.

This module provides:
- Connection: httpx-backed request helper with per-call API version
- API: base class holding user/repo defaults and precondition checks
- normalize_params / filter_params: pure parameter helpers
- Exceptions for local precondition failures
"""

from .base import API, ElementCallback
from .connection import Connection, HttpMethod
from .exceptions import BitbucketClientError, BitbucketValidationError, RequiredParamsError
from .params import filter_params, normalize_params

__all__ = [
    # Request plumbing
    "API",
    "Connection",
    "ElementCallback",
    "HttpMethod",
    # Params
    "filter_params",
    "normalize_params",
    # Exceptions
    "BitbucketClientError",
    "BitbucketValidationError",
    "RequiredParamsError",
]
