"""Repository resource families."""

from .pullrequests import PullRequests
from .repos import Repos

__all__ = [
    "PullRequests",
    "Repos",
]
