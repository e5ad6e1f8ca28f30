"""Repository endpoints (Bitbucket API 1.0)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bitbucket_rest_api.api import API, ElementCallback, normalize_params
from bitbucket_rest_api.schemas.enums import ApiVersion

from .pullrequests import PullRequests


class Repos(API):
    """Repository resource client.

    Also the entry point to the per-repository sub-resources, which share
    this family's connection and remembered owner/slug.
    """

    api_version = ApiVersion.V1

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._pullrequests: PullRequests | None = None

    @property
    def pullrequests(self) -> PullRequests:
        """Pull request endpoints for repositories of this client."""
        if self._pullrequests is None:
            self._pullrequests = PullRequests(self.connection, user=self.user, repo=self.repo)
        return self._pullrequests

    async def get(
        self,
        user_name: str | None = None,
        repo_name: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Get a single repository."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        return await self.get_request(self._path("repositories", user, repo), normalize_params(params))

    find = get

    async def branches(
        self,
        user_name: str | None = None,
        repo_name: str | None = None,
        params: Mapping[str, Any] | None = None,
        *,
        callback: ElementCallback | None = None,
    ) -> Any:
        """List the branches of a repository."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        response = await self.get_request(
            self._path("repositories", user, repo, "branches"), normalize_params(params)
        )
        return self._each(response, callback)

    async def tags(
        self,
        user_name: str | None = None,
        repo_name: str | None = None,
        params: Mapping[str, Any] | None = None,
        *,
        callback: ElementCallback | None = None,
    ) -> Any:
        """List the tags of a repository."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        response = await self.get_request(
            self._path("repositories", user, repo, "tags"), normalize_params(params)
        )
        return self._each(response, callback)
