"""Pull request endpoints (Bitbucket API 2.0).

Every operation resolves the owner/slug pair, checks required ids,
normalizes the parameters and issues a single request under
``/repositories/{user}/{repo}/pullrequests``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bitbucket_rest_api.api import API, ElementCallback, filter_params, normalize_params
from bitbucket_rest_api.logging import bind_pull_request, bind_repo
from bitbucket_rest_api.schemas.enums import ApiVersion

VALID_LIST_PARAMS = ("state",)
VALID_MERGE_PARAMS = ("message", "close_source_branch", "merge_strategy")


class PullRequests(API):
    """Pull request resource client.

    Usage:
        async with Bitbucket() as bitbucket:
            prs = await bitbucket.repos.pullrequests.list("owner", "slug", {"state": "OPEN"})
    """

    api_version = ApiVersion.V2

    def _base_path(self, user: str, repo: str, *segments: Any) -> str:
        return self._path("repositories", user, repo, "pullrequests", *segments)

    async def list(
        self,
        user_name: str | None = None,
        repo_name: str | None = None,
        params: Mapping[str, Any] | None = None,
        *,
        callback: ElementCallback | None = None,
    ) -> Any:
        """List pull requests on a repository.

        Args:
            user_name: Repository owner (falls back to the remembered one)
            repo_name: Repository slug (falls back to the remembered one)
            params: Query parameters; only ``state`` (OPEN, MERGED,
                DECLINED) is sent, anything else is dropped
            callback: Called with each pull request in response order

        Returns:
            The decoded response, unmodified
        """
        user, repo = self._resolve_user_repo(user_name, repo_name)
        query = filter_params(VALID_LIST_PARAMS, normalize_params(params))

        bind_repo(user, repo).debug("Listing pull requests {}", query)
        response = await self.get_request(self._base_path(user, repo), query)
        return self._each(response, callback)

    all = list

    async def get(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Get a single pull request."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id)

        return await self.get_request(
            self._base_path(user, repo, pull_request_id), normalize_params(params)
        )

    find = get

    async def activity(
        self,
        user_name: str | None = None,
        repo_name: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Get the activity feed for all pull requests of a repository."""
        user, repo = self._resolve_user_repo(user_name, repo_name)

        return await self.get_request(
            self._base_path(user, repo, "activity"), normalize_params(params)
        )

    async def approve(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Approve a pull request as the authenticated user."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id)

        bind_pull_request(user, repo, pull_request_id).info("Approving pull request")
        return await self.post_request(
            self._base_path(user, repo, pull_request_id, "approve"), normalize_params(params)
        )

    async def unapprove(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Withdraw the authenticated user's approval."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id)

        bind_pull_request(user, repo, pull_request_id).info("Removing pull request approval")
        return await self.delete_request(
            self._base_path(user, repo, pull_request_id, "approve"), normalize_params(params)
        )

    async def commits(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        params: Mapping[str, Any] | None = None,
        *,
        callback: ElementCallback | None = None,
    ) -> Any:
        """List the commits of a pull request."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id)

        response = await self.get_request(
            self._base_path(user, repo, pull_request_id, "commits"), normalize_params(params)
        )
        return self._each(response, callback)

    async def comments(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        params: Mapping[str, Any] | None = None,
        *,
        callback: ElementCallback | None = None,
    ) -> Any:
        """List the comments on a pull request."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id)

        response = await self.get_request(
            self._base_path(user, repo, pull_request_id, "comments"), normalize_params(params)
        )
        return self._each(response, callback)

    async def comment(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        comment_id: int | str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Get a single comment on a pull request."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id, comment_id=comment_id)

        return await self.get_request(
            self._base_path(user, repo, pull_request_id, "comments", comment_id),
            normalize_params(params),
        )

    async def diff(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Get the unified diff of a pull request (returned as text)."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id)

        return await self.get_request(
            self._base_path(user, repo, pull_request_id, "diff"), normalize_params(params)
        )

    async def decline(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Decline a pull request."""
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id)

        bind_pull_request(user, repo, pull_request_id).info("Declining pull request")
        return await self.post_request(
            self._base_path(user, repo, pull_request_id, "decline"), normalize_params(params)
        )

    async def merge(
        self,
        user_name: str | None,
        repo_name: str | None,
        pull_request_id: int | str | None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Merge a pull request.

        Only ``message``, ``close_source_branch`` and ``merge_strategy``
        are sent in the body.
        """
        user, repo = self._resolve_user_repo(user_name, repo_name)
        self._validate_presence_of(pull_request_id=pull_request_id)
        body = filter_params(VALID_MERGE_PARAMS, normalize_params(params))

        bind_pull_request(user, repo, pull_request_id).info("Merging pull request")
        return await self.post_request(self._base_path(user, repo, pull_request_id, "merge"), body)
