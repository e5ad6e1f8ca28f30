"""Base class for Bitbucket resource families."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

from bitbucket_rest_api.logging import get_logger
from bitbucket_rest_api.schemas.enums import ApiVersion

from .connection import Connection
from .exceptions import BitbucketValidationError, RequiredParamsError

logger = get_logger(__name__)

ElementCallback = Callable[[Any], Any]


class API:
    """Shared plumbing for a family of remote resources.

    Each family targets one API version and remembers the last resolved
    ``user``/``repo`` pair, so later calls may omit them. That state is
    plain instance data: a single instance must not be shared between
    concurrent tasks without external locking.
    """

    api_version: ApiVersion | None = None

    def __init__(
        self,
        connection: Connection,
        *,
        user: str | None = None,
        repo: str | None = None,
    ) -> None:
        self.connection = connection
        self.user = user
        self.repo = repo

    # -------------------------------------------------------------------------
    # User / repo convenience state
    # -------------------------------------------------------------------------
    def has_user(self) -> bool:
        return _is_present(self.user)

    def has_repo(self) -> bool:
        return _is_present(self.repo)

    def _update_user_repo_params(self, user_name: str | None, repo_name: str | None) -> None:
        """Remember any non-empty owner/slug passed to a call."""
        if _is_present(user_name):
            self.user = user_name
        if _is_present(repo_name):
            self.repo = repo_name

    def _validate_user_repo_params(self) -> None:
        """Fail before any I/O if owner or slug is still unknown."""
        missing = [
            name
            for name, present in (("user", self.has_user()), ("repo", self.has_repo()))
            if not present
        ]
        if missing:
            raise RequiredParamsError(missing)

    def _resolve_user_repo(
        self, user_name: str | None, repo_name: str | None
    ) -> tuple[str, str]:
        """Update and validate the owner/slug pair.

        Returns:
            Tuple of (owner verbatim, slug lower-cased)
        """
        self._update_user_repo_params(user_name, repo_name)
        self._validate_user_repo_params()
        assert self.user is not None and self.repo is not None
        return self.user, self.repo.lower()

    @staticmethod
    def _validate_presence_of(**values: Any) -> None:
        """Raise if any named value is None or an empty string."""
        for name, value in values.items():
            if not _is_present(value):
                raise BitbucketValidationError(f"Parameter '{name}' is required", param=name)

    # -------------------------------------------------------------------------
    # Path building
    # -------------------------------------------------------------------------
    @staticmethod
    def _path(*segments: Any) -> str:
        """Join path segments, percent-encoding each one."""
        return "/" + "/".join(quote(str(segment), safe="{}") for segment in segments)

    # -------------------------------------------------------------------------
    # Requests
    # -------------------------------------------------------------------------
    async def get_request(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.connection.get_request(path, params, api_version=self.api_version)

    async def post_request(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.connection.post_request(path, params, api_version=self.api_version)

    async def put_request(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.connection.put_request(path, params, api_version=self.api_version)

    async def delete_request(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.connection.delete_request(path, params, api_version=self.api_version)

    @staticmethod
    def _each(response: Any, callback: ElementCallback | None) -> Any:
        """Feed each element of a collection response to ``callback``.

        Lists are iterated directly; 2.0 page objects are iterated over
        their ``values``. The response itself is returned untouched.
        """
        if callback is None:
            return response
        if isinstance(response, Mapping):
            elements = response.get("values") or []
        elif isinstance(response, list):
            elements = response
        else:
            logger.debug("Response of type {} is not a collection", type(response).__name__)
            elements = []
        for element in elements:
            callback(element)
        return response


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True
