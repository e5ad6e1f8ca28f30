"""Top-level Bitbucket client."""

from __future__ import annotations

import httpx

from bitbucket_rest_api.api import Connection
from bitbucket_rest_api.config import Settings, get_settings
from bitbucket_rest_api.logging import get_logger
from bitbucket_rest_api.repos import PullRequests, Repos

logger = get_logger(__name__)


class Bitbucket:
    """Entry point owning the connection and client-wide defaults.

    Usage:
        async with Bitbucket(user="owner", repo="slug") as bitbucket:
            prs = await bitbucket.repos.pullrequests.list()

    The ``user``/``repo`` defaults seed each resource family when it is
    first accessed. After that each family remembers the last pair it
    resolved on its own: ``repos.get("bob", "two")`` does not change the
    pair that a later ``pullrequests.activity()`` falls back to. Pass the
    owner and slug explicitly when switching repositories. Share an
    instance between concurrent tasks only with external locking.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        user: str | None = None,
        repo: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Application settings. Defaults to get_settings().
            user: Default repository owner (overrides settings.default_user)
            repo: Default repository slug (overrides settings.default_repo)
            transport: Optional httpx transport for the connection
        """
        self.settings = settings or get_settings()
        self.user = user or self.settings.default_user
        self.repo = repo or self.settings.default_repo
        self.connection = Connection.from_settings(self.settings, transport=transport)
        self._repos: Repos | None = None

        if not self.settings.has_credentials:
            logger.debug("No Bitbucket credentials configured; requests are anonymous")

    @property
    def repos(self) -> Repos:
        """Repository endpoints."""
        if self._repos is None:
            self._repos = Repos(self.connection, user=self.user, repo=self.repo)
        return self._repos

    @property
    def pullrequests(self) -> PullRequests:
        """Shortcut for ``repos.pullrequests``."""
        return self.repos.pullrequests

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.connection.close()

    async def __aenter__(self) -> Bitbucket:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()
