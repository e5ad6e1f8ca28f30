"""Shared HTTP request helper built on httpx.

Every resource family issues its requests through a single
:class:`Connection`, which owns the base endpoint, credentials and the
lazily-created ``httpx.AsyncClient``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

import httpx

from bitbucket_rest_api.config import Settings, get_settings, strip_version_segment
from bitbucket_rest_api.logging import get_logger
from bitbucket_rest_api.schemas.enums import ApiVersion

logger = get_logger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

# Verbs whose parameters travel in the query string rather than the body
_QUERY_METHODS = frozenset({"GET", "DELETE"})


class Connection:
    """HTTP request helper configured with a base endpoint.

    The API version is composed into the URL as its own path segment,
    so one connection serves both the 1.0 and 2.0 resource families.

    Usage:
        async with Connection(endpoint="https://api.bitbucket.org") as conn:
            repo = await conn.get_request("/repositories/owner/slug")
    """

    def __init__(
        self,
        endpoint: str = "https://api.bitbucket.org",
        *,
        api_version: ApiVersion | str = ApiVersion.V1,
        username: str = "",
        password: str = "",
        token: str = "",
        timeout_s: float = 20.0,
        user_agent: str = "bitbucket-rest-api/0.1",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the connection.

        Args:
            endpoint: Base URL; a trailing version segment such as '/1.0'
                is dropped so the per-call version replaces it
            api_version: Version used when a request does not override it
            username: Username for HTTP basic auth
            password: App password for HTTP basic auth
            token: OAuth access token; takes precedence over basic auth
            timeout_s: Request timeout in seconds
            user_agent: User-Agent header value
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self.endpoint = strip_version_segment(endpoint)
        self.api_version = ApiVersion(api_version)
        self._username = username
        self._password = password
        self._token = token
        self._timeout_s = timeout_s
        self._user_agent = user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> Connection:
        """Build a connection from application settings."""
        settings = settings or get_settings()
        return cls(
            settings.bitbucket_endpoint,
            api_version=settings.bitbucket_api_version,
            username=settings.bitbucket_username,
            password=settings.bitbucket_password,
            token=settings.bitbucket_token,
            timeout_s=settings.http.timeout_s,
            user_agent=settings.http.user_agent,
            transport=transport,
        )

    @property
    def _http(self) -> httpx.AsyncClient:
        """Get or create the httpx client instance."""
        if self._client is None:
            headers = {
                "Accept": "application/json",
                "User-Agent": self._user_agent,
            }
            auth: httpx.Auth | None = None
            if self._token:
                headers["Authorization"] = f"Bearer {self._token}"
            elif self._username and self._password:
                auth = httpx.BasicAuth(self._username, self._password)
            self._client = httpx.AsyncClient(
                headers=headers,
                auth=auth,
                timeout=self._timeout_s,
                transport=self._transport,
            )
        return self._client

    def build_url(self, path: str, api_version: ApiVersion | str | None = None) -> str:
        """Compose ``{endpoint}/{version}/{path}``."""
        version = ApiVersion(api_version) if api_version is not None else self.api_version
        return f"{self.endpoint}/{version.value}/{path.lstrip('/')}"

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        api_version: ApiVersion | str | None = None,
    ) -> Any:
        """Issue one HTTP request and return the decoded body.

        GET and DELETE send ``params`` as the query string; POST and PUT
        send them as a JSON body. Non-2xx responses raise
        ``httpx.HTTPStatusError`` and network failures raise
        ``httpx.TransportError``; neither is caught here.

        Returns:
            Decoded JSON, the raw text for non-JSON bodies, or None when
            the response has no content.
        """
        url = self.build_url(path, api_version)
        params = dict(params or {})

        logger.debug("{} {} params={}", method, url, params)
        if method in _QUERY_METHODS:
            response = await self._http.request(method, url, params=params or None)
        else:
            response = await self._http.request(method, url, json=params or None)
        logger.debug("{} {} -> {}", method, url, response.status_code)

        response.raise_for_status()
        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            return response.json()
        return response.text

    async def get_request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        api_version: ApiVersion | str | None = None,
    ) -> Any:
        return await self.request("GET", path, params, api_version=api_version)

    async def post_request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        api_version: ApiVersion | str | None = None,
    ) -> Any:
        return await self.request("POST", path, params, api_version=api_version)

    async def put_request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        api_version: ApiVersion | str | None = None,
    ) -> Any:
        return await self.request("PUT", path, params, api_version=api_version)

    async def delete_request(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        *,
        api_version: ApiVersion | str | None = None,
    ) -> Any:
        return await self.request("DELETE", path, params, api_version=api_version)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Connection:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()
