"""Bitbucket client exceptions.

Only local precondition failures live here. HTTP and network failures
surface as the httpx exceptions raised by the transport.
"""


class BitbucketClientError(Exception):
    """Base exception for Bitbucket client errors."""

    pass


class BitbucketValidationError(BitbucketClientError, ValueError):
    """Raised when a required parameter is missing before a request is issued."""

    def __init__(self, message: str, param: str | None = None) -> None:
        super().__init__(message)
        self.param = param


class RequiredParamsError(BitbucketValidationError):
    """Raised when the repository owner or slug cannot be resolved."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            f"Missing required parameters: {', '.join(missing)}",
            param=missing[0] if missing else None,
        )
        self.missing = missing
