"""repofetch exception classes."""



class RepoFetchError(Exception):
    """Base exception for all repofetch errors."""

    def __init__(
        self, code: str, message: str, request_id: str | None = None
    ) -> None:
        self.code = code
        self.message = message
        self.request_id = request_id
        super().__init__(f"[{code}] {message}")


class ConfigurationError(RepoFetchError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class MissingOwnerError(RepoFetchError):
    """Raised when fetch options do not name an owner."""

    def __init__(self) -> None:
        super().__init__("MISSING_OWNER", "'owner' parameter is required")


class InvalidTeamContextError(RepoFetchError):
    """Raised when a team slug is given for an owner that is not an organization."""

    def __init__(self) -> None:
        super().__init__(
            "INVALID_TEAM_CONTEXT",
            "The provided 'owner' is not an organization, and so can not have teams",
        )


class AuthenticationError(RepoFetchError):
    """Raised when the token is missing or rejected."""

    pass


class AuthorizationError(RepoFetchError):
    """Raised when access is denied."""

    pass


class NotFoundError(RepoFetchError):
    """Raised when a resource is not found."""

    pass


class OwnerNotFoundError(NotFoundError):
    """Raised when an owner name does not resolve to a user or organization."""

    def __init__(self, owner: str, request_id: str | None = None) -> None:
        super().__init__(
            "OWNER_NOT_FOUND",
            f"The user/org '{owner}' could not be found",
            request_id,
        )
        self.owner = owner


class RateLimitedError(RepoFetchError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        request_id: str | None = None,
    ) -> None:
        super().__init__(code, message, request_id)
        self.retry_after = retry_after


class ValidationError(RepoFetchError):
    """Raised on validation errors."""

    pass


class ServerError(RepoFetchError):
    """Raised on server errors (5xx)."""

    pass
