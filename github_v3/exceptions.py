"""Custom exceptions for the GitHub v3 API client."""


class GitHubAPIError(Exception):
    """Base exception for GitHub API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class InvalidArgumentError(GitHubAPIError):
    """Raised before any request is made when required arguments are blank."""

    def __init__(self, fields: list[str], message: str | None = None):
        self.fields = list(fields)
        super().__init__(
            message or f"Missing required argument(s): {', '.join(self.fields)}"
        )


class TransportError(GitHubAPIError):
    """Raised when the request could not be sent or no response arrived."""

    pass


class ValidationError(GitHubAPIError):
    """Raised when response validation fails."""

    pass


class UnexpectedStatusError(GitHubAPIError):
    """Raised when the response status is not one the endpoint accepts."""

    def __init__(self, message: str, status_code: int | None = None, status_line: str = ""):
        self.status_line = status_line
        super().__init__(message, status_code)


class ForbiddenError(UnexpectedStatusError):
    """Raised when access is forbidden (403)."""

    pass


class RateLimitError(ForbiddenError):
    """Raised when API rate limit is exceeded."""

    pass


class UnprocessableEntityError(UnexpectedStatusError):
    """Raised when GitHub rejects a well-formed request (422)."""

    pass


class ServiceUnavailableError(UnexpectedStatusError):
    """Raised when the GitHub API service is unavailable (503)."""

    pass


class MergeConflictError(GitHubAPIError):
    """Raised when a merge is refused; the message is GitHub's own."""

    pass
