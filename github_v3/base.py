"""Request/response plumbing shared by every endpoint mixin."""

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Any
from urllib.parse import quote_plus

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .config import settings
from .exceptions import (
    ForbiddenError,
    RateLimitError,
    ServiceUnavailableError,
    TransportError,
    UnexpectedStatusError,
    UnprocessableEntityError,
    ValidationError,
)
from .utils import encode_query, quote_segment, require

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def server_message(response: httpx.Response) -> str | None:
    """Return the ``message`` field of a JSON error body, if there is one."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


class BaseClient:
    """
    Session state and HTTP plumbing for the GitHub v3 API.

    Holds the access token, the acting login and the last rate-limit counters
    seen in a response. Endpoint mixins build paths and call ``_fetch`` or
    ``_check``; nothing here knows about individual endpoints.
    """

    def __init__(
        self,
        token: str | None = None,
        login: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            token: Access token (defaults to settings.token)
            login: Login of the authenticated user (defaults to settings.login)
            base_url: Base URL for GitHub API (defaults to settings.api_base_url)
            timeout: Request timeout in seconds (defaults to settings.timeout)
            headers: Additional headers to include in requests
            transport: Custom httpx transport, e.g. for testing or proxies
        """
        self.token = settings.token if token is None else token
        self.login = settings.login if login is None else login
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.timeout
        self.transport = transport

        self.headers = {
            "Accept": settings.accept,
            "User-Agent": settings.user_agent,
        }
        if headers:
            self.headers.update(headers)

        # Counters are written by whichever response arrives last.
        self.calls_limit = settings.default_calls_limit
        self.calls_remaining = settings.default_calls_limit

        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        """Enter async context manager."""
        self._client = httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout,
            transport=self.transport,
        )
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager and cleanup resources."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client. Alternative to using context manager."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with GitHubClient() as client:' "
                "or call 'await client.__aenter__()'"
            )
        return self._client

    def build_url(self, path: str) -> str:
        """
        Turn an API path into an absolute URL carrying the access token.

        The path is used verbatim; segments must already be percent-encoded.

        Example:
            >>> client.build_url("/user/repos?type=owner")
            'https://api.github.com/user/repos?type=owner&access_token=...'
        """
        separator = "&" if "?" in path else "?"
        return f"{self.base_url}{path}{separator}access_token={quote_plus(self.token)}"

    @staticmethod
    def encode_body(payload: Any) -> bytes:
        """Serialize a request body to JSON. ``None`` fields are omitted."""
        if isinstance(payload, BaseModel):
            return payload.model_dump_json(exclude_none=True, by_alias=True).encode()
        if isinstance(payload, Mapping):
            payload = {key: value for key, value in payload.items() if value is not None}
        return json.dumps(payload).encode()

    def update_rate_limit(self, response: httpx.Response) -> None:
        """Record X-RateLimit-* headers; leave the counters alone if either is unusable."""
        try:
            limit = int(response.headers["X-RateLimit-Limit"])
            remaining = int(response.headers["X-RateLimit-Remaining"])
        except (KeyError, ValueError):
            return
        self.calls_limit = limit
        self.calls_remaining = remaining
        logger.debug(f"Rate limit: {remaining}/{limit} calls remaining")

    @staticmethod
    def read_response(response: httpx.Response, result_type: Any) -> Any:
        """
        Decode a JSON response body into ``result_type``.

        Raises:
            ValidationError: When the body is not JSON or does not fit the type
        """
        try:
            return _adapter(result_type).validate_json(response.content)
        except PydanticValidationError as e:
            raise ValidationError(
                message=f"Failed to validate response: {str(e)}",
                status_code=response.status_code,
            ) from e

    def unexpected_status(self, response: httpx.Response) -> UnexpectedStatusError:
        """Build the error for a status the endpoint does not accept."""
        status_line = f"{response.status_code} {response.reason_phrase}".strip()
        message = f"Unexpected status from GitHub: {status_line}"
        detail = server_message(response)
        if detail:
            message = f"{message} ({detail})"

        error_class = UnexpectedStatusError
        if response.status_code == 403:
            if response.headers.get("X-RateLimit-Remaining") == "0":
                error_class = RateLimitError
            else:
                error_class = ForbiddenError
        elif response.status_code == 422:
            error_class = UnprocessableEntityError
        elif response.status_code == 503:
            error_class = ServiceUnavailableError

        return error_class(
            message=message,
            status_code=response.status_code,
            status_line=status_line,
        )

    def _owner(self, owner: str | None) -> str:
        return owner or self.login

    def _repo_path(self, owner: str | None, repo: str, suffix: str = "") -> str:
        """Validate owner/repo and return ``/repos/{owner}/{repo}{suffix}``."""
        owner = self._owner(owner)
        require(owner=owner, repo=repo)
        return f"/repos/{quote_segment(owner)}/{quote_segment(repo)}{suffix}"

    async def _send(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        content_type: str = "application/json",
    ) -> httpx.Response:
        """Perform one request and return the response whatever its status."""
        client = self._ensure_client()

        if params:
            query = encode_query(params)
            if query:
                path = f"{path}{'&' if '?' in path else '?'}{query}"

        request_headers = {}
        content = None
        if body is not None:
            content = self.encode_body(body)
            request_headers["Content-Type"] = content_type

        try:
            response = await client.request(
                method,
                self.build_url(path),
                content=content,
                headers=request_headers,
            )
        except httpx.RequestError as e:
            raise TransportError(message=f"Request error occurred: {str(e)}") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        self.update_rate_limit(response)
        return response

    async def _fetch(
        self,
        method: str,
        path: str,
        result_type: Any = None,
        expected: int | tuple[int, ...] = 200,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        content_type: str = "application/json",
    ) -> Any:
        """
        Perform a request, require one of the ``expected`` statuses and decode.

        Returns None when ``result_type`` is None.
        """
        if isinstance(expected, int):
            expected = (expected,)
        response = await self._send(method, path, params, body, content_type)
        if response.status_code not in expected:
            raise self.unexpected_status(response)
        if result_type is None:
            return None
        return self.read_response(response, result_type)

    async def _check(
        self,
        method: str,
        path: str,
        true_status: int = 204,
        false_status: int | None = 404,
        params: Mapping[str, Any] | None = None,
        body: Any = None,
        content_type: str = "application/json",
    ) -> bool:
        """
        Map a status-only response to a boolean.

        ``true_status`` gives True, ``false_status`` gives False, anything
        else raises. Pass ``false_status=None`` for actions that only succeed.
        """
        response = await self._send(method, path, params, body, content_type)
        if response.status_code == true_status:
            return True
        if false_status is not None and response.status_code == false_status:
            return False
        raise self.unexpected_status(response)
