"""GitHub v3 API client."""

from .api import (
    ActivityAPI,
    GistsAPI,
    GitDataAPI,
    GitignoreAPI,
    IssuesAPI,
    MarkdownAPI,
    OrgsAPI,
    PullsAPI,
    ReposAPI,
    SearchAPI,
    UsersAPI,
)


class GitHubClient(
    ActivityAPI,
    GistsAPI,
    GitDataAPI,
    GitignoreAPI,
    IssuesAPI,
    MarkdownAPI,
    OrgsAPI,
    PullsAPI,
    ReposAPI,
    SearchAPI,
    UsersAPI,
):
    """
    Async client for the GitHub v3 REST API.

    Every request carries the access token as the ``access_token`` query
    parameter. ``calls_limit`` and ``calls_remaining`` mirror the rate-limit
    headers of the latest response; they are recorded, never acted upon.

    Usage:
        async with GitHubClient(token="...", login="octocat") as client:
            repo = await client.get_repo("Hello-World")
            issues = await client.list_repo_issues("Hello-World", state="open")
            print(client.calls_remaining)
    """

    async def __aenter__(self) -> "GitHubClient":
        await super().__aenter__()
        return self
