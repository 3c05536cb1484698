"""Legacy search endpoints.

Each endpoint wraps its result in an envelope (``{"issues": [...]}`` and so
on); the methods return the unwrapped value.
"""

from pydantic import BaseModel

from ..base import BaseClient
from ..exceptions import InvalidArgumentError
from ..models import SearchIssue, SearchRepo, SearchUser
from ..utils import quote_segment, require


class IssueSearchResult(BaseModel):
    issues: list[SearchIssue] = []


class RepoSearchResult(BaseModel):
    repositories: list[SearchRepo] = []


class UserSearchResult(BaseModel):
    users: list[SearchUser] = []


class EmailSearchResult(BaseModel):
    user: SearchUser


class SearchAPI(BaseClient):
    async def search_issues(
        self, repo: str, state: str, keyword: str, *, owner: str | None = None
    ) -> list[SearchIssue]:
        """Search issues of one repository; ``state`` is open or closed."""
        if state not in ("open", "closed"):
            raise InvalidArgumentError(["state"], f"state must be open or closed, got {state!r}")
        owner = self._owner(owner)
        require(owner=owner, repo=repo, keyword=keyword)
        path = (
            f"/legacy/issues/search/{quote_segment(owner)}/{quote_segment(repo)}"
            f"/{state}/{quote_segment(keyword)}"
        )
        result = await self._fetch("GET", path, IssueSearchResult)
        return result.issues

    async def search_repos(
        self,
        keyword: str,
        *,
        language: str | None = None,
        start_page: int | None = None,
        sort: str | None = None,
        order: str | None = None,
    ) -> list[SearchRepo]:
        """
        Search repositories by keyword.

        Args:
            keyword: Search term
            language: Only repositories in this language
            start_page: Result page to start from
            sort: stars, forks or updated
            order: asc or desc
        """
        require(keyword=keyword)
        params = {"language": language, "start_page": start_page, "sort": sort, "order": order}
        result = await self._fetch(
            "GET", f"/legacy/repos/search/{quote_segment(keyword)}", RepoSearchResult, params=params
        )
        return result.repositories

    async def search_users(self, keyword: str, start_page: int | None = None) -> list[SearchUser]:
        require(keyword=keyword)
        result = await self._fetch(
            "GET",
            f"/legacy/user/search/{quote_segment(keyword)}",
            UserSearchResult,
            params={"start_page": start_page},
        )
        return result.users

    async def search_email(self, email: str) -> SearchUser:
        """Find the user with a public email address."""
        require(email=email)
        result = await self._fetch(
            "GET", f"/legacy/user/email/{quote_segment(email)}", EmailSearchResult
        )
        return result.user
