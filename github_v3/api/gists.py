"""Gists and gist comments."""

from datetime import datetime

from ..base import BaseClient
from ..exceptions import InvalidArgumentError
from ..models import Comment, Gist
from ..payloads import NewGist
from ..utils import iso_timestamp, quote_segment, require


class GistsAPI(BaseClient):
    def _gist_path(self, gist_id: str, suffix: str = "") -> str:
        require(gist_id=gist_id)
        return f"/gists/{quote_segment(gist_id)}{suffix}"

    async def list_gists(self, since: datetime | None = None) -> list[Gist]:
        """List the authenticated user's gists, or public gists when anonymous."""
        return await self._fetch("GET", "/gists", list[Gist], params={"since": iso_timestamp(since)})

    async def list_starred_gists(self, since: datetime | None = None) -> list[Gist]:
        return await self._fetch(
            "GET", "/gists/starred", list[Gist], params={"since": iso_timestamp(since)}
        )

    async def list_public_gists(self, since: datetime | None = None) -> list[Gist]:
        return await self._fetch(
            "GET", "/gists/public", list[Gist], params={"since": iso_timestamp(since)}
        )

    async def get_gist(self, gist_id: str) -> Gist:
        return await self._fetch("GET", self._gist_path(gist_id), Gist)

    async def create_gist(self, gist: NewGist) -> Gist:
        """
        Create a gist.

        Raises:
            InvalidArgumentError: When the gist has no files
        """
        if not gist.files:
            raise InvalidArgumentError(["files"])
        return await self._fetch("POST", "/gists", Gist, expected=201, body=gist)

    async def edit_gist(self, gist_id: str, gist: NewGist) -> Gist:
        """Edit a gist. Files absent from ``gist.files`` are left untouched."""
        return await self._fetch("PATCH", self._gist_path(gist_id), Gist, body=gist)

    async def star_gist(self, gist_id: str) -> bool:
        return await self._check("PUT", self._gist_path(gist_id, "/star"), false_status=None)

    async def unstar_gist(self, gist_id: str) -> bool:
        """Unstar a gist. Returns False if the gist was not starred."""
        return await self._check("DELETE", self._gist_path(gist_id, "/star"))

    async def is_gist_starred(self, gist_id: str) -> bool:
        return await self._check("GET", self._gist_path(gist_id, "/star"))

    async def fork_gist(self, gist_id: str) -> Gist:
        return await self._fetch("POST", self._gist_path(gist_id, "/forks"), Gist, expected=201)

    async def delete_gist(self, gist_id: str) -> bool:
        return await self._check("DELETE", self._gist_path(gist_id), false_status=None)

    # Comments

    async def list_gist_comments(self, gist_id: str) -> list[Comment]:
        return await self._fetch("GET", self._gist_path(gist_id, "/comments"), list[Comment])

    async def get_gist_comment(self, gist_id: str, comment_id: int) -> Comment:
        require(comment_id=comment_id)
        return await self._fetch(
            "GET", self._gist_path(gist_id, f"/comments/{comment_id}"), Comment
        )

    async def create_gist_comment(self, gist_id: str, body: str) -> Comment:
        require(body=body)
        return await self._fetch(
            "POST",
            self._gist_path(gist_id, "/comments"),
            Comment,
            expected=201,
            body={"body": body},
        )

    async def edit_gist_comment(self, gist_id: str, comment_id: int, body: str) -> Comment:
        require(comment_id=comment_id, body=body)
        return await self._fetch(
            "PATCH",
            self._gist_path(gist_id, f"/comments/{comment_id}"),
            Comment,
            body={"body": body},
        )

    async def delete_gist_comment(self, gist_id: str, comment_id: int) -> bool:
        require(comment_id=comment_id)
        return await self._check(
            "DELETE", self._gist_path(gist_id, f"/comments/{comment_id}"), false_status=None
        )
