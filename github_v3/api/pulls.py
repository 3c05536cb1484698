"""Pull requests and review comments."""

from datetime import datetime

from ..base import BaseClient, server_message
from ..exceptions import InvalidArgumentError, MergeConflictError
from ..models import Commit, CommitFile, PullComment, PullMerge, PullRequest
from ..payloads import NewPullComment, NewPullRequest
from ..utils import iso_timestamp, require


class PullsAPI(BaseClient):
    async def list_pull_requests(
        self, repo: str, *, owner: str | None = None, state: str | None = None
    ) -> list[PullRequest]:
        """List pull requests; ``state`` is open (GitHub's default) or closed."""
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, "/pulls"),
            list[PullRequest],
            params={"state": state},
        )

    async def get_pull_request(
        self, repo: str, number: int, *, owner: str | None = None
    ) -> PullRequest:
        require(number=number)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/pulls/{number}"), PullRequest
        )

    async def create_pull_request(
        self, repo: str, pull: NewPullRequest, *, owner: str | None = None
    ) -> PullRequest:
        """
        Open a pull request from ``pull.head`` into ``pull.base``.

        Either ``pull.title`` or ``pull.issue`` must be set; with ``issue`` an
        existing issue is converted into the pull request.
        """
        require(base=pull.base, head=pull.head)
        if pull.issue is None:
            if not (pull.title or "").strip():
                raise InvalidArgumentError(["title"], "Either title or issue is required")
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/pulls"),
            PullRequest,
            expected=201,
            body=pull,
        )

    async def edit_pull_request(
        self,
        repo: str,
        number: int,
        *,
        owner: str | None = None,
        title: str | None = None,
        body: str | None = None,
        state: str | None = None,
    ) -> PullRequest:
        require(number=number)
        return await self._fetch(
            "PATCH",
            self._repo_path(owner, repo, f"/pulls/{number}"),
            PullRequest,
            body={"title": title, "body": body, "state": state},
        )

    async def list_pull_commits(
        self, repo: str, number: int, *, owner: str | None = None
    ) -> list[Commit]:
        require(number=number)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/pulls/{number}/commits"), list[Commit]
        )

    async def list_pull_files(
        self, repo: str, number: int, *, owner: str | None = None
    ) -> list[CommitFile]:
        require(number=number)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/pulls/{number}/files"), list[CommitFile]
        )

    async def is_pull_merged(self, repo: str, number: int, *, owner: str | None = None) -> bool:
        require(number=number)
        return await self._check("GET", self._repo_path(owner, repo, f"/pulls/{number}/merge"))

    async def merge_pull_request(
        self,
        repo: str,
        number: int,
        commit_message: str | None = None,
        *,
        owner: str | None = None,
    ) -> PullMerge:
        """
        Merge a pull request ("Merge Button").

        Returns:
            PullMerge with ``merged`` True, or False when GitHub answered 405
            (the pull request is not mergeable)

        Raises:
            MergeConflictError: When the head moved or conflicts (409)
        """
        require(number=number)
        response = await self._send(
            "PUT",
            self._repo_path(owner, repo, f"/pulls/{number}/merge"),
            body={"commit_message": commit_message},
        )
        if response.status_code in (200, 405):
            return self.read_response(response, PullMerge)
        if response.status_code == 409:
            raise MergeConflictError(
                message=server_message(response) or "Merge conflict",
                status_code=409,
            )
        raise self.unexpected_status(response)

    # Review comments

    async def list_pull_comments(
        self, repo: str, number: int, *, owner: str | None = None
    ) -> list[PullComment]:
        require(number=number)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/pulls/{number}/comments"), list[PullComment]
        )

    async def list_repo_pull_comments(
        self,
        repo: str,
        *,
        owner: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: datetime | None = None,
    ) -> list[PullComment]:
        params = {"sort": sort, "direction": direction, "since": iso_timestamp(since)}
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, "/pulls/comments"),
            list[PullComment],
            params=params,
        )

    async def get_pull_comment(
        self, repo: str, comment_id: int, *, owner: str | None = None
    ) -> PullComment:
        require(comment_id=comment_id)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/pulls/comments/{comment_id}"), PullComment
        )

    async def create_pull_comment(
        self, repo: str, number: int, comment: NewPullComment, *, owner: str | None = None
    ) -> PullComment:
        """
        Comment on a pull request diff.

        A new comment needs ``commit_id``, ``path`` and ``position``; a reply
        only needs ``in_reply_to``.
        """
        require(number=number, body=comment.body)
        if comment.in_reply_to is None:
            require(commit_id=comment.commit_id, path=comment.path, position=comment.position)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, f"/pulls/{number}/comments"),
            PullComment,
            expected=201,
            body=comment,
        )

    async def edit_pull_comment(
        self, repo: str, comment_id: int, body: str, *, owner: str | None = None
    ) -> PullComment:
        require(comment_id=comment_id, body=body)
        return await self._fetch(
            "PATCH",
            self._repo_path(owner, repo, f"/pulls/comments/{comment_id}"),
            PullComment,
            body={"body": body},
        )

    async def delete_pull_comment(
        self, repo: str, comment_id: int, *, owner: str | None = None
    ) -> bool:
        require(comment_id=comment_id)
        return await self._check(
            "DELETE",
            self._repo_path(owner, repo, f"/pulls/comments/{comment_id}"),
            false_status=None,
        )
