"""Issues, assignees, issue events, milestones, comments and labels."""

from datetime import datetime

from ..base import BaseClient
from ..models import Comment, GitUser, Issue, IssueEvent, Label, Milestone
from ..payloads import IssueFields, MilestoneFields
from ..utils import iso_timestamp, quote_segment, require


class IssuesAPI(BaseClient):
    # Issues

    async def _list_issues(
        self,
        path: str,
        filter: str,
        state: str | None,
        labels: str | None,
        sort: str | None,
        direction: str | None,
        since: datetime | None,
    ) -> list[Issue]:
        require(filter=filter)
        params = {
            "filter": filter,
            "state": state,
            "labels": labels,
            "sort": sort,
            "direction": direction,
            "since": iso_timestamp(since),
        }
        return await self._fetch("GET", path, list[Issue], params=params)

    async def list_issues(
        self,
        filter: str,
        *,
        state: str | None = None,
        labels: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: datetime | None = None,
    ) -> list[Issue]:
        """
        List issues across all repositories visible to the authenticated user.

        Args:
            filter: assigned, created, mentioned, subscribed or all
            state: open or closed
            labels: Comma separated label names
            sort: created, updated or comments
            direction: asc or desc
            since: Only issues updated at or after this time
        """
        return await self._list_issues("/issues", filter, state, labels, sort, direction, since)

    async def list_user_issues(
        self,
        filter: str,
        *,
        state: str | None = None,
        labels: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: datetime | None = None,
    ) -> list[Issue]:
        """List issues in repositories owned by or shared with the authenticated user."""
        return await self._list_issues(
            "/user/issues", filter, state, labels, sort, direction, since
        )

    async def list_org_issues(
        self,
        org: str,
        filter: str,
        *,
        state: str | None = None,
        labels: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: datetime | None = None,
    ) -> list[Issue]:
        require(org=org)
        return await self._list_issues(
            f"/orgs/{quote_segment(org)}/issues", filter, state, labels, sort, direction, since
        )

    async def list_repo_issues(
        self,
        repo: str,
        *,
        owner: str | None = None,
        milestone: int | str | None = None,
        state: str | None = None,
        assignee: str | None = None,
        creator: str | None = None,
        mentioned: str | None = None,
        labels: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: datetime | None = None,
    ) -> list[Issue]:
        """
        List issues of a repository.

        ``milestone`` and ``assignee`` also accept "*" (any) and "none".
        """
        params = {
            "milestone": milestone,
            "state": state,
            "assignee": assignee,
            "creator": creator,
            "mentioned": mentioned,
            "labels": labels,
            "sort": sort,
            "direction": direction,
            "since": iso_timestamp(since),
        }
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/issues"), list[Issue], params=params
        )

    async def get_issue(self, repo: str, number: int, *, owner: str | None = None) -> Issue:
        require(number=number)
        return await self._fetch("GET", self._repo_path(owner, repo, f"/issues/{number}"), Issue)

    async def create_issue(
        self, repo: str, issue: IssueFields, *, owner: str | None = None
    ) -> Issue:
        require(title=issue.title)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/issues"),
            Issue,
            expected=201,
            body=issue,
        )

    async def edit_issue(
        self, repo: str, number: int, issue: IssueFields, *, owner: str | None = None
    ) -> Issue:
        """Edit an issue; only fields set on ``issue`` change."""
        require(number=number)
        return await self._fetch(
            "PATCH", self._repo_path(owner, repo, f"/issues/{number}"), Issue, body=issue
        )

    # Assignees

    async def list_assignees(self, repo: str, *, owner: str | None = None) -> list[GitUser]:
        """List users issues in the repository can be assigned to."""
        return await self._fetch("GET", self._repo_path(owner, repo, "/assignees"), list[GitUser])

    async def is_assignee(self, repo: str, assignee: str, *, owner: str | None = None) -> bool:
        require(assignee=assignee)
        return await self._check(
            "GET", self._repo_path(owner, repo, f"/assignees/{quote_segment(assignee)}")
        )

    # Events

    async def list_issue_events(
        self, repo: str, number: int, *, owner: str | None = None, page: int | None = None
    ) -> list[IssueEvent]:
        require(number=number)
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, f"/issues/{number}/events"),
            list[IssueEvent],
            params={"page": page},
        )

    async def list_repo_issue_events(
        self, repo: str, *, owner: str | None = None, page: int | None = None
    ) -> list[IssueEvent]:
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, "/issues/events"),
            list[IssueEvent],
            params={"page": page},
        )

    async def get_issue_event(
        self, repo: str, event_id: int, *, owner: str | None = None
    ) -> IssueEvent:
        require(event_id=event_id)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/issues/events/{event_id}"), IssueEvent
        )

    # Milestones

    async def list_milestones(
        self,
        repo: str,
        *,
        owner: str | None = None,
        state: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        page: int | None = None,
    ) -> list[Milestone]:
        params = {"state": state, "sort": sort, "direction": direction, "page": page}
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/milestones"), list[Milestone], params=params
        )

    async def get_milestone(self, repo: str, number: int, *, owner: str | None = None) -> Milestone:
        require(number=number)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/milestones/{number}"), Milestone
        )

    async def create_milestone(
        self, repo: str, milestone: MilestoneFields, *, owner: str | None = None
    ) -> Milestone:
        require(title=milestone.title)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/milestones"),
            Milestone,
            expected=201,
            body=milestone,
        )

    async def update_milestone(
        self, repo: str, number: int, milestone: MilestoneFields, *, owner: str | None = None
    ) -> Milestone:
        require(number=number)
        return await self._fetch(
            "PATCH",
            self._repo_path(owner, repo, f"/milestones/{number}"),
            Milestone,
            body=milestone,
        )

    async def delete_milestone(self, repo: str, number: int, *, owner: str | None = None) -> bool:
        require(number=number)
        return await self._check(
            "DELETE", self._repo_path(owner, repo, f"/milestones/{number}"), false_status=None
        )

    # Comments

    async def list_issue_comments(
        self, repo: str, number: int, *, owner: str | None = None
    ) -> list[Comment]:
        require(number=number)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/issues/{number}/comments"), list[Comment]
        )

    async def list_repo_issue_comments(
        self,
        repo: str,
        *,
        owner: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: datetime | None = None,
    ) -> list[Comment]:
        """List comments on every issue of a repository."""
        params = {"sort": sort, "direction": direction, "since": iso_timestamp(since)}
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/issues/comments"), list[Comment], params=params
        )

    async def get_issue_comment(
        self, repo: str, comment_id: int, *, owner: str | None = None
    ) -> Comment:
        require(comment_id=comment_id)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/issues/comments/{comment_id}"), Comment
        )

    async def create_issue_comment(
        self, repo: str, number: int, body: str, *, owner: str | None = None
    ) -> Comment:
        require(number=number, body=body)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, f"/issues/{number}/comments"),
            Comment,
            expected=201,
            body={"body": body},
        )

    async def edit_issue_comment(
        self, repo: str, comment_id: int, body: str, *, owner: str | None = None
    ) -> Comment:
        require(comment_id=comment_id, body=body)
        return await self._fetch(
            "PATCH",
            self._repo_path(owner, repo, f"/issues/comments/{comment_id}"),
            Comment,
            body={"body": body},
        )

    async def delete_issue_comment(
        self, repo: str, comment_id: int, *, owner: str | None = None
    ) -> bool:
        require(comment_id=comment_id)
        return await self._check(
            "DELETE",
            self._repo_path(owner, repo, f"/issues/comments/{comment_id}"),
            false_status=None,
        )

    # Labels

    async def list_labels(self, repo: str, *, owner: str | None = None) -> list[Label]:
        return await self._fetch("GET", self._repo_path(owner, repo, "/labels"), list[Label])

    async def get_label(self, repo: str, name: str, *, owner: str | None = None) -> Label:
        require(name=name)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/labels/{quote_segment(name)}"), Label
        )

    async def create_label(
        self, repo: str, name: str, color: str, *, owner: str | None = None
    ) -> Label:
        """Create a label; ``color`` is a six digit hex code without the leading #."""
        require(name=name, color=color)
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, "/labels"),
            Label,
            expected=201,
            body={"name": name, "color": color.lstrip("#")},
        )

    async def update_label(
        self,
        repo: str,
        name: str,
        *,
        new_name: str | None = None,
        color: str | None = None,
        owner: str | None = None,
    ) -> Label:
        require(name=name)
        body = {"name": new_name or name, "color": color.lstrip("#") if color else None}
        return await self._fetch(
            "PATCH",
            self._repo_path(owner, repo, f"/labels/{quote_segment(name)}"),
            Label,
            body=body,
        )

    async def delete_label(self, repo: str, name: str, *, owner: str | None = None) -> bool:
        require(name=name)
        return await self._check(
            "DELETE",
            self._repo_path(owner, repo, f"/labels/{quote_segment(name)}"),
            false_status=None,
        )

    async def list_issue_labels(
        self, repo: str, number: int, *, owner: str | None = None
    ) -> list[Label]:
        require(number=number)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/issues/{number}/labels"), list[Label]
        )

    async def add_issue_labels(
        self, repo: str, number: int, labels: list[str], *, owner: str | None = None
    ) -> list[Label]:
        """Add labels to an issue and return the issue's full label list."""
        require(number=number, labels=",".join(labels))
        return await self._fetch(
            "POST",
            self._repo_path(owner, repo, f"/issues/{number}/labels"),
            list[Label],
            body=labels,
        )

    async def remove_issue_label(
        self, repo: str, number: int, name: str, *, owner: str | None = None
    ) -> bool:
        require(number=number, name=name)
        return await self._check(
            "DELETE",
            self._repo_path(owner, repo, f"/issues/{number}/labels/{quote_segment(name)}"),
            false_status=None,
        )

    async def replace_issue_labels(
        self, repo: str, number: int, labels: list[str], *, owner: str | None = None
    ) -> list[Label]:
        """Replace every label of an issue; an empty list clears them."""
        require(number=number)
        return await self._fetch(
            "PUT",
            self._repo_path(owner, repo, f"/issues/{number}/labels"),
            list[Label],
            body=labels,
        )

    async def remove_issue_labels(self, repo: str, number: int, *, owner: str | None = None) -> bool:
        """Remove every label from an issue."""
        require(number=number)
        return await self._check(
            "DELETE",
            self._repo_path(owner, repo, f"/issues/{number}/labels"),
            false_status=None,
        )

    async def list_milestone_labels(
        self, repo: str, number: int, *, owner: str | None = None
    ) -> list[Label]:
        """List labels of every issue in a milestone."""
        require(number=number)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, f"/milestones/{number}/labels"), list[Label]
        )
