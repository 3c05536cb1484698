"""Events, notifications, starring and watching."""

from datetime import datetime

from ..base import BaseClient
from ..exceptions import InvalidArgumentError
from ..models import Event, GitUser, Notification, Repo, Subscription
from ..utils import iso_timestamp, quote_segment, require

# GitHub serves at most ten pages of any event timeline.
MAX_EVENT_PAGE = 10


def _event_page(page: int) -> dict[str, int]:
    if not 1 <= page <= MAX_EVENT_PAGE:
        raise InvalidArgumentError(
            ["page"], f"page must be between 1 and {MAX_EVENT_PAGE}, got {page}"
        )
    return {"page": page}


class ActivityAPI(BaseClient):
    # Events

    async def list_public_events(self, page: int = 1) -> list[Event]:
        """List public events across GitHub."""
        return await self._fetch("GET", "/events", list[Event], params=_event_page(page))

    async def list_repo_events(
        self, repo: str, *, owner: str | None = None, page: int = 1
    ) -> list[Event]:
        params = _event_page(page)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/events"), list[Event], params=params
        )

    async def list_repo_issues_events(
        self, repo: str, *, owner: str | None = None, page: int = 1
    ) -> list[Event]:
        """List issue events of a repository as activity events."""
        params = _event_page(page)
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/issues/events"), list[Event], params=params
        )

    async def list_network_events(
        self, repo: str, *, owner: str | None = None, page: int = 1
    ) -> list[Event]:
        """List public events for the fork network of a repository."""
        params = _event_page(page)
        owner = self._owner(owner)
        require(owner=owner, repo=repo)
        path = f"/networks/{quote_segment(owner)}/{quote_segment(repo)}/events"
        return await self._fetch("GET", path, list[Event], params=params)

    async def list_org_events(self, org: str, page: int = 1) -> list[Event]:
        """List public events for an organization."""
        params = _event_page(page)
        require(org=org)
        return await self._fetch(
            "GET", f"/orgs/{quote_segment(org)}/events", list[Event], params=params
        )

    async def _user_events(self, user: str, suffix: str, page: int) -> list[Event]:
        params = _event_page(page)
        require(user=user)
        return await self._fetch(
            "GET", f"/users/{quote_segment(user)}{suffix}", list[Event], params=params
        )

    async def list_received_events(self, user: str, page: int = 1) -> list[Event]:
        """List events a user receives; private ones only for the authenticated user."""
        return await self._user_events(user, "/received_events", page)

    async def list_public_received_events(self, user: str, page: int = 1) -> list[Event]:
        return await self._user_events(user, "/received_events/public", page)

    async def list_user_events(self, user: str, page: int = 1) -> list[Event]:
        """List events performed by a user."""
        return await self._user_events(user, "/events", page)

    async def list_public_user_events(self, user: str, page: int = 1) -> list[Event]:
        return await self._user_events(user, "/events/public", page)

    async def list_user_org_events(self, user: str, org: str, page: int = 1) -> list[Event]:
        """List an organization's events from the authenticated user's dashboard."""
        require(org=org)
        return await self._user_events(user, f"/events/orgs/{quote_segment(org)}", page)

    # Notifications

    async def list_notifications(
        self,
        *,
        all: bool | None = None,
        participating: bool | None = None,
        since: datetime | None = None,
    ) -> list[Notification]:
        """
        List notifications for the authenticated user.

        Args:
            all: Include notifications already marked as read
            participating: Only notifications the user directly participates in
            since: Only notifications updated after this time
        """
        params = {"all": all, "participating": participating, "since": iso_timestamp(since)}
        return await self._fetch("GET", "/notifications", list[Notification], params=params)

    async def list_repo_notifications(
        self,
        repo: str,
        *,
        owner: str | None = None,
        all: bool | None = None,
        participating: bool | None = None,
        since: datetime | None = None,
    ) -> list[Notification]:
        params = {"all": all, "participating": participating, "since": iso_timestamp(since)}
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, "/notifications"),
            list[Notification],
            params=params,
        )

    async def mark_notifications_read(
        self, *, unread: bool = False, last_read_at: datetime | None = None
    ) -> bool:
        """
        Mark every notification as read (or unread).

        Args:
            unread: Mark as unread instead of read
            last_read_at: Only notifications updated before this time are affected
        """
        params = {"unread" if unread else "read": True, "last_read_at": iso_timestamp(last_read_at)}
        return await self._check(
            "PUT", "/notifications", true_status=205, false_status=None, params=params
        )

    async def get_notification_thread(self, thread_id: int | str) -> Notification:
        require(thread_id=thread_id)
        return await self._fetch(
            "GET", f"/notifications/threads/{quote_segment(thread_id)}", Notification
        )

    async def mark_thread_read(self, thread_id: int | str) -> bool:
        require(thread_id=thread_id)
        return await self._check(
            "PATCH",
            f"/notifications/threads/{quote_segment(thread_id)}",
            true_status=205,
            false_status=None,
            params={"read": True},
        )

    async def get_thread_subscription(self, thread_id: int | str) -> Subscription:
        require(thread_id=thread_id)
        return await self._fetch(
            "GET",
            f"/notifications/threads/{quote_segment(thread_id)}/subscription",
            Subscription,
        )

    async def set_thread_subscription(
        self, thread_id: int | str, *, subscribed: bool = True, ignored: bool = False
    ) -> Subscription:
        """Subscribe to, or ignore, a notification thread."""
        require(thread_id=thread_id)
        return await self._fetch(
            "PUT",
            f"/notifications/threads/{quote_segment(thread_id)}/subscription",
            Subscription,
            params={"subscribed": subscribed, "ignored": ignored},
        )

    async def delete_thread_subscription(self, thread_id: int | str) -> bool:
        require(thread_id=thread_id)
        return await self._check(
            "DELETE",
            f"/notifications/threads/{quote_segment(thread_id)}/subscription",
            false_status=None,
        )

    # Starring

    async def list_stargazers(
        self, repo: str, *, owner: str | None = None, page: int | None = None
    ) -> list[GitUser]:
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, "/stargazers"),
            list[GitUser],
            params={"page": page},
        )

    async def list_starred_repos(
        self, *, sort: str | None = None, direction: str | None = None
    ) -> list[Repo]:
        """List repositories starred by the authenticated user."""
        return await self._fetch(
            "GET",
            "/user/starred",
            list[Repo],
            params={"sort": sort, "direction": direction},
        )

    def _starred_path(self, owner: str | None, repo: str) -> str:
        owner = self._owner(owner)
        require(owner=owner, repo=repo)
        return f"/user/starred/{quote_segment(owner)}/{quote_segment(repo)}"

    async def is_starring(self, repo: str, *, owner: str | None = None) -> bool:
        """Check whether the authenticated user starred a repository."""
        return await self._check("GET", self._starred_path(owner, repo))

    async def star_repo(self, repo: str, *, owner: str | None = None) -> bool:
        return await self._check("PUT", self._starred_path(owner, repo), false_status=None)

    async def unstar_repo(self, repo: str, *, owner: str | None = None) -> bool:
        return await self._check("DELETE", self._starred_path(owner, repo), false_status=None)

    # Watching

    async def list_watchers(
        self, repo: str, *, owner: str | None = None, page: int | None = None
    ) -> list[GitUser]:
        return await self._fetch(
            "GET",
            self._repo_path(owner, repo, "/subscribers"),
            list[GitUser],
            params={"page": page},
        )

    async def list_watched_repos(self, page: int | None = None) -> list[Repo]:
        """List repositories watched by the authenticated user."""
        return await self._fetch("GET", "/user/subscriptions", list[Repo], params={"page": page})

    async def get_repo_subscription(self, repo: str, *, owner: str | None = None) -> Subscription:
        return await self._fetch(
            "GET", self._repo_path(owner, repo, "/subscription"), Subscription
        )

    async def set_repo_subscription(
        self,
        repo: str,
        *,
        owner: str | None = None,
        subscribed: bool = True,
        ignored: bool = False,
    ) -> Subscription:
        """Watch a repository, or ignore its notifications when ``ignored`` is set."""
        return await self._fetch(
            "PUT",
            self._repo_path(owner, repo, "/subscription"),
            Subscription,
            params={"subscribed": subscribed, "ignored": ignored},
        )

    async def delete_repo_subscription(self, repo: str, *, owner: str | None = None) -> bool:
        """Stop watching a repository."""
        return await self._check(
            "DELETE", self._repo_path(owner, repo, "/subscription"), false_status=None
        )
