"""Users, emails, public keys and followers."""

from ..base import BaseClient
from ..config import settings
from ..exceptions import InvalidArgumentError
from ..models import GitUser, Key, User
from ..utils import quote_segment, require


class UsersAPI(BaseClient):
    async def get_authenticated_user(self) -> User:
        return await self._fetch("GET", "/user", User)

    async def get_user(self, username: str) -> User:
        require(username=username)
        return await self._fetch("GET", f"/users/{quote_segment(username)}", User)

    async def update_authenticated_user(
        self,
        *,
        name: str | None = None,
        email: str | None = None,
        blog: str | None = None,
        company: str | None = None,
        location: str | None = None,
        hireable: bool | None = None,
        bio: str | None = None,
    ) -> User:
        """Update the authenticated user's profile; unset fields are left unchanged."""
        body = {
            "name": name,
            "email": email,
            "blog": blog,
            "company": company,
            "location": location,
            "hireable": hireable,
            "bio": bio,
        }
        return await self._fetch("PATCH", "/user", User, body=body)

    # Emails

    async def list_emails(self) -> list[str]:
        return await self._fetch("GET", "/user/emails", list[str])

    async def add_emails(self, *emails: str) -> list[str]:
        """Add email addresses and return the user's full address list."""
        if not emails:
            raise InvalidArgumentError(["emails"])
        require(**{f"emails[{i}]": email for i, email in enumerate(emails)})
        return await self._fetch(
            "POST",
            "/user/emails",
            list[str],
            expected=201,
            body=list(emails),
            content_type="text/plain",
        )

    async def delete_emails(self, *emails: str) -> bool:
        if not emails:
            raise InvalidArgumentError(["emails"])
        require(**{f"emails[{i}]": email for i, email in enumerate(emails)})
        return await self._check(
            "DELETE",
            "/user/emails",
            false_status=None,
            body=list(emails),
            content_type="text/plain",
        )

    # Public keys

    async def list_keys(self) -> list[Key]:
        """List public keys of the authenticated user."""
        return await self._fetch("GET", "/user/keys", list[Key])

    async def list_user_keys(self, username: str) -> list[Key]:
        """List verified public keys of any user."""
        require(username=username)
        return await self._fetch("GET", f"/users/{quote_segment(username)}/keys", list[Key])

    async def get_key(self, key_id: int) -> Key:
        require(key_id=key_id)
        return await self._fetch("GET", f"/user/keys/{key_id}", Key)

    async def create_key(self, key: str, title: str | None = None) -> Key:
        """Add a public key; ``title`` defaults to settings.default_key_title."""
        require(key=key)
        return await self._fetch(
            "POST",
            "/user/keys",
            Key,
            expected=201,
            body={"key": key, "title": title or settings.default_key_title},
        )

    async def update_key(self, key_id: int, *, key: str | None = None, title: str | None = None) -> Key:
        require(key_id=key_id)
        return await self._fetch(
            "PATCH", f"/user/keys/{key_id}", Key, body={"key": key, "title": title}
        )

    async def delete_key(self, key_id: int) -> bool:
        require(key_id=key_id)
        return await self._check("DELETE", f"/user/keys/{key_id}", false_status=None)

    # Followers

    async def list_followers(self) -> list[GitUser]:
        return await self._fetch("GET", "/user/followers", list[GitUser])

    async def list_following(self) -> list[GitUser]:
        return await self._fetch("GET", "/user/following", list[GitUser])

    async def is_following(self, user: str) -> bool:
        """Check whether the authenticated user follows ``user``."""
        require(user=user)
        return await self._check("GET", f"/user/following/{quote_segment(user)}")

    async def follow_user(self, user: str) -> bool:
        require(user=user)
        return await self._check(
            "PUT", f"/user/following/{quote_segment(user)}", false_status=None
        )

    async def unfollow_user(self, user: str) -> bool:
        require(user=user)
        return await self._check(
            "DELETE", f"/user/following/{quote_segment(user)}", false_status=None
        )
